"""ValueTracker — holds the current value and the one it replaced."""

from __future__ import annotations

import copy
import logging
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ValueTracker(Generic[T]):
    """
    Two-slot holder: the most recently set value plus the value it displaced.

    Usage:
        tracker = ValueTracker(0)
        tracker.update(1)
        # tracker.current  → 1
        # tracker.previous → 0

    Absence of a previous value is tracked with a flag rather than by
    inspecting the stored value, so None is a legal T. Check has_previous
    when None is something you actually store.
    """

    def __init__(self, initial: T) -> None:
        self._current: T = initial
        self._previous: T | None = None
        self._has_previous = False

    @property
    def current(self) -> T:
        return self._current

    @property
    def previous(self) -> T | None:
        """The value displaced by the last update, or None when absent."""
        return self._previous if self._has_previous else None

    @property
    def has_previous(self) -> bool:
        return self._has_previous

    def update(self, new: T) -> None:
        """Shift current into the previous slot and install new as current."""
        self._previous = self._current
        self._has_previous = True
        self._current = new

    def reset(self, new: T) -> None:
        """Start over from new. The old current is dropped, not shifted."""
        logger.debug("Resetting tracker (had previous: %s)", self._has_previous)
        self._current = new
        self._previous = None
        self._has_previous = False

    def clear_previous(self) -> None:
        """Drop the previous value, leaving current as is. Safe to repeat."""
        if self._has_previous:
            logger.debug("Clearing previous value")
        self._previous = None
        self._has_previous = False

    # ------------------------------------------------------------------ copying

    def copy(self) -> ValueTracker[T]:
        """Return an independent tracker holding the same two values."""
        clone = type(self).__new__(type(self))
        clone.__dict__.update(self.__dict__)
        return clone

    __copy__ = copy

    def __deepcopy__(self, memo: dict[int, Any]) -> ValueTracker[T]:
        clone = type(self).__new__(type(self))
        memo[id(self)] = clone
        for name, value in self.__dict__.items():
            setattr(clone, name, copy.deepcopy(value, memo))
        return clone

    # ------------------------------------------------------------------ dunder

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValueTracker):
            return NotImplemented
        if self._has_previous != other._has_previous:
            return False
        if self._has_previous and self._previous != other._previous:
            return False
        return self._current == other._current

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        previous = repr(self._previous) if self._has_previous else "<absent>"
        return f"{type(self).__name__}(current={self._current!r}, previous={previous})"
