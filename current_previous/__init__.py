from current_previous.tracker import ValueTracker

__all__ = ["ValueTracker"]
