"""Deep Sleep - personal sleep-log tracker."""

__version__ = "1.0.0"
