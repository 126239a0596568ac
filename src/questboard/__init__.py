"""Quest-based learning progress tracker."""

__version__ = "0.1.0"
