"""Interactive Go exercises: list, run, hint, verify and watch them from the command line."""

__version__ = "0.1.0"