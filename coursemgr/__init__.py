"""Course management: courses, topics, tests, an interactive menu and JSON save/load."""

__version__ = "0.1.0"
__all__ = ["models", "topics", "manager", "cli"]