"""Solutions to classic array, string, dynamic-programming and arithmetic puzzles."""

__version__ = "0.1.0"

__all__ = ["nodes", "array_counting", "array_building", "strings", "dynamic", "arithmetic"]