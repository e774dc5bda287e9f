"""Classic algorithm exercises: searching, sorting, arrays, strings, recursion, numbers and patterns."""

__version__ = "0.1.0"

__all__ = ["arrays", "numbers", "patterns", "recursion", "searching", "sorting", "strings"]