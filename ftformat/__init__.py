"""printf-style formatting with width and precision, plus character, number, string and list helpers."""

__version__ = "0.1.0"

__all__ = ["chars", "formatter", "linkedlist", "numconv", "output", "textutils"]