"""A small printf-style formatter with flags, width and precision, plus string helpers."""

__version__ = "0.1.0"
__all__ = ["conversions", "padding", "printf", "spec", "text"]