"""A printf-style formatter with its own flag rules, plus ASCII string and integer helpers."""

__version__ = "0.1.0"
__all__ = ["flags", "floatfmt", "intfmt", "numbers", "printf", "textutils"]