"""Reverse Polish notation calculator, its command line, and small terminal colour helpers."""

__version__ = "1.0.0"
__all__ = ["cli", "colors", "hello", "rpn"]