"""C-style printf formatting and scanf parsing: floatfmt, printf and scanf."""

__version__ = "0.1.0"
__all__ = ["floatfmt", "printf", "scanf"]