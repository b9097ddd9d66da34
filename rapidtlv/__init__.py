"""Build, encode and parse compact type-length-value messages."""

__version__ = "0.1.1"
__all__ = ["errors", "field", "message"]