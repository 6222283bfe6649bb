"""Data sources of (x, y) pairs for plotting, with dependant notification."""

__version__ = "0.1.15"
__all__ = ["array", "bucket", "buffer", "colours", "data"]