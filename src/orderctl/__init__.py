"""orderctl — order assembly toolkit."""

__version__ = "0.1.0"
