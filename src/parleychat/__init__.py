"""Chat message attachment model and test tools."""

__version__ = "0.1.0"
