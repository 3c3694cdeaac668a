"""Windows toast notifications from Python."""

__version__ = "0.1.0"
