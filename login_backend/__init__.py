"""Registration and login backend backed by an in-memory user store."""

__version__ = "1.0.0"
