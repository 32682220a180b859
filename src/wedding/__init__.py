"""Wedding website back end: guest lookup for attendance confirmation."""

__version__ = "0.1.0"
