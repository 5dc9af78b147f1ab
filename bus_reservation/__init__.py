"""In-memory bus trip catalog with seat booking."""

__version__ = "0.1.0"
