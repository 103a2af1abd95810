"""Logophile - dictionary lookup and spaced-repetition vocabulary review."""

__version__ = "0.1.0"
