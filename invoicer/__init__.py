"""Multi-currency invoice total calculator."""

__version__ = "0.1.0"
