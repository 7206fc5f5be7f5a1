"""Version information for gsearch."""

__version__ = "0.1.0"
