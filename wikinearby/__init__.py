"""Find Wikipedia articles near a place and manage their map markers."""

__version__ = "1.0.0"
