"""Recipe Box API: household-scoped recipe retrieval and video import helpers."""

__version__ = "0.1.0"
