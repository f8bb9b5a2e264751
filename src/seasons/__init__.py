"""Four Seasons — a four-player hot-seat chess variant."""

__version__ = "0.1.0"
