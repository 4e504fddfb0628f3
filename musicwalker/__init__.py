"""A small desktop MP3 player with a play queue and history."""

__version__ = "0.1.0"
__all__ = ["__version__"]