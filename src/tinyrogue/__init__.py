"""tinyrogue - a tiny turn-based dungeon crawler core."""

__all__ = ["__version__"]

__version__ = "0.1.0"
