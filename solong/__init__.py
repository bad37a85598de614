"""A tile-based maze puzzle game with map validation."""

__version__ = "0.1.0"
__all__ = ["display", "game", "linereader", "mapfile", "numconv", "printf", "strings"]