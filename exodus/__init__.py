"""Exodus: a tile-based exploration game, its world model, and tools for its plant data."""

__version__ = "0.1.0"