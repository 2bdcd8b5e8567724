"""Airspace grids, geo/world coordinates, weather reports, PLY point clouds, flight paths, block streaming and action messages."""

__version__ = "0.1.0"

__all__ = [
    "airgrid",
    "flight",
    "geo",
    "messages",
    "objconvert",
    "paths",
    "ply",
    "server",
    "streaming",
    "weather",
]