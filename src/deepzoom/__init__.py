"""deepzoom - Tile addressing for Deep Zoom image pyramids.

Given an image's pixel size, a tile size and an overlap, computes the valid
zoom levels, each level's canvas and tile grid, and every tile's bounding
box in level space and in the original image.
"""

__version__ = "0.1.0"

from deepzoom.core import (
    DeepZoomError,
    InvalidCoordinate,
    InvalidLevel,
    Layer,
    LevelInfo,
    PyramidConfig,
    Rect,
    Size,
    Tile,
    TileCoord,
)

__all__ = [
    "DeepZoomError",
    "InvalidCoordinate",
    "InvalidLevel",
    "Layer",
    "LevelInfo",
    "PyramidConfig",
    "Rect",
    "Size",
    "Tile",
    "TileCoord",
]
