"""Pyramid, layer and tile geometry."""

from .errors import DeepZoomError, InvalidCoordinate, InvalidLevel
from .layer import Layer, halve
from .pyramid import PyramidConfig
from .tile import Tile
from .types import LevelInfo, Rect, Size, TileCoord

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
    "halve",
]
