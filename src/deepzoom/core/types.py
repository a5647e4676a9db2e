"""Shared type definitions for the deepzoom core module."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


class Size(NamedTuple):
    """Pixel size of a canvas or tile."""

    width: int
    height: int


class Rect(NamedTuple):
    """Inclusive pixel rectangle.

    Both corners are part of the rectangle, so a single pixel at the origin
    is ``Rect(0, 0, 0, 0)``.

    Attributes:
        x1: Left column
        y1: Top row
        x2: Right column (inclusive)
        y2: Bottom row (inclusive)
    """

    x1: int
    y1: int
    x2: int
    y2: int

    @property
    def width(self) -> int:
        return self.x2 - self.x1 + 1

    @property
    def height(self) -> int:
        return self.y2 - self.y1 + 1

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)


class TileCoord(NamedTuple):
    """Coordinate of a tile in the pyramid.

    Attributes:
        level: Pyramid level (max level = full resolution)
        col: Column index (0-based)
        row: Row index (0-based)
    """

    level: int
    col: int
    row: int


@dataclass(frozen=True)
class LevelInfo:
    """Information about a pyramid level.

    Attributes:
        level: Level index (max level = full resolution)
        scale: Resize ratio relative to the original image
        downsample: Downsample factor relative to full resolution (1 = full res)
        width: Canvas width at this level
        height: Canvas height at this level
        cols: Number of tile columns at this level
        rows: Number of tile rows at this level
    """

    level: int
    scale: float
    downsample: int
    width: int
    height: int
    cols: int
    rows: int

    @property
    def tile_count(self) -> int:
        return self.cols * self.rows
