"""Geometry of a single zoom level."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator

import numpy as np

from deepzoom import config

from .errors import InvalidCoordinate
from .tile import Tile
from .types import LevelInfo, Size

if TYPE_CHECKING:
    from .pyramid import PyramidConfig

logger = logging.getLogger(__name__)


def halve(dimension: int, times: int) -> int:
    """Ceiling-halve a dimension ``times`` times.

    Each step is ``(dim + 1) >> 1``, so every level is exactly the rounded-up
    half of the level above it. This matches libvips dzsave and the viewers
    that reconstruct the pyramid from the descriptor.
    """
    for _ in range(times):
        dimension = (dimension + 1) >> 1
    return dimension


@dataclass(frozen=True)
class Layer:
    """One zoom level of the pyramid.

    Obtain layers from :meth:`PyramidConfig.layer`, which validates the level.

    Attributes:
        config: Pyramid this layer belongs to (borrowed, never modified)
        level: Zoom level
        scale: Resize ratio relative to the original image, ``2 ** (level - max_level)``
    """

    config: PyramidConfig
    level: int
    scale: float

    def bounds(self) -> Size:
        """Return the canvas size the original image is scaled to at this level.

        Computed by iterative ceiling-halving from full resolution, which is
        the canonical definition. :meth:`scaled_bounds` is the closed form.
        """
        steps = self.config.max_level() - self.level
        return Size(
            halve(self.config.width, steps),
            halve(self.config.height, steps),
        )

    def scaled_bounds(self) -> Size:
        """Return ``ceil(width * scale) x ceil(height * scale)``.

        Agrees with :meth:`bounds` because nested ceiling divisions by two
        equal one ceiling division by the power of two, and ``scale`` is an
        exact binary fraction.
        """
        return Size(
            math.ceil(self.config.width * self.scale),
            math.ceil(self.config.height * self.scale),
        )

    def dimensions(self) -> tuple[int, int]:
        """Return the number of tile columns and rows for this level."""
        width, height = self.bounds()
        tile_size = self.config.tile_size
        cols = (width + tile_size - 1) // tile_size
        rows = (height + tile_size - 1) // tile_size
        return cols, rows

    def tile(self, col: int, row: int, strict: bool | None = None) -> Tile:
        """Return the tile at the given column and row.

        By default ``col == cols`` and ``row == rows`` are accepted, one past
        the last grid cell, for compatibility with existing callers. Such a
        tile has an empty (inverted) bounding box.

        Args:
            col: Column index (0-based)
            row: Row index (0-based)
            strict: Reject the one-past-the-grid coordinates. Defaults to
                ``config.STRICT_TILE_BOUNDS``.

        Returns:
            Tile referencing this layer

        Raises:
            InvalidCoordinate: If the column or row is outside the grid
        """
        if strict is None:
            strict = config.STRICT_TILE_BOUNDS

        cols, rows = self.dimensions()
        last_col, last_row = (cols - 1, rows - 1) if strict else (cols, rows)
        if col < 0 or col > last_col or row < 0 or row > last_row:
            raise InvalidCoordinate(col, row, cols, rows)

        if col == cols or row == rows:
            logger.debug(
                "Accepting tile %d:%d one past the %dx%d grid at level %d",
                col, row, cols, rows, self.level,
            )
        return Tile(layer=self, col=col, row=row)

    def tiles(self) -> Iterator[Tile]:
        """Iterate over all tiles in the grid, row by row.

        Yields:
            Tile for each grid cell
        """
        cols, rows = self.dimensions()
        for row in range(rows):
            for col in range(cols):
                yield Tile(layer=self, col=col, row=row)

    def tile_bounds_array(self) -> np.ndarray:
        """Compute the bounds of every tile in the grid at once.

        Vectorised equivalent of calling :meth:`Tile.bounds` on each tile
        from :meth:`tiles`.

        Returns:
            int64 array of shape (rows, cols, 4) holding (x1, y1, x2, y2)
        """
        cols, rows = self.dimensions()
        width, height = self.bounds()
        tile_size = self.config.tile_size
        overlap = self.config.overlap

        x_start = np.arange(cols, dtype=np.int64) * tile_size
        y_start = np.arange(rows, dtype=np.int64) * tile_size
        x1 = np.where(x_start > 0, x_start - overlap, x_start)
        y1 = np.where(y_start > 0, y_start - overlap, y_start)
        x2 = np.minimum(x_start + tile_size - 1 + overlap, width - 1)
        y2 = np.minimum(y_start + tile_size - 1 + overlap, height - 1)

        out = np.empty((rows, cols, 4), dtype=np.int64)
        out[..., 0] = x1[np.newaxis, :]
        out[..., 1] = y1[:, np.newaxis]
        out[..., 2] = x2[np.newaxis, :]
        out[..., 3] = y2[:, np.newaxis]
        return out

    def info(self) -> LevelInfo:
        """Return a summary of this level."""
        width, height = self.bounds()
        cols, rows = self.dimensions()
        return LevelInfo(
            level=self.level,
            scale=self.scale,
            downsample=2 ** (self.config.max_level() - self.level),
            width=width,
            height=height,
            cols=cols,
            rows=rows,
        )
