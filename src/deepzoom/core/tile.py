"""Bounding boxes of individual tiles."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .types import Rect, Size, TileCoord

if TYPE_CHECKING:
    from .layer import Layer


@dataclass(frozen=True)
class Tile:
    """A tile within a Layer.

    Obtain tiles from :meth:`Layer.tile`, which validates the coordinates.

    Attributes:
        layer: Layer this tile belongs to (borrowed, never modified)
        col: Column index (X)
        row: Row index (Y)
    """

    layer: Layer
    col: int
    row: int

    @property
    def coord(self) -> TileCoord:
        return TileCoord(level=self.layer.level, col=self.col, row=self.row)

    def bounds(self) -> Rect:
        """Return the tile rectangle in the layer's coordinate space.

        The rectangle includes the overlap border: leading edges extend back
        by ``overlap`` except on the first row/column, trailing edges always
        extend forward by ``overlap``. The result never exceeds the layer
        canvas.

        Returns:
            Inclusive Rect in layer pixels
        """
        tile_size = self.layer.config.tile_size
        overlap = self.layer.config.overlap

        x1 = self.col * tile_size
        y1 = self.row * tile_size
        x2 = x1 + tile_size - 1 + overlap
        y2 = y1 + tile_size - 1 + overlap

        if self.col > 0:
            x1 -= overlap
        if self.row > 0:
            y1 -= overlap

        canvas = self.layer.bounds()
        if x2 >= canvas.width:
            x2 = canvas.width - 1
        if y2 >= canvas.height:
            y2 = canvas.height - 1

        return Rect(x1, y1, x2, y2)

    def size(self) -> Size:
        """Pixel size of the tile including overlap."""
        return self.bounds().size

    def crop_scale(self) -> tuple[Rect, Size]:
        """Map the tile back onto the original image.

        Cropping the returned rectangle from the full-resolution image and
        resizing it to the returned size gives the same tile as scaling the
        whole image to the layer canvas first and then cropping
        :meth:`bounds`, without materialising the scaled image.

        Returns:
            Tuple of (crop rectangle in original image pixels, target size)
        """
        rect = self.bounds()
        scale = self.layer.scale
        width = self.layer.config.width
        height = self.layer.config.height

        x1, y1, x2, y2 = (math.ceil(value / scale) for value in rect)
        if x2 >= width:
            x2 = width - 1
        if y2 >= height:
            y2 = height - 1

        return Rect(x1, y1, x2, y2), rect.size
