"""Pyramid configuration and level range for Deep Zoom images."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator

from deepzoom import config

from .errors import InvalidLevel
from .layer import Layer
from .types import LevelInfo

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PyramidConfig:
    """Source image size and tiling parameters of a Deep Zoom pyramid.

    The tile size and overlap must match the values expected by the viewer
    that consumes the tiles. Levels are numbered the Deep Zoom way: the
    highest level is the image at 1:1 and each level below halves it.

    Attributes:
        width: Source image width in pixels
        height: Source image height in pixels
        tile_size: Edge length of a tile without overlap
        overlap: Extra border pixels added to each tile edge
    """

    width: int
    height: int
    tile_size: int = field(default_factory=lambda: config.DEFAULT_TILE_SIZE)
    overlap: int = field(default_factory=lambda: config.DEFAULT_OVERLAP)

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError(
                f"Image dimensions must be positive, got {self.width}x{self.height}"
            )
        if self.tile_size < 1:
            raise ValueError(f"tile_size must be positive, got {self.tile_size}")
        if self.overlap < 0:
            raise ValueError(f"overlap must not be negative, got {self.overlap}")
        if self.overlap >= self.tile_size:
            logger.warning(
                "overlap=%d is not smaller than tile_size=%d, tile bounds will be degenerate",
                self.overlap, self.tile_size,
            )

    def max_level(self) -> int:
        """Return the level corresponding to 1:1 resolution.

        This is ``ceil(log2(max(width, height)))``, computed with integer
        arithmetic so that ``2 ** max_level >= max(width, height)`` holds
        exactly. Levels beyond it would only scale the image up.
        """
        return (max(self.width, self.height) - 1).bit_length()

    def min_level(self) -> int:
        """Return the lowest level whose larger dimension spans more than one tile.

        Halving the larger dimension ``n = ceil(log2(max_dim / tile_size))``
        times is the first point where it fits a single tile, so the lowest
        multi-tile level is ``max_level - n + 1``. Levels below that would be
        one tile shrinking towards 1x1 and are not addressable. An image that
        already fits one tile only has ``max_level``.
        """
        dim = max(self.width, self.height)
        steps = 0
        while dim > self.tile_size:
            dim = (dim + 1) >> 1
            steps += 1
        if steps == 0:
            return self.max_level()
        return self.max_level() - steps + 1

    def levels(self) -> range:
        """Return the addressable levels, lowest resolution first."""
        return range(self.min_level(), self.max_level() + 1)

    def layer(self, level: int) -> Layer:
        """Return the layer for the requested level.

        Args:
            level: Zoom level in ``[min_level, max_level]``

        Returns:
            Layer referencing this configuration

        Raises:
            InvalidLevel: If the level is outside the addressable range
        """
        min_level = self.min_level()
        max_level = self.max_level()
        if level < min_level or level > max_level:
            raise InvalidLevel(level, min_level, max_level)

        scale = 0.5 ** (max_level - level)
        logger.debug("Layer %d of %dx%d: scale %g", level, self.width, self.height, scale)
        return Layer(config=self, level=level, scale=scale)

    def layers(self) -> Iterator[Layer]:
        """Iterate over all addressable layers, lowest resolution first."""
        for level in self.levels():
            yield self.layer(level)

    def level_info(self) -> list[LevelInfo]:
        """Summarise every addressable level.

        Returns:
            List of LevelInfo, lowest resolution first
        """
        return [layer.info() for layer in self.layers()]

    def tile_count(self) -> int:
        """Total number of tiles across all addressable levels."""
        return sum(info.tile_count for info in self.level_info())
