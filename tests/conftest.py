"""Test fixtures for deepzoom tests."""

from __future__ import annotations

import pytest

from deepzoom import Layer, PyramidConfig


@pytest.fixture
def photo_config() -> PyramidConfig:
    """8000x6000 image, 256px tiles, no overlap."""
    return PyramidConfig(8000, 6000, tile_size=256, overlap=0)


@pytest.fixture
def overlap_config() -> PyramidConfig:
    """4224x3168 image, 256px tiles, 1px overlap."""
    return PyramidConfig(4224, 3168, tile_size=256, overlap=1)


@pytest.fixture
def overlap_layer(overlap_config: PyramidConfig) -> Layer:
    """Level 11 of the overlap config: 1056x792 canvas, 5x4 tiles."""
    return overlap_config.layer(11)
