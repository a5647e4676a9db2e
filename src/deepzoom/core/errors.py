"""Exceptions raised by pyramid addressing."""

from __future__ import annotations


class DeepZoomError(Exception):
    """Base class for pyramid addressing errors."""


class InvalidLevel(DeepZoomError, ValueError):
    """Requested level is outside ``[min_level, max_level]``."""

    def __init__(self, level: int, min_level: int, max_level: int) -> None:
        super().__init__(
            f"invalid level {level}: expected {min_level} <= level <= {max_level}"
        )
        self.level = level
        self.min_level = min_level
        self.max_level = max_level


class InvalidCoordinate(DeepZoomError, IndexError):
    """Requested tile column or row is outside the layer's grid."""

    def __init__(self, col: int, row: int, cols: int, rows: int) -> None:
        super().__init__(f"invalid tile {col}:{row} for a {cols}x{rows} grid")
        self.col = col
        self.row = row
        self.cols = cols
        self.rows = rows
