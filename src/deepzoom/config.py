"""Centralized configuration for deepzoom.

All tunable parameters are defined here with sensible defaults.
Values can be overridden via environment variables.

Environment Variables:
    DEEPZOOM_TILE_SIZE: Default tile edge length in pixels (default: 254)
    DEEPZOOM_OVERLAP: Default tile overlap in pixels (default: 1)
    DEEPZOOM_STRICT_TILE_BOUNDS: Reject col == cols / row == rows (default: 0)
"""

from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off", ""})


def _get_env_int(name: str, default: int) -> int:
    """Get an integer from environment variable with fallback."""
    value = os.environ.get(name)
    if value is not None:
        try:
            return int(value)
        except ValueError:
            logger.warning(
                "Invalid integer for %s: %r, using default %d", name, value, default
            )
    return default


def _get_env_bool(name: str, default: bool) -> bool:
    """Get a boolean flag from environment variable with fallback."""
    value = os.environ.get(name)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    logger.warning("Invalid boolean for %s: %r, using default %s", name, value, default)
    return default


# =============================================================================
# Tiling Defaults
# =============================================================================

#: Default tile size in pixels (254 + 1px overlap on each side = 256px tiles)
DEFAULT_TILE_SIZE: int = _get_env_int("DEEPZOOM_TILE_SIZE", 254)

#: Default overlap in pixels added to each tile edge
DEFAULT_OVERLAP: int = _get_env_int("DEEPZOOM_OVERLAP", 1)


# =============================================================================
# Addressing
# =============================================================================

#: When False, Layer.tile() accepts col == cols and row == rows
STRICT_TILE_BOUNDS: bool = _get_env_bool("DEEPZOOM_STRICT_TILE_BOUNDS", False)


# =============================================================================
# Validation
# =============================================================================


def _validate_config() -> None:
    """Validate configuration values and log warnings for out-of-range settings."""
    global DEFAULT_TILE_SIZE, DEFAULT_OVERLAP

    if DEFAULT_TILE_SIZE < 1:
        logger.warning(
            "DEFAULT_TILE_SIZE=%d is too low, clamping to 1", DEFAULT_TILE_SIZE
        )
        DEFAULT_TILE_SIZE = 1

    if DEFAULT_OVERLAP < 0:
        logger.warning(
            "DEFAULT_OVERLAP=%d is negative, clamping to 0", DEFAULT_OVERLAP
        )
        DEFAULT_OVERLAP = 0


_validate_config()
