"""tile_world
==========

Chunk-relative coordinates for a tile-based world.

A position can be written two ways: as an :class:`AbsolutePosition` in world
space, or as a :class:`ChunkCoordinate` (1-based chunk + 1-based tile inside
that chunk). A :class:`WorldLayout` supplies the chunk dimensions that connect
the two and the world boundary used by :func:`correct_out_of_bounds`.

Typical startup::

    from tile_world import WorldConfig, setup_logging

    setup_logging()
    layout = WorldConfig.from_env().install()
"""

from .bounds import clamp_position, correct_out_of_bounds, is_in_bounds, wrap_position
from .config import WorldConfig
from .context import current_layout, reset_layout, resolve_layout, set_layout
from .coordinate import ChunkCoordinate
from .errors import DegenerateLayoutError, LayoutError, UninitializedLayoutError
from .grid import TileGrid
from .layout import ZERO_LAYOUT, WorldLayout
from .moveable import Moveable, Player
from .position import AbsolutePosition
from .setup_logging import setup_logging
from .types import Comparison

__all__ = [
    "AbsolutePosition",
    "ChunkCoordinate",
    "Comparison",
    "DegenerateLayoutError",
    "LayoutError",
    "Moveable",
    "Player",
    "TileGrid",
    "UninitializedLayoutError",
    "WorldConfig",
    "WorldLayout",
    "ZERO_LAYOUT",
    "clamp_position",
    "correct_out_of_bounds",
    "current_layout",
    "is_in_bounds",
    "reset_layout",
    "resolve_layout",
    "set_layout",
    "setup_logging",
    "wrap_position",
]
