"""World boundary helpers.

Out-of-range absolute positions are a normal input, not an error: movement
may overshoot an edge and :func:`correct_out_of_bounds` brings the point
back. Two policies are offered:

* clamp (:func:`correct_out_of_bounds`, :func:`clamp_position`): each axis is
    limited to ``[0, bound]`` where ``bound`` comes from
    :meth:`~tile_world.layout.WorldLayout.to_absolute_bound`.
* wrap (:func:`wrap_position`): toroidal, leaving one edge re-enters at the
    opposite one.

Functions here are pure.
"""

import logging
from typing import Optional

from tile_world.context import resolve_layout
from tile_world.coordinate import ChunkCoordinate
from tile_world.layout import WorldLayout
from tile_world.position import AbsolutePosition
from tile_world.types import OUT_OF_BOUNDS
from tile_world.utils.math import vector_clamp

logger = logging.getLogger(__name__)

_ORIGIN = AbsolutePosition(0, 0, 0)


def clamp_position(
    point: AbsolutePosition, bound: AbsolutePosition
) -> AbsolutePosition:
    """Clamp every axis of ``point`` into ``[0, bound]``.

    Returns ``point`` itself when nothing needed clamping.
    """
    clamped = AbsolutePosition.from_vector(
        vector_clamp(point.as_vector(), _ORIGIN.as_vector(), bound.as_vector())
    )
    return point if clamped == point else clamped


def correct_out_of_bounds(
    point: AbsolutePosition, layout: Optional[WorldLayout] = None
) -> AbsolutePosition:
    """Bring ``point`` back inside the world.

    An axis above its maximum becomes exactly that maximum; a negative axis
    becomes exactly 0; every other axis is left alone. In-bounds points are
    returned unchanged.

    Args:
        point: Absolute position, possibly outside the world.
        layout: Layout to check against; defaults to the process-wide one.

    Returns:
        AbsolutePosition: The corrected position.

    Raises:
        UninitializedLayoutError: No layout given and none installed.
        DegenerateLayoutError: The layout has a zero tile dimension.
    """
    layout = resolve_layout(layout)
    relation = layout.classify(ChunkCoordinate.from_absolute(point, layout))
    corrected = clamp_position(point, layout.to_absolute_bound())
    if relation in OUT_OF_BOUNDS:
        logger.debug("Correcting %s position %s to %s", relation, point, corrected)
    return corrected


def is_in_bounds(point: AbsolutePosition, layout: Optional[WorldLayout] = None) -> bool:
    """Return True if every axis of ``point`` lies in ``[0, bound]``."""
    layout = resolve_layout(layout)
    return clamp_position(point, layout.to_absolute_bound()) is point


def wrap_position(
    point: AbsolutePosition, layout: Optional[WorldLayout] = None
) -> AbsolutePosition:
    """Toroidal wrap of ``point`` into the world."""
    layout = resolve_layout(layout)
    bound = layout.to_absolute_bound()
    return AbsolutePosition(
        point.x % (bound.x + 1),
        point.y % (bound.y + 1),
        point.z % (bound.z + 1),
    )
