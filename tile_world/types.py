"""Common type aliases and enumerations.

``Comparison`` is the result vocabulary shared by
:meth:`tile_world.coordinate.ChunkCoordinate.compare` and
:meth:`tile_world.layout.WorldLayout.classify`.
"""

from enum import StrEnum, auto
from typing import Tuple, Union

Number = Union[int, float]

Vec2 = Tuple[int, int]
Vec3 = Tuple[Number, Number, Number]


class Comparison(StrEnum):
    """Where a tested coordinate lies relative to a bounding coordinate.

    Members:
        ABOVE: Exceeds the bound on at least one axis.
        EQUAL: Identical to the bound.
        WITHIN: Every field is less than or equal to the bound.
        BELOW_ORIGIN: Not a valid position (chunk below 1 or negative tile).
    """

    ABOVE = auto()
    EQUAL = auto()
    WITHIN = auto()
    BELOW_ORIGIN = auto()


OUT_OF_BOUNDS = (Comparison.ABOVE, Comparison.BELOW_ORIGIN)
