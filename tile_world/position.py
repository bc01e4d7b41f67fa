"""Absolute position value type.

An :class:`AbsolutePosition` is the flat, chunk-independent representation of
a point in the world. Components may be fractional or negative; such points
are classified and corrected by :mod:`tile_world.bounds`, never rejected.
"""

from dataclasses import dataclass
from typing import Sequence

from pyrsistent import pvector
from pyrsistent.typing import PVector

from tile_world.types import Number


@dataclass(frozen=True)
class AbsolutePosition:
    """World-space point.

    Attributes:
        x: Column (0 at the world's left edge).
        y: Row (0 at the world's top edge).
        z: Depth layer (0 is the first layer).
    """

    x: Number
    y: Number
    z: Number = 0

    @classmethod
    def from_vector(cls, vec: Sequence[Number]) -> "AbsolutePosition":
        """Build from a 3-element sequence."""
        if len(vec) != 3:
            raise ValueError(f"Expected 3 components, got {len(vec)}")
        return cls(vec[0], vec[1], vec[2])

    def as_vector(self) -> PVector[Number]:
        return pvector([self.x, self.y, self.z])

    def shifted(self, dx: Number, dy: Number, dz: Number = 0) -> "AbsolutePosition":
        return AbsolutePosition(self.x + dx, self.y + dy, self.z + dz)
