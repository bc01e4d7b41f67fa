"""Vector helpers used by coordinate shifting and bounds correction."""

from typing import Any, Sequence

from pyrsistent import pvector
from pyrsistent.typing import PVector

from tile_world.types import Number


def vector_add(vec1: Sequence[Number], vec2: Sequence[Number]) -> PVector[Number]:
    """Return ``vec1 + vec2`` element-wise for equal-length vectors."""
    if len(vec1) != len(vec2):
        raise ValueError("Vectors must be of the same length")
    return pvector([vec1[i] + vec2[i] for i in range(len(vec1))])


def vector_clamp(
    vec: Sequence[Number], low: Sequence[Number], high: Sequence[Number]
) -> PVector[Number]:
    """Clamp each component of ``vec`` into ``[low[i], high[i]]``."""
    if not len(vec) == len(low) == len(high):
        raise ValueError("Vectors must be of the same length")
    return pvector([min(max(vec[i], low[i]), high[i]) for i in range(len(vec))])


def dataclass_to_vector(value: Any) -> PVector[Any]:
    """Convert a dataclass instance to a vector of its field values."""
    return pvector([getattr(value, field) for field in value.__dataclass_fields__])
