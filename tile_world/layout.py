"""World layout (chunk dimensions and world boundary).

A :class:`WorldLayout` plays the role of the world generator's configuration:
it says how many tiles a chunk holds along each axis and how many chunks the
world spans. The layout's :attr:`~WorldLayout.boundary` is itself a
:class:`~tile_world.coordinate.ChunkCoordinate`, the last tile of the last
chunk, and every bounds question is answered by comparing against it.

Design notes:

* Layouts are frozen. Install one process-wide with
    :func:`tile_world.context.set_layout` or pass it explicitly to conversions.
* :data:`ZERO_LAYOUT` is an all-zero sentinel. It can be constructed and
    installed but every conversion rejects it with
    :class:`~tile_world.errors.DegenerateLayoutError`.
"""

from dataclasses import dataclass, fields
from typing import Any, Mapping

from tile_world.coordinate import ChunkCoordinate
from tile_world.errors import DegenerateLayoutError
from tile_world.position import AbsolutePosition
from tile_world.types import Comparison, Vec3


@dataclass(frozen=True)
class WorldLayout:
    """Chunk dimensions plus world size.

    Attributes:
        chunks_x: World width in chunks.
        chunks_y: World height in chunks.
        tile_width: Tiles per chunk along x.
        tile_height: Tiles per chunk along y.
        tile_depth: Depth layers (z is not chunked).
    """

    chunks_x: int
    chunks_y: int
    tile_width: int
    tile_height: int
    tile_depth: int

    def __post_init__(self) -> None:
        for field in fields(self):
            value = getattr(self, field.name)
            if value < 0:
                raise ValueError(f"{field.name} must be non-negative, got {value}")

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "WorldLayout":
        """Build from a mapping keyed by field name (values coerced to int)."""
        missing = [f.name for f in fields(cls) if f.name not in mapping]
        if missing:
            raise ValueError(f"Missing layout keys: {missing}")
        return cls(**{f.name: int(mapping[f.name]) for f in fields(cls)})

    @property
    def tile_dims(self) -> Vec3:
        return (self.tile_width, self.tile_height, self.tile_depth)

    @property
    def is_degenerate(self) -> bool:
        return 0 in self.tile_dims

    def require_usable(self) -> None:
        """Raise :class:`DegenerateLayoutError` if a tile dimension is zero."""
        if self.is_degenerate:
            raise DegenerateLayoutError(self.tile_dims)

    @property
    def boundary(self) -> ChunkCoordinate:
        """Largest valid coordinate: last tile of the last chunk."""
        return ChunkCoordinate(
            self.chunks_x,
            self.chunks_y,
            self.tile_width,
            self.tile_height,
            self.tile_depth,
        )

    def to_absolute_bound(self) -> AbsolutePosition:
        """Maximum absolute index along each axis.

        Raises:
            DegenerateLayoutError: A tile dimension or the world size in
                chunks is zero; such a world has no valid position.
        """
        self.require_usable()
        if 0 in (self.chunks_x, self.chunks_y):
            raise DegenerateLayoutError((self.chunks_x, self.chunks_y), "chunk counts")
        return self.boundary.to_absolute(self)

    def classify(self, candidate: ChunkCoordinate) -> Comparison:
        """Compare ``candidate`` against this layout's boundary."""
        return self.boundary.compare(candidate)


ZERO_LAYOUT = WorldLayout(0, 0, 0, 0, 0)
