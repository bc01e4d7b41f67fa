"""Chunk-relative coordinate value type.

A :class:`ChunkCoordinate` names a world position by the chunk it falls in and
the tile it occupies inside that chunk. Both parts count from 1 ("literal"
numbering): chunk 1 is the first chunk and tile 1 the first tile of a chunk.
Counting from 0 would lose one tile per chunk when converting back to absolute
form, so the 1-based form is what makes the conversion exact.

Converting needs the chunk tile dimensions, which come from a
:class:`~tile_world.layout.WorldLayout`. Every conversion accepts ``layout=``;
without it the process-wide layout from :mod:`tile_world.context` is used.

Examples
--------
>>> from tile_world import AbsolutePosition, ChunkCoordinate, WorldLayout
>>> layout = WorldLayout(chunks_x=3, chunks_y=3, tile_width=10, tile_height=10, tile_depth=1)
>>> str(ChunkCoordinate.from_absolute(AbsolutePosition(10, 0, 0), layout))
'Chunk:2,1; Tile:1,1,1;'
"""

import math
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Optional, Sequence, Union

from tile_world.context import resolve_layout
from tile_world.position import AbsolutePosition
from tile_world.types import Comparison, Number, Vec2, Vec3
from tile_world.utils.math import dataclass_to_vector, vector_add

if TYPE_CHECKING:
    from tile_world.layout import WorldLayout


@dataclass(frozen=True)
class ChunkCoordinate:
    """Position expressed as (chunk, tile within chunk).

    Instances are value objects: equality and hashing are field based and
    "mutating" operations return a new instance.

    Attributes:
        chunk_x: 1-based chunk column.
        chunk_y: 1-based chunk row.
        tile_x: 1-based tile column inside the chunk.
        tile_y: 1-based tile row inside the chunk.
        tile_z: 1-based depth layer.
    """

    chunk_x: int
    chunk_y: int
    tile_x: Number
    tile_y: Number
    tile_z: Number

    @property
    def chunk(self) -> Vec2:
        return (self.chunk_x, self.chunk_y)

    @property
    def tile(self) -> Vec3:
        return (self.tile_x, self.tile_y, self.tile_z)

    @classmethod
    def from_absolute(
        cls, point: AbsolutePosition, layout: Optional["WorldLayout"] = None
    ) -> "ChunkCoordinate":
        """Locate the chunk and tile holding an absolute point.

        Floor (not ceiling) picks the 0-based chunk index so that exact chunk
        multiples land at the start of the next chunk; ``+ 1`` makes it
        1-based. The tile is the remainder inside that chunk, also 1-based.
        Depth is not chunked.

        Args:
            point: Absolute world position (may be negative or fractional).
            layout: Layout to convert with; defaults to the process-wide one.

        Returns:
            ChunkCoordinate: The chunk-relative form of ``point``.

        Raises:
            UninitializedLayoutError: No layout given and none installed.
            DegenerateLayoutError: The layout has a zero tile dimension.
        """
        layout = resolve_layout(layout)
        layout.require_usable()
        width, height, _ = layout.tile_dims
        chunk_x = math.floor(point.x / width) + 1
        chunk_y = math.floor(point.y / height) + 1
        return cls(
            chunk_x=chunk_x,
            chunk_y=chunk_y,
            tile_x=point.x + 1 - width * (chunk_x - 1),
            tile_y=point.y + 1 - height * (chunk_y - 1),
            tile_z=point.z + 1,
        )

    def to_absolute(self, layout: Optional["WorldLayout"] = None) -> AbsolutePosition:
        """Return this position in world coordinates.

        Exact inverse of :meth:`from_absolute` for any coordinate it produced.
        """
        layout = resolve_layout(layout)
        layout.require_usable()
        width, height, _ = layout.tile_dims
        shift_x = (self.chunk_x - 1) * width
        shift_y = (self.chunk_y - 1) * height
        return AbsolutePosition(
            self.tile_x - 1 + shift_x,
            self.tile_y - 1 + shift_y,
            self.tile_z - 1,
        )

    def compare(self, other: "ChunkCoordinate") -> Comparison:
        """Classify ``other`` against ``self`` used as an upper bound.

        Checks run in a fixed order: invalid ``other`` first, then exact
        equality, then componentwise ``<=`` on all five fields. Anything else,
        including mixed over/under fields, is ``ABOVE``.

        Chunks must be at least 1 but tiles only at least 0 to count as valid.
        """
        if (
            other.chunk_x <= 0
            or other.chunk_y <= 0
            or other.tile_x < 0
            or other.tile_y < 0
            or other.tile_z < 0
        ):
            return Comparison.BELOW_ORIGIN
        if other == self:
            return Comparison.EQUAL
        if all(
            theirs <= ours
            for theirs, ours in zip(
                dataclass_to_vector(other), dataclass_to_vector(self)
            )
        ):
            return Comparison.WITHIN
        return Comparison.ABOVE

    def shift(
        self,
        delta: Union[AbsolutePosition, Sequence[Number]],
        layout: Optional["WorldLayout"] = None,
    ) -> "ChunkCoordinate":
        """Move by an absolute ``delta`` and return the new coordinate.

        The result is not bounds-corrected; use
        :func:`tile_world.bounds.correct_out_of_bounds` for that.
        """
        if isinstance(delta, AbsolutePosition):
            delta = delta.as_vector()
        layout = resolve_layout(layout)
        moved = vector_add(self.to_absolute(layout).as_vector(), delta)
        return ChunkCoordinate.from_absolute(
            AbsolutePosition.from_vector(moved), layout
        )

    def read_only_shift(
        self,
        dx: Number,
        dy: Number,
        dz: Number = 0,
        layout: Optional["WorldLayout"] = None,
    ) -> "ChunkCoordinate":
        """Return a copy moved by ``(dx, dy, dz)``; ``self`` is untouched."""
        return self.copy().shift((dx, dy, dz), layout)

    def copy(self) -> "ChunkCoordinate":
        return replace(self)

    def __str__(self) -> str:
        return (
            f"Chunk:{self.chunk_x},{self.chunk_y}; "
            f"Tile:{self.tile_x},{self.tile_y},{self.tile_z};"
        )
