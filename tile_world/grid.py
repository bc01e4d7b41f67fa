"""Grid / map access.

:class:`TileGrid` is an immutable 2D map of units keyed by absolute ``(x, y)``
tile position, sized from a :class:`~tile_world.layout.WorldLayout`. Cells are
stored in a persistent map; an absent key is an empty cell. Editing methods
return a new grid.
"""

import math
from dataclasses import dataclass, replace
from typing import Callable, Generic, Iterator, Optional, Tuple, TypeVar

from pyrsistent import pmap
from pyrsistent.typing import PMap

from tile_world.context import resolve_layout
from tile_world.coordinate import ChunkCoordinate
from tile_world.layout import WorldLayout

E = TypeVar("E")

Cell = Tuple[int, int]


@dataclass(frozen=True)
class TileGrid(Generic[E]):
    """Immutable grid of units.

    Attributes:
        width: Size along x in tiles.
        length: Size along y in tiles.
        height: Number of depth layers the grid spans.
        cells: Units keyed by ``(x, y)``.
    """

    width: int
    length: int
    height: int = 1
    cells: PMap[Cell, E] = pmap()

    @classmethod
    def for_layout(cls, layout: Optional[WorldLayout] = None) -> "TileGrid[E]":
        """Empty grid covering the whole world of ``layout``."""
        layout = resolve_layout(layout)
        layout.require_usable()
        return cls(
            width=layout.chunks_x * layout.tile_width,
            length=layout.chunks_y * layout.tile_height,
            height=layout.tile_depth,
        )

    def positions(self) -> Iterator[Cell]:
        for y in range(self.length):
            for x in range(self.width):
                yield (x, y)

    def fill(self, factory: Callable[[int, int], E]) -> "TileGrid[E]":
        """Return a grid with every cell set to ``factory(x, y)``."""
        cells = {(x, y): factory(x, y) for x, y in self.positions()}
        return replace(self, cells=pmap(cells))

    def place(self, x: int, y: int, unit: E) -> "TileGrid[E]":
        self._check_bounds(x, y)
        return replace(self, cells=self.cells.set((x, y), unit))

    def unit_at(self, x: int, y: int) -> Optional[E]:
        """Return the unit at ``(x, y)`` or None if the cell is empty."""
        self._check_bounds(x, y)
        return self.cells.get((x, y))

    def unit_at_coordinate(
        self, coord: ChunkCoordinate, layout: Optional[WorldLayout] = None
    ) -> Optional[E]:
        point = coord.to_absolute(layout)
        return self.unit_at(math.floor(point.x), math.floor(point.y))

    # -------- Internal helpers --------

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.length):
            raise IndexError(
                f"Out of bounds: {(x, y)} for grid {self.width}x{self.length}"
            )
