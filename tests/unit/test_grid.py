# tests/unit/test_grid.py

import pytest

from tile_world.coordinate import ChunkCoordinate
from tile_world.errors import DegenerateLayoutError
from tile_world.grid import TileGrid
from tile_world.layout import ZERO_LAYOUT
from tile_world.position import AbsolutePosition
from tests.test_utils import coord, make_layout


def test_for_layout_covers_world() -> None:
    grid: TileGrid[str] = TileGrid.for_layout(make_layout(chunks=(3, 2), tile_dims=(10, 8, 2)))
    assert (grid.width, grid.length, grid.height) == (30, 16, 2)
    assert len(grid.cells) == 0


def test_for_layout_rejects_zero_layout() -> None:
    with pytest.raises(DegenerateLayoutError):
        TileGrid.for_layout(ZERO_LAYOUT)


def test_fill_sets_every_cell() -> None:
    grid: TileGrid[str] = TileGrid(width=3, length=2)
    filled = grid.fill(lambda x, y: f"{x}:{y}")
    assert len(filled.cells) == 6
    assert filled.unit_at(2, 1) == "2:1"
    assert grid.unit_at(2, 1) is None  # original untouched


def test_place_and_unit_at() -> None:
    grid: TileGrid[str] = TileGrid(width=4, length=4).place(1, 3, "tree")
    assert grid.unit_at(1, 3) == "tree"
    assert grid.unit_at(3, 1) is None


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (4, 0), (0, 4)])
def test_out_of_bounds_access_raises(x: int, y: int) -> None:
    grid: TileGrid[str] = TileGrid(width=4, length=4)
    with pytest.raises(IndexError):
        grid.unit_at(x, y)
    with pytest.raises(IndexError):
        grid.place(x, y, "rock")


def test_unit_at_coordinate() -> None:
    layout = make_layout()
    grid: TileGrid[str] = TileGrid.for_layout(layout).place(10, 0, "door")
    assert grid.unit_at_coordinate(coord((2, 1), (1, 1, 1)), layout) == "door"
    assert grid.unit_at_coordinate(coord((1, 1), (10, 1, 1)), layout) is None


def test_unit_at_coordinate_left_of_origin_raises() -> None:
    layout = make_layout()
    grid: TileGrid[str] = TileGrid.for_layout(layout).place(0, 0, "origin")
    just_left = ChunkCoordinate.from_absolute(AbsolutePosition(-0.5, 0, 0), layout)
    with pytest.raises(IndexError):
        grid.unit_at_coordinate(just_left, layout)


def test_unit_at_coordinate_floors_fractional_point() -> None:
    layout = make_layout()
    grid: TileGrid[str] = TileGrid.for_layout(layout).place(3, 4, "well")
    inside = ChunkCoordinate.from_absolute(AbsolutePosition(3.75, 4.5, 0), layout)
    assert grid.unit_at_coordinate(inside, layout) == "well"
