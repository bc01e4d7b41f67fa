# tests/integration/test_shift_integration.py

from tile_world import (
    AbsolutePosition,
    ChunkCoordinate,
    Comparison,
    Player,
    TileGrid,
    WorldConfig,
    correct_out_of_bounds,
    current_layout,
)
from tests.test_utils import coord


def test_walk_across_chunks_with_installed_layout() -> None:
    """Walk east from the first tile to the far edge and beyond."""
    WorldConfig.from_env({}).install()
    layout = current_layout()
    position = ChunkCoordinate.from_absolute(AbsolutePosition(0, 0, 0))
    visited = [position]
    for _ in range(35):
        position = position.read_only_shift(1, 0, 0)
        visited.append(position)

    assert visited[9] == coord((1, 1), (10, 1, 1))
    assert visited[10] == coord((2, 1), (1, 1, 1))
    assert visited[29] == coord((3, 1), (10, 1, 1))
    assert layout.classify(visited[30]) == Comparison.ABOVE

    corrected = correct_out_of_bounds(visited[-1].to_absolute())
    assert corrected == AbsolutePosition(29, 0, 0)
    assert layout.classify(ChunkCoordinate.from_absolute(corrected)) == Comparison.WITHIN


def test_player_on_grid() -> None:
    layout = WorldConfig(chunks_x=2, chunks_y=2, tile_width=4, tile_height=4).layout()
    grid = TileGrid.for_layout(layout).fill(lambda x, y: "." if (x + y) % 2 else "#")
    player = Player(AbsolutePosition(3, 3, 0))

    for _ in range(6):
        player = player.moved_by(1, 1, 0, layout)

    assert player.position == AbsolutePosition(7, 7, 0)
    assert player.relative_position(layout) == layout.boundary
    assert grid.unit_at_coordinate(player.relative_position(layout), layout) == "#"
