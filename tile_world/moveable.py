"""Moveable entities.

:class:`Moveable` is the surface other code relies on for anything that
occupies a tile and can move: an absolute position, visibility, a display
symbol and a sight radius. :class:`Player` is the one concrete moveable, the
controllable character.
"""

from dataclasses import dataclass, replace
from typing import Optional, Protocol

from tile_world.bounds import correct_out_of_bounds
from tile_world.coordinate import ChunkCoordinate
from tile_world.layout import WorldLayout
from tile_world.position import AbsolutePosition
from tile_world.types import Number

PLAYER_SYMBOL = "@"
PLAYER_SIGHT_RADIUS = 7


class Moveable(Protocol):
    """Structural type for positioned, displayable entities."""

    @property
    def position(self) -> AbsolutePosition: ...

    @property
    def visible(self) -> bool: ...

    @property
    def symbol(self) -> str: ...

    @property
    def sight_radius(self) -> int: ...

    def relative_position(
        self, layout: Optional[WorldLayout] = None
    ) -> ChunkCoordinate: ...

    def with_position(self, position: AbsolutePosition) -> "Moveable": ...

    def with_visibility(self, visible: bool) -> "Moveable": ...


@dataclass(frozen=True)
class Player:
    """Controllable character.

    Attributes:
        position: Absolute world position.
        visible: Whether the player is drawn.
        symbol: Display glyph.
        sight_radius: Tiles the player can see in each direction.
    """

    position: AbsolutePosition
    visible: bool = True
    symbol: str = PLAYER_SYMBOL
    sight_radius: int = PLAYER_SIGHT_RADIUS

    def relative_position(
        self, layout: Optional[WorldLayout] = None
    ) -> ChunkCoordinate:
        return ChunkCoordinate.from_absolute(self.position, layout)

    def with_position(self, position: AbsolutePosition) -> "Player":
        return replace(self, position=position)

    def with_visibility(self, visible: bool) -> "Player":
        return replace(self, visible=visible)

    def moved_by(
        self,
        dx: Number,
        dy: Number,
        dz: Number = 0,
        layout: Optional[WorldLayout] = None,
    ) -> "Player":
        """Step by ``(dx, dy, dz)``, stopping at the world edge."""
        target = self.position.shifted(dx, dy, dz)
        return self.with_position(correct_out_of_bounds(target, layout))
