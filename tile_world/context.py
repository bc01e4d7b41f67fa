"""Process-wide world layout slot.

Conversions take an explicit ``layout=`` argument; when it is omitted they fall
back to the layout installed here. The slot is written once during startup
(see :meth:`tile_world.config.WorldConfig.install`) and only read afterwards.
:class:`~tile_world.layout.WorldLayout` is frozen, so a reader can never
observe a half-updated layout.

Examples
--------
>>> from tile_world import WorldLayout, set_layout, current_layout
>>> set_layout(WorldLayout(chunks_x=3, chunks_y=3, tile_width=10, tile_height=10, tile_depth=1))
>>> current_layout().tile_dims
(10, 10, 1)
"""

import logging
from typing import TYPE_CHECKING, Optional

from tile_world.errors import UninitializedLayoutError

if TYPE_CHECKING:
    from tile_world.layout import WorldLayout

logger = logging.getLogger(__name__)

_layout: Optional["WorldLayout"] = None


def set_layout(layout: "WorldLayout") -> None:
    """Install ``layout`` as the process-wide layout.

    No validation happens here; a degenerate layout is accepted and fails at
    the first conversion.
    """
    global _layout
    _layout = layout
    logger.debug("World layout set to %s", layout)


def current_layout() -> "WorldLayout":
    """Return the process-wide layout.

    Raises:
        UninitializedLayoutError: If :func:`set_layout` was never called.
    """
    if _layout is None:
        raise UninitializedLayoutError()
    return _layout


def reset_layout() -> None:
    """Forget the process-wide layout."""
    global _layout
    _layout = None
    logger.debug("World layout cleared")


def resolve_layout(layout: Optional["WorldLayout"] = None) -> "WorldLayout":
    """Return ``layout`` if given, else the process-wide one."""
    if layout is not None:
        return layout
    return current_layout()
