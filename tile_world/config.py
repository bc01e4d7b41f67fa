"""World configuration.

Loads the world size and log level from environment variables with sensible
defaults. ``install()`` is the startup hook: it builds the layout and makes it
the process-wide one.

Variables:
    TILE_WORLD_CHUNKS_X, TILE_WORLD_CHUNKS_Y: World size in chunks.
    TILE_WORLD_TILE_WIDTH, TILE_WORLD_TILE_HEIGHT, TILE_WORLD_TILE_DEPTH:
        Tiles per chunk.
    TILE_WORLD_LOG_LEVEL: Level name for :func:`tile_world.setup_logging.setup_logging`.
"""

import os
from dataclasses import asdict, dataclass
from typing import Mapping, Optional

from tile_world.context import set_layout
from tile_world.layout import WorldLayout

ENV_PREFIX = "TILE_WORLD_"


def _env_int(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(ENV_PREFIX + name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX + name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class WorldConfig:
    """Startup configuration for the world layout and logging."""

    chunks_x: int = 3
    chunks_y: int = 3
    tile_width: int = 10
    tile_height: int = 10
    tile_depth: int = 1
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "WorldConfig":
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            chunks_x=_env_int(env, "CHUNKS_X", defaults.chunks_x),
            chunks_y=_env_int(env, "CHUNKS_Y", defaults.chunks_y),
            tile_width=_env_int(env, "TILE_WIDTH", defaults.tile_width),
            tile_height=_env_int(env, "TILE_HEIGHT", defaults.tile_height),
            tile_depth=_env_int(env, "TILE_DEPTH", defaults.tile_depth),
            log_level=env.get(ENV_PREFIX + "LOG_LEVEL", defaults.log_level).upper(),
        )

    def layout(self) -> WorldLayout:
        return WorldLayout.from_mapping(asdict(self))

    def install(self) -> WorldLayout:
        """Build the layout, make it process-wide and return it."""
        layout = self.layout()
        set_layout(layout)
        return layout
