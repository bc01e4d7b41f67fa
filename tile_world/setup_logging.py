import logging
import sys
from typing import Optional, Union

from tile_world.config import WorldConfig


def setup_logging(level: Optional[Union[int, str]] = None) -> None:
    """Configure the root logger for applications using tile_world.

    The library itself only creates module loggers; call this once from the
    application entry point. ``level`` defaults to the configured
    ``TILE_WORLD_LOG_LEVEL``.
    """
    if level is None:
        level = WorldConfig.from_env().log_level

    logging.basicConfig(
        level=level,
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s:%(lineno)d | %(message)s",
        datefmt="%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )
    logging.getLogger("tile_world").setLevel(level)
