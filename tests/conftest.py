from typing import Iterator

import pytest

from tile_world.context import reset_layout


@pytest.fixture(autouse=True)
def clean_layout() -> Iterator[None]:
    """Every test starts and ends without a process-wide layout."""
    reset_layout()
    yield
    reset_layout()
