# tests/unit/test_position.py

import pytest

from tile_world.position import AbsolutePosition
from tests.test_utils import point


def test_shifted_adds_componentwise() -> None:
    start = point(3, 4, 0)
    assert start.shifted(2, -5) == point(5, -1, 0)
    assert start.shifted(0.5, 0, 1) == point(3.5, 4, 1)
    assert start == point(3, 4, 0)


def test_vector_round_trip() -> None:
    p = point(1, 2, 3)
    assert AbsolutePosition.from_vector(p.as_vector()) == p


def test_from_vector_wrong_length() -> None:
    with pytest.raises(ValueError):
        AbsolutePosition.from_vector([1, 2])
