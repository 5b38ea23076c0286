# tests/unit/test_position.py

from dataclasses import FrozenInstanceError

import pytest

from grid_puzzles.components import Position


def test_position_equality_by_value() -> None:
    assert Position(2, -1) == Position(2, -1)
    assert Position(2, -1) != Position(-1, 2)
    assert len({Position(0, 0), Position(0, 0), Position(1, 0)}) == 2


def test_position_is_immutable() -> None:
    pos = Position(0, 0)
    with pytest.raises(FrozenInstanceError):
        pos.x = 3  # type: ignore[misc]


def test_moved_returns_new_position() -> None:
    pos = Position(1, 1)
    moved = pos.moved(2, -3)
    assert moved == Position(3, -2)
    assert pos == Position(1, 1)


@pytest.mark.parametrize(
    "x, y, expected",
    [(0, 0, 0), (3, 4, 7), (-3, 4, 7), (-2, -1, 3), (10, -2, 12)],
)
def test_manhattan(x: int, y: int, expected: int) -> None:
    assert Position(x, y).manhattan() == expected
