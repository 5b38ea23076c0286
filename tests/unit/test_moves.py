# tests/unit/test_moves.py

from typing import Tuple

import pytest

from grid_puzzles.components import Position
from grid_puzzles.moves import (
    STEP_FN_REGISTRY,
    default_step_fn,
    keypad_step,
)
from grid_puzzles.types import Heading, KeypadDirection, StepFn


@pytest.mark.parametrize(
    "step_fn, start, heading, blocks, expected",
    [
        (default_step_fn, (0, 0), Heading.NORTH, 1, (0, 1)),
        (default_step_fn, (0, 0), Heading.EAST, 1, (1, 0)),
        (default_step_fn, (0, 0), Heading.SOUTH, 1, (0, -1)),
        (default_step_fn, (0, 0), Heading.WEST, 1, (-1, 0)),
        (default_step_fn, (2, 1), Heading.SOUTH, 2, (2, -1)),
        (default_step_fn, (2, -1), Heading.WEST, 4, (-2, -1)),
        (default_step_fn, (5, 5), Heading.NORTH, 0, (5, 5)),
    ],
)
def test_step_fns(
    step_fn: StepFn,
    start: Tuple[int, int],
    heading: Heading,
    blocks: int,
    expected: Tuple[int, int],
) -> None:
    assert step_fn(Position(*start), heading, blocks) == Position(*expected)


@pytest.mark.parametrize(
    "direction, expected",
    [
        (KeypadDirection.UP, (1, 0)),
        (KeypadDirection.DOWN, (1, 2)),
        (KeypadDirection.LEFT, (0, 1)),
        (KeypadDirection.RIGHT, (2, 1)),
    ],
)
def test_keypad_step(direction: KeypadDirection, expected: Tuple[int, int]) -> None:
    assert keypad_step(Position(1, 1), direction) == Position(*expected)


def test_keypad_step_ignores_bounds() -> None:
    assert keypad_step(Position(0, 0), KeypadDirection.UP) == Position(0, -1)


def test_registry_contains_builtins() -> None:
    assert STEP_FN_REGISTRY["default"] is default_step_fn
