"""Common type aliases and enumerations.

``Heading`` is the walker's compass; ``KeypadDirection`` the single-character
moves understood by the keypad. ``StepFn`` is the extension point used by the
walker to turn a heading into a unit step.
"""

from enum import StrEnum
from typing import Callable, List, Optional, Sequence, Tuple, Union, TYPE_CHECKING


if TYPE_CHECKING:
    from grid_puzzles.components import Position


class Heading(StrEnum):
    """Compass heading of the walker (cyclic, clockwise order)."""

    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"

    def turned(self, turns: int = 1) -> "Heading":
        """Return the heading after ``turns`` clockwise quarter-turns."""
        return HEADINGS[(HEADINGS.index(self) + turns) % len(HEADINGS)]


HEADINGS: List[Heading] = [Heading.NORTH, Heading.EAST, Heading.SOUTH, Heading.WEST]


class KeypadDirection(StrEnum):
    """Single-character finger moves."""

    UP = "U"
    DOWN = "D"
    LEFT = "L"
    RIGHT = "R"


# Quarter-turns out of a 4-heading cycle
RIGHT_TURN = 1
LEFT_TURN = 3

ButtonLabel = Union[int, str]
KeypadLayout = Sequence[Sequence[Optional[ButtonLabel]]]
Instruction = Tuple[int, int]

StepFn = Callable[["Position", Heading, int], "Position"]
