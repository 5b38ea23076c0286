"""Configuration dataclasses for the puzzle engines.

Configs are plain frozen values validated on construction; the engines never
read globals or environment variables. ``KEYPAD_LAYOUT_REGISTRY`` maps a
layout name to its buttons and the finger's starting position.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from grid_puzzles.components import Position
from grid_puzzles.moves import STEP_FN_REGISTRY
from grid_puzzles.types import Heading, KeypadLayout


BASIC_KEYPAD_LAYOUT: KeypadLayout = (
    (1, 2, 3),
    (4, 5, 6),
    (7, 8, 9),
)

STRANGE_KEYPAD_LAYOUT: KeypadLayout = (
    (None, None, 1, None, None),
    (None, 2, 3, 4, None),
    (5, 6, 7, 8, 9),
    (None, "A", "B", "C", None),
    (None, None, "D", None, None),
)


@dataclass(frozen=True)
class SearchConfig:
    """Hash search parameters.

    Attributes:
        prefix: Required hex prefix of a qualifying digest.
        length: Password length (number of slots).
        max_counter: Last counter tried before ``SearchExhausted``; ``None``
            searches without bound.
        workers: Worker processes; 1 searches in-process.
        batch_size: Counters hashed per worker task.
    """

    prefix: str = "00000"
    length: int = 8
    max_counter: Optional[int] = None
    workers: int = 1
    batch_size: int = 100_000

    def __post_init__(self) -> None:
        if any(c not in "0123456789abcdef" for c in self.prefix):
            raise ValueError(f"prefix must be lowercase hex, got {self.prefix!r}")
        # Secure mode reads two characters after the prefix of a 32-char digest.
        if len(self.prefix) > 30:
            raise ValueError("prefix leaves no room for password characters")
        if not 1 <= self.length <= 16:
            raise ValueError("length must be between 1 and 16")
        if self.max_counter is not None and self.max_counter < 1:
            raise ValueError("max_counter must be positive")
        if self.workers < 1:
            raise ValueError("workers must be at least 1")
        if self.batch_size < 1:
            raise ValueError("batch_size must be at least 1")


@dataclass(frozen=True)
class WalkerConfig:
    start: Position = Position(0, 0)
    heading: Heading = Heading.NORTH
    step_fn_name: str = "default"
    record_visits: bool = False

    def __post_init__(self) -> None:
        if self.step_fn_name not in STEP_FN_REGISTRY:
            raise ValueError(f"Unknown step function: {self.step_fn_name}")


@dataclass(frozen=True)
class KeypadConfig:
    layout: KeypadLayout = BASIC_KEYPAD_LAYOUT
    start: Position = Position(1, 1)

    def __post_init__(self) -> None:
        x, y = self.start.x, self.start.y
        if not (0 <= y < len(self.layout) and 0 <= x < len(self.layout[y])):
            raise ValueError(f"Start {self.start} lies outside the layout")
        if self.layout[y][x] is None:
            raise ValueError(f"Start {self.start} has no button")


KEYPAD_LAYOUT_REGISTRY: Dict[str, Tuple[KeypadLayout, Position]] = {
    "basic": (BASIC_KEYPAD_LAYOUT, Position(1, 1)),
    "strange": (STRANGE_KEYPAD_LAYOUT, Position(0, 2)),
}
"""Registry of named keypad layouts and the button the finger starts on."""


def keypad_config(name: str) -> KeypadConfig:
    """Return the config registered under ``name``."""
    if name not in KEYPAD_LAYOUT_REGISTRY:
        raise ValueError(f"Unknown keypad layout: {name}")
    layout, start = KEYPAD_LAYOUT_REGISTRY[name]
    return KeypadConfig(layout=layout, start=start)
