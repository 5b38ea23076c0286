"""Keypad finger state machine.

Each line of instructions is a sequence of ``U``/``D``/``L``/``R`` moves; at
the end of a line the button under the finger is pressed. Moves that would
leave the layout or land where there is no button are ignored.
"""

import logging
from typing import List, Optional

from grid_puzzles.components import Position
from grid_puzzles.config import BASIC_KEYPAD_LAYOUT, STRANGE_KEYPAD_LAYOUT, KeypadConfig
from grid_puzzles.errors import InvalidDirection
from grid_puzzles.state import KeypadState
from grid_puzzles.systems.keypad import button_at, move_finger_system, press_system
from grid_puzzles.types import ButtonLabel, KeypadDirection, KeypadLayout

logger = logging.getLogger(__name__)

__all__ = ["Keypad", "BASIC_KEYPAD_LAYOUT", "STRANGE_KEYPAD_LAYOUT"]


def parse_moves(line: str) -> List[KeypadDirection]:
    try:
        return [KeypadDirection(char) for char in line]
    except ValueError as e:
        raise InvalidDirection(f"Unrecognised direction in {line!r}") from e


class Keypad:
    def __init__(
        self,
        layout: KeypadLayout = BASIC_KEYPAD_LAYOUT,
        position: Optional[Position] = None,
    ) -> None:
        config = KeypadConfig(layout=layout, start=position or KeypadConfig().start)
        self.state = KeypadState(
            layout=tuple(tuple(row) for row in config.layout),
            position=config.start,
        )

    @classmethod
    def from_config(cls, config: KeypadConfig) -> "Keypad":
        return cls(config.layout, config.start)

    @property
    def position(self) -> Position:
        return self.state.position

    @property
    def button(self) -> Optional[ButtonLabel]:
        return button_at(self.state, self.state.position)

    def move_finger(self, direction: str) -> None:
        try:
            move = KeypadDirection(direction)
        except ValueError as e:
            raise InvalidDirection(f"Unrecognised direction {direction!r}") from e
        self.state = move_finger_system(self.state, move)

    def press(self) -> None:
        self.state = press_system(self.state)

    def punch_code(self, instructions: str) -> None:
        """Follow each line of moves and press the button it ends on.

        Every line is validated before the finger moves, so a malformed
        line leaves the keypad untouched.
        """
        text = instructions.rstrip("\n")
        if not text:
            return
        sequences = [parse_moves(line) for line in text.split("\n")]
        state = self.state
        for sequence in sequences:
            for move in sequence:
                state = move_finger_system(state, move)
            state = press_system(state)
        self.state = state
        logger.debug("Punched %d buttons, code so far %r", len(sequences), self.code())

    def code(self) -> str:
        return "".join(self.state.pressed)
