"""Keypad systems.

The finger moves one button at a time. A move whose destination is outside
the layout, or lands on a cell without a button, leaves the state untouched.
"""

from dataclasses import replace
from typing import Optional

from grid_puzzles.components import Position
from grid_puzzles.moves import keypad_step
from grid_puzzles.state import KeypadState
from grid_puzzles.types import ButtonLabel, KeypadDirection


def button_at(state: KeypadState, position: Position) -> Optional[ButtonLabel]:
    """Return the label at ``position`` or ``None`` when there is no button."""
    if position.x < 0 or position.y < 0:
        return None
    if position.y >= len(state.layout):
        return None
    row = state.layout[position.y]
    if position.x >= len(row):
        return None
    return row[position.x]


def move_finger_system(state: KeypadState, direction: KeypadDirection) -> KeypadState:
    """Move the finger one button in ``direction`` if a button is there."""
    candidate = keypad_step(state.position, direction)
    if button_at(state, candidate) is None:
        return state
    return replace(state, position=candidate)


def press_system(state: KeypadState) -> KeypadState:
    """Record the button under the finger."""
    label = button_at(state, state.position)
    if label is None:
        raise ValueError(f"No button under finger at {state.position}")
    return replace(state, pressed=state.pressed.append(str(label)))
