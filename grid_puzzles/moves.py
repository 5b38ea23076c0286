"""Built-in unit step functions.

Each *step function* maps (position, heading, blocks) -> the new ``Position``
reached by walking ``blocks`` tiles straight ahead. The walker calls them with
``blocks=1`` per unit step so every intermediate tile can be observed.

Keypad moves are expressed the same way through :func:`keypad_step`; bounds
and absent buttons are the keypad system's concern, not the step's.
"""

from typing import Dict, Tuple

from grid_puzzles.components import Position
from grid_puzzles.types import Heading, KeypadDirection, StepFn


HEADING_DELTAS: Dict[Heading, Tuple[int, int]] = {
    Heading.NORTH: (0, 1),
    Heading.EAST: (1, 0),
    Heading.SOUTH: (0, -1),
    Heading.WEST: (-1, 0),
}

# Keypad rows grow downwards, so UP decreases y.
KEYPAD_DELTAS: Dict[KeypadDirection, Tuple[int, int]] = {
    KeypadDirection.UP: (0, -1),
    KeypadDirection.DOWN: (0, 1),
    KeypadDirection.LEFT: (-1, 0),
    KeypadDirection.RIGHT: (1, 0),
}


def default_step_fn(position: Position, heading: Heading, blocks: int = 1) -> Position:
    """Straight-line step on the unbounded compass grid."""
    dx, dy = HEADING_DELTAS[heading]
    return position.moved(dx * blocks, dy * blocks)


def keypad_step(position: Position, direction: KeypadDirection) -> Position:
    """Return the candidate neighbour of ``position`` in ``direction``."""
    dx, dy = KEYPAD_DELTAS[direction]
    return position.moved(dx, dy)


STEP_FN_REGISTRY: Dict[str, StepFn] = {
    "default": default_step_fn,
}
"""Registry of built-in step function names to callables."""
