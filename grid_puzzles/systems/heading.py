"""Heading system.

Quarter-turns are unit transitions: turning by ``n`` applies ``n`` single
clockwise turns, which collapses to modular arithmetic on the fixed heading
cycle.
"""

from dataclasses import replace

from grid_puzzles.state import WalkerState


def turn_system(state: WalkerState, turns: int = 1) -> WalkerState:
    """Return the state after ``turns`` clockwise quarter-turns.

    Args:
        state (WalkerState): Current walker snapshot.
        turns (int): Number of quarter-turns; left turns are expressed as 3.

    Returns:
        WalkerState: New snapshot with the updated heading.
    """
    if turns < 0:
        raise ValueError(f"turns must be non-negative, got {turns}")
    return replace(state, heading=state.heading.turned(turns))
