"""Walk system.

Walking ``blocks`` tiles is performed as ``blocks`` unit steps. When the
walker records visits, every unit step first appends the position it is
leaving to the visit log.
"""

from dataclasses import replace

from grid_puzzles.state import WalkerState


def walk_system(state: WalkerState, blocks: int = 1) -> WalkerState:
    """Return the state after walking ``blocks`` unit steps straight ahead.

    Args:
        state (WalkerState): Current walker snapshot.
        blocks (int): Number of unit steps.

    Returns:
        WalkerState: New snapshot. ``visits`` grows by ``blocks`` entries if
            ``record_visits`` is set.
    """
    if blocks < 0:
        raise ValueError(f"blocks must be non-negative, got {blocks}")
    position = state.position
    visits = state.visits.evolver()
    for _ in range(blocks):
        if state.record_visits:
            visits.append(position)
        position = state.step_fn(position, state.heading, 1)
    return replace(state, position=position, visits=visits.persistent())
