"""Visit log queries."""

from typing import Iterable, Optional, Set

from grid_puzzles.components import Position


def first_revisit(visits: Iterable[Position]) -> Optional[Position]:
    """Return the first position that already appeared earlier in ``visits``.

    Scans in recorded order with a set of seen positions, so the answer is the
    earliest *second* occurrence, not the earliest position that is ever
    repeated.
    """
    seen: Set[Position] = set()
    for position in visits:
        if position in seen:
            return position
        seen.add(position)
    return None
