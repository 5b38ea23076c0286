"""grid_puzzles.components
=========================

Value objects shared by the walker and the keypad::

    from grid_puzzles.components import Position

"""

from .position import Position

__all__ = ["Position"]
