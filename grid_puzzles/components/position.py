"""Position component.

Immutable integer grid coordinates. Every move produces a new ``Position``,
so values can be stored in visit logs and sets without aliasing.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        x: Column index (grows to the east / right).
        y: Row index. The walker treats it as growing northwards, the keypad
            as a row index growing downwards.
    """

    x: int
    y: int

    def moved(self, dx: int, dy: int) -> "Position":
        """Return the position offset by ``(dx, dy)``."""
        return Position(self.x + dx, self.y + dy)

    def manhattan(self) -> int:
        """Return taxicab distance from the origin."""
        return abs(self.x) + abs(self.y)
