"""Immutable state snapshots.

Each engine keeps its whole situation in a frozen dataclass. Systems in
:mod:`grid_puzzles.systems` are pure functions that take a previous snapshot
and return a *new* one; the object facades (``GridWalker``, ``Keypad``,
``HashSearcher``) only hold the latest snapshot.

Design notes:

* Growing histories (visit log, pressed buttons, password slots) are
  ``pyrsistent.PVector`` values, so old snapshots never observe later
  appends.
* ``Position`` is itself a frozen value; storing it in a log cannot alias a
  later move.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from pyrsistent import pvector
from pyrsistent.typing import PVector

from grid_puzzles.components import Position
from grid_puzzles.moves import default_step_fn
from grid_puzzles.types import ButtonLabel, Heading, StepFn

UNSET_SLOT = "_"


@dataclass(frozen=True)
class WalkerState:
    """Compass walker snapshot.

    Attributes:
        position (Position): Current position.
        heading (Heading): Current heading.
        step_fn (StepFn): Unit step function used for walking.
        record_visits (bool): Whether unit steps append to ``visits``.
        visits (PVector[Position]): Pre-step position of every unit step, in
            order.
    """

    position: Position = Position(0, 0)
    heading: Heading = Heading.NORTH
    step_fn: StepFn = default_step_fn
    record_visits: bool = False
    visits: PVector[Position] = field(default_factory=pvector)


@dataclass(frozen=True)
class KeypadState:
    """Keypad finger snapshot.

    Attributes:
        layout (Tuple[Tuple[Optional[ButtonLabel], ...], ...]): Rows of button
            labels; ``None`` marks a cell without a button.
        position (Position): Finger position as ``(column, row)``.
        pressed (PVector[str]): Labels pressed so far, in order.
    """

    layout: Tuple[Tuple[Optional[ButtonLabel], ...], ...]
    position: Position
    pressed: PVector[str] = field(default_factory=pvector)


@dataclass(frozen=True)
class SearchState:
    """Hash search progress.

    Attributes:
        seed (str): Door id prefixed to every counter.
        counter (int): Next counter to hash; starts at 1.
        slots (PVector[Optional[str]]): Output characters. The sequential
            variant appends; the secure variant pre-sizes with ``None``.
    """

    seed: str
    counter: int = 1
    slots: PVector[Optional[str]] = field(default_factory=pvector)

    @property
    def password(self) -> str:
        """Characters found so far, with ``_`` marking unset secure slots."""
        return "".join(UNSET_SLOT if c is None else c for c in self.slots)

    def filled(self, length: int) -> bool:
        """True once ``length`` slots hold a character."""
        return sum(1 for c in self.slots if c is not None) >= length
