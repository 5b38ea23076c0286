"""Compass walker.

Instructions are comma-separated tokens such as ``"R2, L30"``: a turn letter
(``R`` one clockwise quarter-turn, ``L`` three) followed by the number of
blocks to walk after turning. :class:`GridWalker` applies them through the
pure reducers in :mod:`grid_puzzles.systems`.

Examples
--------
>>> walker = GridWalker()
>>> walker.navigate("R5, L5, R5, R3")
>>> walker.manhattan_distance()
12
"""

import logging
from typing import List, Sequence

from pyrsistent.typing import PVector

from grid_puzzles.components import Position
from grid_puzzles.config import WalkerConfig
from grid_puzzles.errors import InvalidDirection, InvalidDistance, NoRevisit
from grid_puzzles.moves import STEP_FN_REGISTRY
from grid_puzzles.state import WalkerState
from grid_puzzles.systems.heading import turn_system
from grid_puzzles.systems.visits import first_revisit
from grid_puzzles.systems.walk import walk_system
from grid_puzzles.types import LEFT_TURN, RIGHT_TURN, Heading, Instruction

logger = logging.getLogger(__name__)

INSTRUCTION_SEPARATOR = ", "

TURN_LETTERS = {"R": RIGHT_TURN, "L": LEFT_TURN}


def parse(instructions: str) -> List[Instruction]:
    """Parse an instruction string into ``(turns, blocks)`` pairs.

    Blank input parses to no instructions.

    Raises:
        InvalidDirection: A token does not start with ``R`` or ``L``.
        InvalidDistance: The rest of a token is not a non-negative integer.
    """
    parsed: List[Instruction] = []
    text = instructions.strip()
    if not text:
        return parsed
    for token in text.split(INSTRUCTION_SEPARATOR):
        direction, distance = token[:1], token[1:]
        if direction not in TURN_LETTERS:
            raise InvalidDirection(f"Unrecognised direction in {token!r}")
        if not (distance.isascii() and distance.isdigit()):
            raise InvalidDistance(f"Unrecognised distance in {token!r}")
        parsed.append((TURN_LETTERS[direction], int(distance)))
    return parsed


def format_instructions(instructions: Sequence[Instruction]) -> str:
    """Inverse of :func:`parse`."""
    letters = {turns: letter for letter, turns in TURN_LETTERS.items()}
    tokens = []
    for turns, blocks in instructions:
        if turns not in letters:
            raise InvalidDirection(f"No turn letter for {turns} quarter-turns")
        tokens.append(f"{letters[turns]}{blocks}")
    return INSTRUCTION_SEPARATOR.join(tokens)


class GridWalker:
    """Walker on an unbounded grid, starting at ``start`` facing ``heading``."""

    def __init__(
        self,
        start: Position = Position(0, 0),
        heading: Heading = Heading.NORTH,
        record_visits: bool = False,
        step_fn_name: str = "default",
    ) -> None:
        config = WalkerConfig(
            start=start,
            heading=heading,
            step_fn_name=step_fn_name,
            record_visits=record_visits,
        )
        self.state = WalkerState(
            position=config.start,
            heading=config.heading,
            step_fn=STEP_FN_REGISTRY[config.step_fn_name],
            record_visits=config.record_visits,
        )

    @classmethod
    def from_config(cls, config: WalkerConfig) -> "GridWalker":
        return cls(config.start, config.heading, config.record_visits, config.step_fn_name)

    @property
    def position(self) -> Position:
        return self.state.position

    @property
    def facing(self) -> Heading:
        return self.state.heading

    @property
    def visits(self) -> PVector[Position]:
        return self.state.visits

    def turn(self, turns: int = 1) -> None:
        self.state = turn_system(self.state, turns)

    def walk(self, blocks: int = 1) -> None:
        self.state = walk_system(self.state, blocks)

    def navigate(self, instructions: str) -> None:
        """Follow every instruction; nothing is applied if any token is malformed."""
        parsed = parse(instructions)
        logger.debug("Navigating %d instructions from %s", len(parsed), self.position)
        state = self.state
        for turns, blocks in parsed:
            for _ in range(turns):
                state = turn_system(state)
            state = walk_system(state, blocks)
        self.state = state
        logger.debug("Arrived at %s facing %s", self.position, self.facing)

    def manhattan_distance(self) -> int:
        return self.position.manhattan()

    def first_revisited_intersection(self) -> Position:
        """Return the first position reached a second time.

        Raises:
            NoRevisit: No position occurs twice in the visit log (always the
                case when the walker does not record visits).
        """
        revisit = first_revisit(self.state.visits)
        if revisit is None:
            raise NoRevisit(
                f"No revisited position among {len(self.state.visits)} visits"
            )
        return revisit

