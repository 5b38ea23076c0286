"""Typed failures raised by the puzzle engines.

Parsing failures derive from ``ValueError`` and lookup failures from
``LookupError`` so callers catching the builtin families keep working.
"""


class PuzzleError(Exception):
    """Base class for every engine failure."""


class InvalidInstruction(PuzzleError, ValueError):
    """An instruction token could not be understood."""


class InvalidDirection(InvalidInstruction):
    """Turn or move character is not one of the recognised directions."""


class InvalidDistance(InvalidInstruction):
    """Distance part of a walking instruction is not a non-negative integer."""


class NoRevisit(PuzzleError, LookupError):
    """The visit log holds no position visited twice."""


class SearchExhausted(PuzzleError):
    """Hash search hit its counter cap before the password was complete."""

    def __init__(self, seed: str, counter: int, partial: str) -> None:
        super().__init__(
            f"Search for {seed!r} exhausted at counter {counter} with partial password {partial!r}"
        )
        self.seed = seed
        self.counter = counter
        self.partial = partial


class Cancelled(PuzzleError):
    """Hash search was aborted through its cancellation event."""

    def __init__(self, seed: str, counter: int) -> None:
        super().__init__(f"Search for {seed!r} cancelled at counter {counter}")
        self.seed = seed
        self.counter = counter
