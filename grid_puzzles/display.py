"""Pixel display.

A ``width x height`` screen of on/off pixels stored as a numpy boolean array
indexed ``pixels[y, x]``. Operations are typed values applied with
:meth:`Display.apply`:

* :class:`Rect` turns on the top-left ``width x height`` block.
* :class:`RotateRow` shifts a row right by ``by`` pixels, wrapping around.
* :class:`RotateColumn` shifts a column down by ``by`` pixels, wrapping around.

Turning text such as ``"rotate row y=0 by 4"`` into operations is left to the
caller.
"""

from dataclasses import dataclass
from typing import Iterable, List, Union

import numpy as np
import numpy.typing as npt

BoolArray = npt.NDArray[np.bool_]


@dataclass(frozen=True)
class Rect:
    width: int
    height: int


@dataclass(frozen=True)
class RotateRow:
    y: int
    by: int


@dataclass(frozen=True)
class RotateColumn:
    x: int
    by: int


Operation = Union[Rect, RotateRow, RotateColumn]


class Display:
    def __init__(self, width: int, height: int) -> None:
        if width < 1 or height < 1:
            raise ValueError(f"Display must be at least 1x1, got {width}x{height}")
        self.width = width
        self.height = height
        self.pixels: BoolArray = np.zeros((height, width), dtype=np.bool_)

    def apply(self, operation: Operation) -> None:
        if isinstance(operation, Rect):
            self.rect(operation.width, operation.height)
        elif isinstance(operation, RotateRow):
            self.rotate_row(operation.y, operation.by)
        elif isinstance(operation, RotateColumn):
            self.rotate_column(operation.x, operation.by)
        else:
            raise ValueError(f"Unknown display operation: {operation!r}")

    def apply_all(self, operations: Iterable[Operation]) -> None:
        for operation in operations:
            self.apply(operation)

    def rect(self, width: int, height: int) -> None:
        """Light the top-left block, clipped to the screen."""
        if width < 0 or height < 0:
            raise ValueError(f"Rect size must be non-negative, got {width}x{height}")
        self.pixels[:height, :width] = True

    def rotate_row(self, y: int, by: int) -> None:
        self._check_index(y, self.height, "row")
        self.pixels[y, :] = np.roll(self.pixels[y, :], by)

    def rotate_column(self, x: int, by: int) -> None:
        self._check_index(x, self.width, "column")
        self.pixels[:, x] = np.roll(self.pixels[:, x], by)

    def count_lit_pixels(self) -> int:
        return int(np.count_nonzero(self.pixels))

    def rows(self, on: str = "#", off: str = ".") -> List[str]:
        """Return the screen as text lines, one per pixel row."""
        return ["".join(on if lit else off for lit in row) for row in self.pixels]

    @staticmethod
    def _check_index(index: int, size: int, kind: str) -> None:
        if not 0 <= index < size:
            raise IndexError(f"Display {kind} {index} out of range 0..{size - 1}")
