"""Deterministic puzzle engines: door password search, compass walker, keypad
and pixel display."""

from grid_puzzles.components import Position
from grid_puzzles.display import Display
from grid_puzzles.keypad import Keypad
from grid_puzzles.searcher import HashSearcher
from grid_puzzles.types import Heading
from grid_puzzles.walker import GridWalker

__all__ = ["Display", "GridWalker", "HashSearcher", "Heading", "Keypad", "Position"]
