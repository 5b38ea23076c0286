"""Command line driver.

Feeds a seed or instruction text into one engine and prints the result::

    grid-puzzles crack reyedfim --secure --workers 4
    grid-puzzles navigate "R2, L3" --revisit
    grid-puzzles keypad instructions.txt --layout strange
"""

import argparse
import logging
import sys
from typing import List, Optional

from grid_puzzles.config import KEYPAD_LAYOUT_REGISTRY, SearchConfig, keypad_config
from grid_puzzles.errors import PuzzleError
from grid_puzzles.keypad import Keypad
from grid_puzzles.searcher import HashSearcher
from grid_puzzles.walker import GridWalker

logger = logging.getLogger(__name__)


def _read(source: str) -> str:
    """Return stdin for ``-``, otherwise the argument itself."""
    if source == "-":
        return sys.stdin.read()
    return source


def _read_file(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    with open(source, encoding="utf-8") as f:
        return f.read()


def _crack(args: argparse.Namespace) -> str:
    config = SearchConfig(max_counter=args.max_counter, workers=args.workers)
    searcher = HashSearcher(config)
    if args.secure:
        return f"The second code is {searcher.crack_secure(args.seed)}"
    return f"The code is {searcher.crack(args.seed)}"


def _navigate(args: argparse.Namespace) -> str:
    walker = GridWalker(record_visits=args.revisit)
    walker.navigate(_read(args.instructions))
    lines = [
        f"Arrived at {walker.position}, which is {walker.manhattan_distance()} blocks away."
    ]
    if args.revisit:
        revisit = walker.first_revisited_intersection()
        lines.append(f"First location visited twice is {revisit}, {revisit.manhattan()} blocks away.")
    return "\n".join(lines)


def _keypad(args: argparse.Namespace) -> str:
    keypad = Keypad.from_config(keypad_config(args.layout))
    keypad.punch_code(_read_file(args.file))
    return f"The code with the {args.layout} keypad layout is {keypad.code()}"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="grid-puzzles")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    sub = parser.add_subparsers(dest="command", required=True)

    crack = sub.add_parser("crack", help="Derive a door password from its id")
    crack.add_argument("seed")
    crack.add_argument("--secure", action="store_true", help="Use positional slots")
    crack.add_argument("--workers", type=int, default=1)
    crack.add_argument("--max-counter", type=int, default=None)
    crack.set_defaults(handler=_crack)

    navigate = sub.add_parser("navigate", help="Follow R/L walking instructions")
    navigate.add_argument("instructions", help="Instruction string, or - for stdin")
    navigate.add_argument("--revisit", action="store_true", help="Also report the first revisit")
    navigate.set_defaults(handler=_navigate)

    keypad = sub.add_parser("keypad", help="Punch a bathroom code")
    keypad.add_argument("file", help="File with one line of moves per button, or - for stdin")
    keypad.add_argument("--layout", choices=sorted(KEYPAD_LAYOUT_REGISTRY), default="basic")
    keypad.set_defaults(handler=_keypad)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    try:
        print(args.handler(args))
    except (PuzzleError, ValueError, OSError) as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
