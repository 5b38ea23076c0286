"""Hash search systems.

A *qualifying digest* is the lowercase MD5 hex digest of ``seed + counter``
(counter in plain decimal) that starts with the configured prefix. The two
password variants differ only in how a qualifying digest is absorbed into
:class:`grid_puzzles.state.SearchState`:

* :func:`append_system` appends the character right after the prefix.
* :func:`slot_system` reads that character as a slot index and fills the slot
  with the following character, first writer wins.

:func:`qualifying_digests` is a plain module-level function so it can be
shipped to worker processes.
"""

import hashlib
from dataclasses import replace
from typing import List, Tuple

from grid_puzzles.state import SearchState


def md5_hex(text: str) -> str:
    """Return the lowercase hex MD5 digest of ``text``."""
    return hashlib.md5(text.encode(), usedforsecurity=False).hexdigest()


def digest_for(seed: str, counter: int) -> str:
    return md5_hex(f"{seed}{counter}")


def qualifying_digests(
    seed: str, start: int, stop: int, prefix: str = "00000"
) -> List[Tuple[int, str]]:
    """Return ``(counter, digest)`` pairs in ``[start, stop)`` whose digest starts with ``prefix``.

    Results are ordered by counter.
    """
    found: List[Tuple[int, str]] = []
    for counter in range(start, stop):
        digest = digest_for(seed, counter)
        if digest.startswith(prefix):
            found.append((counter, digest))
    return found


def append_system(state: SearchState, counter: int, digest: str, offset: int) -> SearchState:
    """Append ``digest[offset]`` to the password."""
    return replace(state, counter=counter + 1, slots=state.slots.append(digest[offset]))


def slot_system(state: SearchState, counter: int, digest: str, offset: int) -> SearchState:
    """Fill slot ``digest[offset]`` with ``digest[offset + 1]`` if it is still empty.

    Non-decimal or out-of-range slot characters are ignored; the counter
    advances either way.
    """
    state = replace(state, counter=counter + 1)
    index = digest[offset]
    if not index.isdigit():
        return state
    slot = int(index)
    if slot >= len(state.slots) or state.slots[slot] is not None:
        return state
    return replace(state, slots=state.slots.set(slot, digest[offset + 1]))
