"""Door password search.

:class:`HashSearcher` walks the counter sequence ``1, 2, 3, ...`` hashing
``seed + counter`` and feeds qualifying digests, in counter order, into one of
the absorb systems from :mod:`grid_puzzles.systems.search`.

Counters are hashed in batches of ``SearchConfig.batch_size``. With
``workers > 1`` batches are hashed in a process pool; a bounded window of
in-flight batches is consumed strictly in submission order, so the result is
identical to the in-process search.

Examples
--------
>>> from grid_puzzles.searcher import HashSearcher
>>> HashSearcher().crack("abc")  # doctest: +SKIP
'18f47a30'
"""

import logging
import threading
from collections import deque
from concurrent.futures import Future, ProcessPoolExecutor
from contextlib import closing
from dataclasses import replace
from typing import Callable, Deque, Iterator, List, Optional, Tuple

from pyrsistent import pvector

from grid_puzzles.config import SearchConfig
from grid_puzzles.errors import Cancelled, SearchExhausted
from grid_puzzles.state import SearchState
from grid_puzzles.systems.search import append_system, qualifying_digests, slot_system

logger = logging.getLogger(__name__)

AbsorbFn = Callable[[SearchState, int, str, int], SearchState]
Batch = List[Tuple[int, str]]

# Secure slots are addressed by a single decimal digit.
MAX_SECURE_LENGTH = 10


class HashSearcher:
    """Brute-force password deriver.

    Args:
        config (SearchConfig | None): Search parameters; defaults to the
            five-zero prefix, 8 characters, unbounded, in-process.
        cancel (threading.Event | None): When set, the running search raises
            :class:`grid_puzzles.errors.Cancelled` before its next batch.
    """

    def __init__(
        self,
        config: Optional[SearchConfig] = None,
        cancel: Optional[threading.Event] = None,
    ) -> None:
        self.config = config or SearchConfig()
        self.cancel = cancel

    def crack(self, seed: str) -> str:
        """Return the password built from the character after each qualifying prefix."""
        state = SearchState(seed=seed)
        return self._search(state, append_system).password

    def crack_secure(self, seed: str) -> str:
        """Return the password whose slots are addressed by each qualifying digest."""
        if self.config.length > MAX_SECURE_LENGTH:
            raise ValueError(
                f"Secure passwords have at most {MAX_SECURE_LENGTH} slots, got {self.config.length}"
            )
        state = SearchState(seed=seed, slots=pvector([None] * self.config.length))
        return self._search(state, slot_system).password

    def _search(self, state: SearchState, absorb: AbsorbFn) -> SearchState:
        offset = len(self.config.prefix)
        with closing(self._batches(state.seed)) as batches:
            for _, stop, batch in batches:
                for counter, digest in batch:
                    state = absorb(state, counter, digest, offset)
                    if logger.isEnabledFor(logging.DEBUG):
                        logger.debug(
                            "seed=%s counter=%d digest=%s password=%r",
                            state.seed,
                            counter,
                            digest,
                            state.password,
                        )
                    if state.filled(self.config.length):
                        logger.info(
                            "Found password %r for %r after %d hashes",
                            state.password,
                            state.seed,
                            counter,
                        )
                        return state
                state = replace(state, counter=stop)

        raise SearchExhausted(state.seed, state.counter - 1, state.password)

    def _ranges(self) -> Iterator[Tuple[int, int]]:
        """Yield ``[start, stop)`` counter ranges up to ``max_counter``."""
        start = 1
        size = self.config.batch_size
        limit = self.config.max_counter
        while limit is None or start <= limit:
            stop = start + size if limit is None else min(start + size, limit + 1)
            yield start, stop
            start = stop

    def _check_cancel(self, seed: str, counter: int) -> None:
        if self.cancel is not None and self.cancel.is_set():
            logger.info("Search for %r cancelled at counter %d", seed, counter)
            raise Cancelled(seed, counter)

    def _batches(self, seed: str) -> Iterator[Tuple[int, int, Batch]]:
        prefix = self.config.prefix
        if self.config.workers == 1:
            for start, stop in self._ranges():
                self._check_cancel(seed, start)
                yield start, stop, qualifying_digests(seed, start, stop, prefix)
            return

        window = self.config.workers * 2
        ranges = self._ranges()
        in_flight: Deque[Tuple[int, int, Future[Batch]]] = deque()
        executor = ProcessPoolExecutor(max_workers=self.config.workers)
        try:
            for start, stop in ranges:
                in_flight.append(
                    (start, stop, executor.submit(qualifying_digests, seed, start, stop, prefix))
                )
                if len(in_flight) < window:
                    continue
                head_start, head_stop, future = in_flight.popleft()
                self._check_cancel(seed, head_start)
                yield head_start, head_stop, future.result()
            while in_flight:
                head_start, head_stop, future = in_flight.popleft()
                self._check_cancel(seed, head_start)
                yield head_start, head_stop, future.result()
        finally:
            executor.shutdown(wait=True, cancel_futures=True)
