# tests/integration/test_searcher_integration.py

import logging
import threading

import pytest

from grid_puzzles.config import SearchConfig
from grid_puzzles.errors import Cancelled, SearchExhausted
from grid_puzzles.searcher import HashSearcher
from grid_puzzles.state import SearchState
from tests.test_utils import (
    reference_crack,
    reference_crack_secure,
    reference_digests,
)


@pytest.mark.parametrize("seed", ["abc", "reyedfim", ""])
def test_crack_matches_reference(seed: str) -> None:
    searcher = HashSearcher(SearchConfig(prefix="0", batch_size=64))
    assert searcher.crack(seed) == reference_crack(seed, "0")


@pytest.mark.parametrize("seed", ["abc", "reyedfim"])
def test_crack_secure_matches_reference(seed: str) -> None:
    searcher = HashSearcher(SearchConfig(prefix="0", batch_size=64))
    password = searcher.crack_secure(seed)
    assert password == reference_crack_secure(seed, "0")
    assert len(password) == 8


def test_crack_without_prefix_uses_first_digest_characters() -> None:
    searcher = HashSearcher(SearchConfig(prefix="", length=4))
    assert searcher.crack("abc") == reference_crack("abc", "", length=4)


def test_batch_size_does_not_change_result() -> None:
    small = HashSearcher(SearchConfig(prefix="0", batch_size=1)).crack("abc")
    large = HashSearcher(SearchConfig(prefix="0", batch_size=10_000)).crack("abc")
    assert small == large


def test_custom_length() -> None:
    searcher = HashSearcher(SearchConfig(prefix="0", length=3))
    assert searcher.crack("abc") == reference_crack("abc", "0", length=3)
    assert searcher.crack_secure("abc") == reference_crack_secure("abc", "0", length=3)


def test_crack_secure_rejects_more_slots_than_digits() -> None:
    searcher = HashSearcher(SearchConfig(prefix="0", length=11))
    with pytest.raises(ValueError):
        searcher.crack_secure("abc")


def test_search_exhausted_reports_partial_password() -> None:
    seed = "abc"
    digests = reference_digests(seed, "0")
    first_counter, first_digest = next(digests)
    second_counter, _ = next(digests)
    cap = second_counter - 1
    searcher = HashSearcher(SearchConfig(prefix="0", max_counter=cap, batch_size=3))
    with pytest.raises(SearchExhausted) as excinfo:
        searcher.crack(seed)
    assert excinfo.value.partial == first_digest[1]
    assert excinfo.value.counter == cap
    assert excinfo.value.seed == seed
    assert first_counter <= cap


def test_cancelled_before_start() -> None:
    cancel = threading.Event()
    cancel.set()
    searcher = HashSearcher(SearchConfig(prefix="0"), cancel=cancel)
    with pytest.raises(Cancelled) as excinfo:
        searcher.crack("abc")
    assert excinfo.value.counter == 1


def test_unset_cancel_event_does_not_interfere() -> None:
    searcher = HashSearcher(SearchConfig(prefix="0"), cancel=threading.Event())
    assert searcher.crack("abc") == reference_crack("abc", "0")


def test_parallel_search_matches_sequential() -> None:
    sequential = HashSearcher(SearchConfig(prefix="0", batch_size=16))
    parallel = HashSearcher(SearchConfig(prefix="0", batch_size=16, workers=2))
    assert parallel.crack("abc") == sequential.crack("abc")
    assert parallel.crack_secure("abc") == sequential.crack_secure("abc")


def test_parallel_search_exhausts() -> None:
    searcher = HashSearcher(
        SearchConfig(prefix="00", max_counter=50, batch_size=7, workers=2)
    )
    with pytest.raises(SearchExhausted) as excinfo:
        searcher.crack("abc")
    assert excinfo.value.counter == 50


@pytest.mark.slow
def test_crack_door_abc() -> None:
    assert HashSearcher().crack("abc") == "18f47a30"


@pytest.mark.slow
def test_crack_secure_door_abc() -> None:
    assert HashSearcher().crack_secure("abc") == "05ace8e3"


def test_secure_search_exhausted_keeps_slot_positions() -> None:
    seed, cap = "abc", 40
    slots = ["_"] * 8
    for counter, digest in reference_digests(seed, "0"):
        if counter > cap:
            break
        index = digest[1]
        if index.isdigit() and int(index) < 8 and slots[int(index)] == "_":
            slots[int(index)] = digest[2]
    searcher = HashSearcher(SearchConfig(prefix="0", max_counter=cap))
    with pytest.raises(SearchExhausted) as excinfo:
        searcher.crack_secure(seed)
    assert excinfo.value.partial == "".join(slots)
    assert len(excinfo.value.partial) == 8


def test_password_not_rendered_per_digest_without_debug(
    caplog: pytest.LogCaptureFixture, monkeypatch: pytest.MonkeyPatch
) -> None:
    caplog.set_level(logging.INFO, logger="grid_puzzles.searcher")
    renders = []
    original = SearchState.password

    def counting_password(state: SearchState) -> str:
        renders.append(state.counter)
        return original.fget(state)

    monkeypatch.setattr(SearchState, "password", property(counting_password))
    password = HashSearcher(SearchConfig(prefix="0")).crack("abc")
    assert password == reference_crack("abc", "0")
    # once for the completion log record, once for the return value
    assert len(renders) == 2


def test_debug_log_records_each_qualifying_digest(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="grid_puzzles.searcher")
    HashSearcher(SearchConfig(prefix="0", length=3)).crack("abc")
    debug = [r for r in caplog.records if r.levelno == logging.DEBUG]
    assert len(debug) == 3
