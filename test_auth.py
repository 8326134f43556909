import time

import pytest

from notionical.core.auth import authenticate, tokens_match


def test_identical_tokens_match() -> None:
    assert authenticate("s3cret-token", "s3cret-token") is True


@pytest.mark.parametrize(
    "presented",
    ["s3cret-tokeN", "x3cret-token", "s3cret-tok3n", "S3CRET-TOKEN"],
)
def test_same_length_different_tokens_fail(presented: str) -> None:
    assert authenticate(presented, "s3cret-token") is False


@pytest.mark.parametrize("presented", ["", "s3cret", "s3cret-token-and-more"])
def test_different_lengths_fail(presented: str) -> None:
    assert authenticate(presented, "s3cret-token") is False


def test_length_is_measured_in_bytes() -> None:
    # "é" is one character but two UTF-8 bytes
    assert authenticate("é", "a") is False
    assert authenticate("é", "e") is False
    assert authenticate("é", "é") is True


def _best_time(given: bytes, actual: bytes, rounds: int = 100) -> float:
    best = float("inf")
    for _ in range(rounds):
        started = time.perf_counter()
        tokens_match(given, actual)
        best = min(best, time.perf_counter() - started)
    return best


def test_comparison_time_does_not_depend_on_mismatch_position() -> None:
    size = 1_000_000
    actual = b"a" * size
    early = b"b" + b"a" * (size - 1)
    late = b"a" * (size - 1) + b"b"

    early_time = _best_time(early, actual)
    late_time = _best_time(late, actual)

    # An early-exit comparison finishes the first case almost instantly
    assert late_time / 3 < early_time < late_time * 3


def test_tokens_match_on_bytes() -> None:
    assert tokens_match(b"token", b"token") is True
    assert tokens_match(b"token", b"tokeN") is False
    assert tokens_match(b"token", b"tokens") is False
