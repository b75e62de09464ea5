import pytest
from packages.engine import (
    LengthMismatchError, ResponsePattern, WordSet, bucket_sizes, buckets, evaluate,
)

WORDS = WordSet(["crane", "raise", "stare", "trace", "cared", "racer", "scoop", "adieu", "alone"])


@pytest.mark.parametrize("guess", ["crane", "scoop", "zzzzz", "eerie"])
def test_every_word_in_exactly_one_bucket(guess):
    b = buckets(guess, WORDS)
    assert sum(len(ws) for ws in b.values()) == len(WORDS)
    union = set().union(*b.values())
    assert union == set(WORDS)
    assert sorted(len(ws) for ws in b.values()) == bucket_sizes(guess, WORDS)


def test_winning_bucket_holds_only_the_guess():
    b = buckets("trace", WORDS)
    win = ResponsePattern.from_symbols("GGGGG")
    assert b[win] == {"trace"}
    assert all(not p.is_winner for p in buckets("zzzzz", WORDS))


def test_bucket_keys_group_equal_feedback():
    b = buckets("raise", WORDS)
    for pattern, ws in b.items():
        assert all(evaluate(w, "raise").pattern == pattern for w in ws)
    assert "crane" in b[ResponsePattern.from_symbols("AARRG")]


def test_length_mismatch():
    with pytest.raises(LengthMismatchError):
        buckets("cranes", WORDS)
    with pytest.raises(LengthMismatchError):
        bucket_sizes("cra", WORDS)
