import itertools

import pytest
from packages.engine import (
    PatternOverflowError, ResponsePattern, Status, decode, encode, evaluate, is_winning,
)


@pytest.mark.parametrize("n", range(1, 9))
def test_round_trip_every_length(n):
    # a few deterministic sequences per length rather than the full 4**n grid
    for k in range(4):
        statuses = tuple(Status((i + k) % 4) for i in range(n))
        assert decode(encode(statuses)) == statuses


def test_position_zero_is_least_significant():
    p = encode([Status.EXCESS, Status.CORRECT, Status.PRESENT])
    assert p.encoded == 0b01_00_11
    assert p.word_length == 3
    assert p.status_at(0) is Status.EXCESS
    assert str(p) == "XGA"


def test_all_correct_is_zero_and_winning():
    p = encode([Status.CORRECT] * 5)
    assert p.encoded == 0
    assert is_winning(p)
    assert not is_winning(encode([Status.CORRECT] * 4 + [Status.PRESENT]))


@pytest.mark.parametrize("n", [0, 9])
def test_encode_rejects_bad_lengths(n):
    with pytest.raises(PatternOverflowError):
        encode([Status.ABSENT] * n)


def test_equality_needs_same_length():
    short = encode([Status.CORRECT] * 4)
    long = encode([Status.CORRECT] * 5)
    assert short.encoded == long.encoded
    assert short != long
    assert len({short, long}) == 2


def test_same_statuses_same_key_regardless_of_words():
    a = evaluate("arose", "raise").pattern
    b = evaluate("abcde", "bafde").pattern  # different words, same feedback
    assert str(a) == "AARGG"
    assert a == ResponsePattern.from_symbols("AARGG")
    assert hash(a) == hash(ResponsePattern.from_symbols("aargg"))
    assert a == b


def test_distinct_sequences_distinct_keys():
    seqs = list(itertools.product(Status, repeat=3))
    assert len({encode(s) for s in seqs}) == len(seqs)


def test_unknown_symbol():
    with pytest.raises(ValueError):
        ResponsePattern.from_symbols("GYG")
