import itertools

import pytest
from packages.engine import ConstraintFilter, LengthMismatchError, Response, Status, WordSet, evaluate

WORDS = WordSet([
    "arose", "raise", "crane", "stare", "trace", "beech", "beach", "betel", "begin",
    "beige", "pansy", "salsa", "patsy", "tansy", "study", "mucus", "focus", "truss",
    "mourn", "furor", "flour", "rumor", "jerky", "deter", "elder", "eerie", "level",
    "llama", "sassy", "geese", "knack", "kayak",
])


def _filtered(secret, *guesses, words=None):
    words = words or WORDS
    f = ConstraintFilter(5)
    for g in guesses:
        f.update(evaluate(secret, g))
    return f, f.apply(words)


# --- scenarios with duplicate letters ---

def test_jerky_arose_amber_counts_once():
    words = WordSet(["jerky", "arose", "deter", "elder", "eerie"])
    _, out = _filtered("jerky", "arose", words=words)
    assert "jerky" in out
    assert "elder" in out
    assert "eerie" not in out  # 'e' sat at position 4, which was amber


def test_pansy_salsa_excess_does_not_remove_letter():
    words = WordSet(["pansy", "salsa", "patsy", "tansy", "raise"])
    _, out = _filtered("pansy", "raise", "salsa", words=words)
    assert "pansy" in out


def test_mourn_furor_mixed_statuses():
    words = WordSet(["mourn", "furor", "flour", "rumor"])
    _, out = _filtered("mourn", "furor", words=words)
    assert "mourn" in out


def test_study_mucus_multiple_excess_letters():
    words = WordSet(["study", "mucus", "focus", "truss"])
    _, out = _filtered("study", "mucus", words=words)
    assert "study" in out
    assert "mucus" not in out


def test_green_locks_position():
    words = WordSet(["arose", "erase", "prose"])
    f, out = _filtered("arose", "prose", words=words)
    assert set(out) == {"arose"}
    assert f.allowed_letters(1) == {"r"}


def test_amber_requires_letter_elsewhere():
    words = WordSet(["mourn", "arose", "mayor", "roams"])
    f, out = _filtered("mourn", "arose", words=words)
    assert set(out) == {"mourn"}
    assert f.required_counts() == {"r": 1, "o": 1}
    assert "r" not in f.allowed_letters(1)


def test_red_removes_letter_everywhere():
    words = WordSet(["mourn", "arose", "kayak", "knack"])
    f, out = _filtered("mourn", "kayak", words=words)
    assert set(out) == {"mourn"}
    assert all("k" not in f.allowed_letters(i) for i in range(5))


def test_beech_betel_minimum_counts():
    words = WordSet(["beech", "betel", "begin", "beige", "beret", "rebel"])
    f, out = _filtered("beech", "betel", words=words)
    assert set(out) == {"beech", "beige"}
    assert f.required_counts()["e"] == 2


def test_minimum_counts_never_decrease():
    f = ConstraintFilter(5)
    f.update(evaluate("beech", "betel"))   # two e's confirmed
    f.update(evaluate("beech", "ready"))   # one e confirmed
    assert f.required_counts()["e"] == 2


# --- locked positions ---

def test_global_absent_never_clears_locked_position():
    f = ConstraintFilter(5)
    f.update(Response.parse("slate", "GRRRR"))
    # hand-entered feedback that calls 's' absent everywhere
    f.update(Response.parse("bossy", "RRRRR"))
    assert f.allowed_letters(0) == {"s"}
    assert all("s" not in f.allowed_letters(i) for i in range(1, 5))


def test_absent_with_green_elsewhere_only_hits_its_position():
    f = ConstraintFilter(5)
    f.update(Response.parse("sassy", "GRRRR"))
    assert f.allowed_letters(0) == {"s"}
    assert "s" not in f.allowed_letters(2)
    assert "s" not in f.allowed_letters(3)
    assert "s" in f.allowed_letters(4)
    assert f.required_counts() == {"s": 1}


@pytest.mark.parametrize("secret", ["beech", "level", "llama", "geese", "sassy"])
def test_locked_letters_survive_every_later_update(secret):
    f = ConstraintFilter(5)
    locked = {}
    for g in WORDS:
        r = evaluate(secret, g)
        f.update(r)
        for i, (ch, s) in enumerate(r.entries()):
            if s.symbol == "G":
                locked[i] = ch
        for i, ch in locked.items():
            assert f.allowed_letters(i) == {ch}


# --- properties ---

@pytest.mark.parametrize("secret,guesses", [
    ("pansy", ("raise", "salsa")),
    ("study", ("mucus", "truss")),
    ("level", ("geese", "llama")),
    ("beech", ("betel", "beach", "eerie")),
    ("mourn", ("furor", "rumor", "flour")),
])
def test_secret_survives_idempotent_and_monotone(secret, guesses):
    f = ConstraintFilter(5)
    current = WORDS
    for g in guesses:
        f.update(evaluate(secret, g))
        nxt = f.apply(current)
        assert len(nxt) <= len(current)
        assert secret in nxt
        assert f.apply(nxt) == nxt
        current = nxt
    assert f.apply(WORDS) == current


def test_apply_does_not_mutate_input():
    before = set(WORDS)
    f = ConstraintFilter(5)
    f.update(evaluate("crane", "raise"))
    f.apply(WORDS)
    assert set(WORDS) == before


def test_reset_clears_state():
    f = ConstraintFilter(5)
    f.update(evaluate("crane", "raise"))
    assert len(f.apply(WORDS)) < len(WORDS)
    f.reset()
    assert f.apply(WORDS) == WORDS
    assert f.required_counts() == {}


def test_state_is_a_copy():
    f = ConstraintFilter(5)
    s = f.state
    s.allowed[0].clear()
    assert len(f.allowed_letters(0)) == 26


def test_length_mismatch():
    f = ConstraintFilter(5)
    with pytest.raises(LengthMismatchError):
        f.update(evaluate("cranes", "raises"))
    with pytest.raises(LengthMismatchError):
        f.apply(WordSet(["cranes"]))


def test_exhaustive_small_game_keeps_only_consistent_secret_sets():
    # every (secret, guess) pair: the secret always survives one update
    for secret, guess in itertools.product(list(WORDS)[:12], repeat=2):
        _, out = _filtered(secret, guess)
        assert secret in out


def test_update_with_uppercase_response_uses_lowercase_letters():
    A, R, G = Status.PRESENT, Status.ABSENT, Status.CORRECT
    f = ConstraintFilter(5)
    f.update(Response("RAISE", [A, A, R, G, G]))
    assert f.allowed_letters(3) == {"s"}
    assert f.required_counts() == {"r": 1, "a": 1, "s": 1, "e": 1}
    assert set(f.apply(WordSet(["arose", "raise"]))) == {"arose"}
