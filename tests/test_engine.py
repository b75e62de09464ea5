import pytest
from packages.engine import LengthMismatchError, Response, Status, WordSet, evaluate, validate_guess

G, A, R, X = Status.CORRECT, Status.PRESENT, Status.ABSENT, Status.EXCESS


# --- N=5 golden tests (duplicates + placements) ---
@pytest.mark.parametrize("secret,guess,expected", [
    ("arose", "raise", [A, A, R, G, G]),
    ("beach", "beech", [G, G, X, G, G]),
    ("pansy", "salsa", [X, G, R, G, X]),
    ("study", "mucus", [R, A, R, X, A]),
    ("beech", "betel", [G, G, R, A, R]),
    ("mourn", "furor", [R, A, A, A, X]),
    ("level", "belle", [R, G, A, A, A]),
    ("scoop", "cools", [A, A, G, R, A]),
])
def test_evaluate_n5_golden(secret, guess, expected):
    assert list(evaluate(secret, guess).statuses) == expected


@pytest.mark.parametrize("secret,symbols", [
    ("arose", "AARGG"),
    ("crane", "AARRG"),
])
def test_response_str_uses_traffic_light_symbols(secret, symbols):
    assert str(evaluate(secret, "raise")) == symbols


@pytest.mark.parametrize("word", ["crane", "level", "eerie", "a", "abcdefgh"])
def test_evaluate_same_word_wins(word):
    r = evaluate(word, word)
    assert r.is_winner
    assert all(s is G for s in r.statuses)


def test_evaluate_is_case_insensitive():
    assert evaluate("AROSE", "Raise") == evaluate("arose", "raise")


def test_evaluate_length_mismatch():
    with pytest.raises(LengthMismatchError):
        evaluate("crane", "cranes")


@pytest.mark.parametrize("secret,guess", [
    ("pansy", "salsa"), ("study", "mucus"), ("beech", "eeeee"),
    ("aabbc", "bbbaa"), ("llama", "allal"), ("mourn", "furor"),
])
def test_evaluate_never_overclaims_a_letter(secret, guess):
    r = evaluate(secret, guess)
    for ch in set(guess):
        claimed = sum(1 for g, s in r.entries() if g == ch and s in (G, A))
        assert claimed <= secret.count(ch)
        # a letter the secret has is never ABSENT, one it lacks is never EXCESS
        for g, s in r.entries():
            if g == ch and ch in secret:
                assert s is not R
            if g == ch and ch not in secret:
                assert s is R


def test_earlier_positions_claim_availability_first():
    # one 'e' in the secret, two non-green e's in the guess
    assert str(evaluate("abcde", "eexxx")) == "AXRRR"


# --- N=6 sample tests ---
@pytest.mark.parametrize("secret,guess,expected", [
    ("letter", "settle", "RGGGAA"),
    ("letter", "little", "GRGGXA"),
    ("palate", "planet", "GAARAA"),
    ("tinket", "kitten", "AGAAGA"),
])
def test_evaluate_n6_samples(secret, guess, expected):
    assert str(evaluate(secret, guess)) == expected


def test_validate_guess_n5():
    allowed = WordSet(["crane", "raise", "stare"])
    assert validate_guess("CRANE", allowed) is True
    assert validate_guess("cranes", allowed) is False
    assert validate_guess("???", allowed) is False
    assert validate_guess("trace", allowed) is False
    assert validate_guess(12345, allowed) is False


def test_response_parse():
    r = Response.parse(" Raise ", "aargg")
    assert r.word == "raise"
    assert str(r) == "AARGG"
    assert r == evaluate("arose", "raise")


def test_response_parse_length_mismatch():
    with pytest.raises(LengthMismatchError):
        Response.parse("raise", "AAR")


def test_response_parse_unknown_symbol():
    with pytest.raises(ValueError):
        Response.parse("raise", "AARGY")


def test_response_normalises_word_and_statuses():
    r = Response("RAISE", [1, 1, 2, 0, 0])
    assert r.word == "raise"
    assert r.statuses == (Status.PRESENT, Status.PRESENT, Status.ABSENT,
                          Status.CORRECT, Status.CORRECT)
    assert r == evaluate("arose", "raise")
