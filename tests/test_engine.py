import itertools
from collections import Counter

import pytest
from packages.engine import (
    LengthMismatch, Letter, Mark, assess, score, to_pattern, is_valid_word,
)

# --- N=5 golden tests (duplicates + placements) ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("belle","level","-GYYY"),
    ("level","level","GGGGG"),
    ("lemon","level","GG---"),
    ("cools","scoop","YYG-Y"),
    ("scoop","scoop","GGGGG"),
    ("crane","crane","GGGGG"),
    ("raise","crane","YY--G"),
    ("stare","crane","--GYG"),
    ("bolle","hello","-YGGY"),
    ("elope","erase","G---G"),
    ("eerie","erase","G-Y-G"),
    ("eelsy","crane","Y----"),
    ("lllll","hello","--GG-"),
])
def test_score_n5_golden(guess, answer, expected):
    assert score(guess, answer) == expected

# --- N=6 sample tests ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("settle","letter","-GGGYY"),
    ("little","letter","G-GG-Y"),
    ("planet","palate","GYY-YY"),
    ("kitten","tinket","YGYYGY"),
])
def test_score_n6_samples(guess, answer, expected):
    assert score(guess, answer) == expected

def test_assess_returns_letters_in_position_order():
    letters = assess("hello", "bolle")
    assert letters == [
        Letter(Mark.ABSENT, "B"),
        Letter(Mark.PRESENT, "O"),
        Letter(Mark.CORRECT, "L"),
        Letter(Mark.CORRECT, "L"),
        Letter(Mark.PRESENT, "E"),
    ]

def test_assess_erase_elope_keeps_exact_matches():
    letters = assess("ERASE", "ELOPE")
    assert [l.mark for l in letters] == [
        Mark.CORRECT, Mark.ABSENT, Mark.ABSENT, Mark.ABSENT, Mark.CORRECT,
    ]

def test_assess_demotes_surplus_misplaced_letters_left_to_right():
    # CRANE has one E; the leftmost misplaced E keeps the mark.
    assert to_pattern(assess("crane", "eexxx")) == "Y----"
    # Exact match claims the only E before any misplaced one.
    assert to_pattern(assess("crane", "eeeee")) == "----G"

def test_assess_is_case_insensitive():
    assert assess("Crane", "cRANE") == assess("CRANE", "crane")
    assert all(l.char.isupper() for l in assess("crane", "trace"))

def test_assess_length_mismatch():
    with pytest.raises(LengthMismatch) as exc:
        assess("crane", "cranes")
    assert exc.value.expected == 5 and exc.value.actual == 6

def test_assess_is_deterministic():
    assert assess("erase", "eerie") == assess("erase", "eerie")

def test_assess_never_exceeds_letter_budget():
    target = "ABBA"
    for cand in map("".join, itertools.product("ABC", repeat=4)):
        letters = assess(target, cand)
        assert len(letters) == len(target)
        hits = Counter(l.char for l in letters if l.mark is not Mark.ABSENT)
        for ch, n in hits.items():
            assert n <= target.count(ch)

def test_is_valid_word():
    assert is_valid_word("anything", frozenset()) is True
    assert is_valid_word("CRANE", frozenset({"crane"})) is True
    assert is_valid_word("xyzzy", frozenset({"crane"})) is False
