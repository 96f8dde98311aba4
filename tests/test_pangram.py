import random
import string

import pytest

from codegolf.holes.pangram import is_pangram, pangram_grep

FOX = "the quick brown fox jumps over the lazy dog."


def test_is_pangram_lowercase():
    assert is_pangram(FOX)


def test_is_pangram_mixed_case():
    assert is_pangram(FOX.upper())
    assert is_pangram("ThE QuIcK BrOwN FoX JuMpS OvEr tHe lAzY DoG")


def test_is_pangram_missing_letter():
    assert not is_pangram(FOX.replace("z", "s"))


def test_is_pangram_empty():
    assert not is_pangram("")


def test_is_pangram_alphabet():
    assert is_pangram(string.ascii_uppercase)


@pytest.mark.parametrize("seed", range(5))
def test_pangram_grep_answers_are_pangram_args_in_order(seed):
    args, out = pangram_grep(random.Random(seed))
    assert len(args) == 50
    assert out.split("\n") == [arg for arg in args if is_pangram(arg)]


@pytest.mark.parametrize("seed", range(5))
def test_pangram_grep_keeps_every_original(seed):
    _, out = pangram_grep(random.Random(seed))
    assert len(out.split("\n")) >= 25


@pytest.mark.parametrize("seed", range(5))
def test_pangram_grep_args_are_ascii(seed):
    args, _ = pangram_grep(random.Random(seed))
    for arg in args:
        assert arg.isascii()
        assert "\n" not in arg


def test_pangram_grep_includes_fox_in_some_case():
    args, _ = pangram_grep(random.Random(3))
    stripped = [
        "".join(c for c in arg if c not in "{|}~").lower() for arg in args
    ]
    assert FOX in stripped


@pytest.mark.parametrize("seed", [11, 12])
def test_pangram_grep_mixes_letter_case(seed):
    args, _ = pangram_grep(random.Random(seed))
    letters = "".join(args)
    assert any(c.isupper() for c in letters)
    assert any(c.islower() for c in letters)