import random

import pytest

from codegolf.holes.roman import arabic_to_roman, roman


@pytest.mark.parametrize(
    "n, expected", [(4, "IV"), (900, "CM"), (3999, "MMMCMXCIX"), (0, "")]
)
def test_roman(n, expected):
    assert roman(n) == expected


@pytest.mark.parametrize("n", [-1, 4000])
def test_roman_out_of_range(n):
    with pytest.raises(ValueError):
        roman(n)


def test_forward_cases():
    args, out = arabic_to_roman(False, random.Random(7))
    lines = out.split("\n")
    assert len(args) == len(lines) == 20
    assert {"4", "9", "40", "90", "400", "900"} <= set(args)
    assert all(line == roman(int(arg)) for arg, line in zip(args, lines))


def test_reverse_cases():
    args, out = arabic_to_roman(True, random.Random(7))
    lines = out.split("\n")
    assert len(args) == len(lines)
    assert all(arg == roman(int(line)) for arg, line in zip(args, lines))
    assert all(1 <= int(line) <= 3998 for line in lines)


def test_reverse_mirrors_forward_with_same_seed():
    forward_args, forward_out = arabic_to_roman(False, random.Random(11))
    reverse_args, reverse_out = arabic_to_roman(True, random.Random(11))
    assert forward_args == reverse_out.split("\n")
    assert reverse_args == forward_out.split("\n")