import random

import pytest

from codegolf.holes.css_colors import CSS_COLORS, css_colors


@pytest.mark.parametrize("seed", [0, 1, 42])
def test_every_colour_once_with_its_code(seed):
    args, out = css_colors(random.Random(seed))
    outs = out.split("\n")
    assert len(args) == len(outs) == len(CSS_COLORS) == 148
    assert sorted(args) == sorted(CSS_COLORS)
    assert dict(zip(args, outs)) == CSS_COLORS


def test_known_colours():
    args, out = css_colors(random.Random(7))
    answers = dict(zip(args, out.split("\n")))
    assert answers["Red"] == "#ff0000"
    assert answers["AliceBlue"] == "#f0f8ff"
    assert answers["RebeccaPurple"] == "#663399"
    assert answers["YellowGreen"] == "#9acd32"


def test_order_varies_with_seed():
    orders = {tuple(css_colors(random.Random(seed))[0]) for seed in range(4)}
    assert len(orders) > 1


def test_answers_are_hex_codes():
    _, out = css_colors(random.Random(5))
    for line in out.split("\n"):
        assert line.startswith("#")
        assert len(line) == 7
        int(line[1:], 16)