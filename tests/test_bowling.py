import random

import pytest

from codegolf.holes.bowling import GAMES, randomise_frames, ten_pin_bowling

PERFECT = " X  X  X  X  X  X  X  X  X XXX"
GUTTER = "-- -- -- -- -- -- -- -- -- -- "


def _normalise(frames):
    chars = []
    for c in frames:
        if c == "F":
            chars.append("-")
        elif "①" <= c <= "⑨":
            chars.append(str(ord(c) - ord("①") + 1))
        else:
            chars.append(c)
    return "".join(chars)


def test_randomise_frames_leaves_strikes_alone():
    assert randomise_frames(PERFECT, random.Random(0)) == PERFECT


@pytest.mark.parametrize("seed", range(10))
def test_randomise_frames_zeros_become_misses_or_fouls(seed):
    result = randomise_frames("00 00", random.Random(seed))
    assert len(result) == 5
    assert result[2] == " "
    assert set(result.replace(" ", "")) <= {"-", "F"}


def test_randomise_frames_splits_only_first_ball():
    seen_first, seen_second = set(), set()
    for seed in range(40):
        result = randomise_frames("55 ", random.Random(seed))
        seen_first.add(result[0])
        seen_second.add(result[1])
    assert seen_first == {"5", "⑤"}
    assert seen_second == {"5"}


def test_randomise_frames_keeps_length():
    for frames, _ in GAMES:
        assert len(randomise_frames(frames, random.Random(2))) == len(frames)


def test_ten_pin_bowling_case_count():
    args, out = ten_pin_bowling(random.Random(1))
    assert len(args) == len(GAMES) + 22
    assert len(out.split("\n")) == len(args)


@pytest.mark.parametrize("seed", range(5))
def test_ten_pin_bowling_includes_perfect_game(seed):
    args, out = ten_pin_bowling(random.Random(seed))
    pairs = dict(zip(args, out.split("\n")))
    assert pairs[PERFECT] == "300"


@pytest.mark.parametrize("seed", range(5))
def test_ten_pin_bowling_gutter_games_score_zero(seed):
    args, out = ten_pin_bowling(random.Random(seed))
    gutters = [
        score
        for arg, score in zip(args, out.split("\n"))
        if len(arg) == len(GUTTER) and set(arg) <= {"-", "F", " "}
    ]
    assert gutters
    assert set(gutters) == {"0"}


@pytest.mark.parametrize("seed", range(5))
def test_ten_pin_bowling_scores_in_range(seed):
    _, out = ten_pin_bowling(random.Random(seed))
    for score in out.split("\n"):
        assert 0 <= int(score) <= 300


@pytest.mark.parametrize("seed", range(5))
def test_ten_pin_bowling_known_games_keep_their_scores(seed):
    args, out = ten_pin_bowling(random.Random(seed))
    pairs = list(zip(args, out.split("\n")))
    for frames, score in GAMES:
        matches = [s for arg, s in pairs if _normalise(arg) == _normalise(frames)]
        assert score in matches