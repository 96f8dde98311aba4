import random
from collections import Counter

import pytest

from codegolf.holes.poker import card, is_straight, poker

BASE = 0x1F0A1


def decode(char):
    offset = ord(char) - BASE
    suit, number = divmod(offset, 16)
    if number > 11:
        number -= 1
    return number, suit


def test_card_ace_of_spades():
    assert card(0, 0) == chr(BASE)


def test_card_round_trips_through_decode():
    for number in range(13):
        for suit in range(4):
            assert decode(card(number, suit)) == (number, suit)


def test_card_skips_knight():
    assert ord(card(11, 0)) - ord(card(10, 0)) == 2


@pytest.mark.parametrize("number,suit", [(13, 0), (-1, 0), (0, 4), (0, -1)])
def test_card_rejects_out_of_range(number, suit):
    with pytest.raises(ValueError):
        card(number, suit)


@pytest.mark.parametrize(
    "numbers,expected",
    [
        ([0, 9, 10, 11, 12], True),
        ([12, 0, 11, 10, 9], True),
        ([0, 1, 2, 3, 4], True),
        ([4, 2, 3, 1, 5], True),
        ([0, 1, 2, 3, 5], False),
        ([12, 0, 1, 2, 3], False),
        ([1, 1, 2, 3, 4], False),
    ],
)
def test_is_straight(numbers, expected):
    assert is_straight(numbers) is expected


def test_is_straight_does_not_mutate():
    numbers = [4, 3, 2, 1, 0]
    is_straight(numbers)
    assert numbers == [4, 3, 2, 1, 0]


def test_is_straight_needs_five():
    with pytest.raises(ValueError):
        is_straight([1, 2, 3])


def test_poker_counts_by_kind():
    args, out = poker(random.Random(1))
    kinds = out.split("\n")
    assert len(args) == len(kinds)
    counts = Counter(kinds)
    assert counts["Royal Flush"] == 4
    assert counts["High Card"] == 9
    for kind in ("Pair", "Two Pair", "Three of a Kind", "Four of a Kind",
                 "Full House", "Flush", "Straight", "Straight Flush"):
        assert counts[kind] == 3


@pytest.mark.parametrize("seed", range(5))
def test_poker_hands_are_five_distinct_cards(seed):
    args, _ = poker(random.Random(seed))
    for hand in args:
        assert len(hand) == 5
        assert len(set(hand)) == 5


@pytest.mark.parametrize("seed", range(5))
def test_poker_hand_shapes(seed):
    args, out = poker(random.Random(seed))
    for hand, kind in zip(args, out.split("\n")):
        cards = [decode(c) for c in hand]
        ranks = Counter(number for number, _ in cards)
        suits = {suit for _, suit in cards}
        if kind == "Royal Flush":
            assert len(suits) == 1
            assert sorted(ranks) == [0, 9, 10, 11, 12]
        elif kind in ("Flush", "Straight Flush"):
            assert len(suits) == 1
            assert is_straight(ranks) is (kind == "Straight Flush")
        elif kind == "Straight":
            assert len(suits) > 1
            assert is_straight(ranks)
        elif kind == "Four of a Kind":
            assert sorted(ranks.values()) == [1, 4]
        elif kind == "Full House":
            assert sorted(ranks.values()) == [2, 3]
        elif kind == "Three of a Kind":
            assert sorted(ranks.values()) == [1, 1, 3]
        elif kind == "Two Pair":
            assert sorted(ranks.values()) == [1, 2, 2]
        elif kind == "Pair":
            assert sorted(ranks.values()) == [1, 1, 1, 2]
        else:
            assert kind == "High Card"
            assert len(ranks) == 5
            assert len(suits) > 1
            assert not is_straight(ranks)


@pytest.mark.parametrize("seed", [3, 7])
def test_poker_hand_total(seed):
    args, out = poker(random.Random(seed))
    assert len(args) == 37
    assert len(out.split("\n")) == 37