"""Poker hand classification cases drawn with playing-card characters."""

from __future__ import annotations

import random
from typing import Iterable

_ACE_OF_SPADES = 0x1F0A1
_HAND_COUNT = 3
_ACE_LOW_STRAIGHT = [0, 9, 10, 11, 12]


def card(number: int, suit: int) -> str:
    """Return the playing-card character for a rank 0 (ace) to 12 (king) and suit 0 to 3."""
    if not 0 <= number <= 12:
        raise ValueError(f"card number must be 0 to 12, got {number}")
    if not 0 <= suit <= 3:
        raise ValueError(f"suit must be 0 to 3, got {suit}")
    if number > 10:
        # Skip over the unused knight face card.
        number += 1
    return chr(_ACE_OF_SPADES + 16 * suit + number)


def is_straight(numbers: Iterable[int]) -> bool:
    """Report whether five ranks form a straight, ace high or low."""
    ranks = sorted(numbers)
    if len(ranks) != 5:
        raise ValueError(f"a straight needs five cards, got {len(ranks)}")
    if ranks == _ACE_LOW_STRAIGHT:
        return True
    return all(b - a == 1 for a, b in zip(ranks, ranks[1:]))


def _perm(rng: random.Random, n: int) -> list[int]:
    return rng.sample(range(n), n)


def _non_straight_ranks(rng: random.Random) -> list[int]:
    while True:
        ranks = _perm(rng, 13)
        if not is_straight(ranks[:5]):
            return ranks


def _hands(rng: random.Random) -> list[tuple[str, list[str]]]:
    hands: list[tuple[str, list[str]]] = []

    def suit() -> int:
        return rng.randrange(4)

    for _ in range(_HAND_COUNT):
        ranks = _non_straight_ranks(rng)
        suits = _perm(rng, 4)
        hands.append(("High Card", [
            card(ranks[0], suits[0]),
            card(ranks[1], suits[1]),  # Avoid a flush.
            card(ranks[2], suit()),
            card(ranks[3], suit()),
            card(ranks[4], suit()),
        ]))

    for _ in range(_HAND_COUNT):
        ranks = _perm(rng, 13)
        suits = _perm(rng, 4)
        hands.append(("Pair", [
            card(ranks[0], suits[0]),
            card(ranks[0], suits[1]),
            card(ranks[1], suit()),
            card(ranks[2], suit()),
            card(ranks[3], suit()),
        ]))

    for _ in range(_HAND_COUNT):
        ranks = _perm(rng, 13)
        suits1 = _perm(rng, 4)
        suits2 = _perm(rng, 4)
        hands.append(("Two Pair", [
            card(ranks[0], suits1[0]),
            card(ranks[0], suits1[1]),
            card(ranks[1], suits2[0]),
            card(ranks[1], suits2[1]),
            card(ranks[2], suit()),
        ]))

    for _ in range(_HAND_COUNT):
        ranks = _perm(rng, 13)
        suits = _perm(rng, 4)
        hands.append(("Three of a Kind", [
            card(ranks[0], suits[0]),
            card(ranks[0], suits[1]),
            card(ranks[0], suits[2]),
            card(ranks[1], suit()),
            card(ranks[2], suit()),
        ]))

    for _ in range(_HAND_COUNT):
        ranks = _perm(rng, 13)
        hands.append(("Four of a Kind", [
            *(card(ranks[0], s) for s in range(4)),
            card(ranks[1], suit()),
        ]))

    for _ in range(_HAND_COUNT):
        ranks = _perm(rng, 13)
        suits1 = _perm(rng, 4)
        suits2 = _perm(rng, 4)
        hands.append(("Full House", [
            card(ranks[0], suits1[0]),
            card(ranks[0], suits1[1]),
            card(ranks[0], suits1[2]),
            card(ranks[1], suits2[0]),
            card(ranks[1], suits2[1]),
        ]))

    for _ in range(_HAND_COUNT):
        ranks = _non_straight_ranks(rng)
        flush_suit = suit()
        hands.append(("Flush", [card(rank, flush_suit) for rank in ranks[:5]]))

    low_cards = _perm(rng, 9)
    low_cards[0] = 0  # At least one ace-low straight.
    low_cards[1] = 9  # At least one ace-high straight.
    for low in low_cards[:_HAND_COUNT]:
        suits = _perm(rng, 4)
        hands.append(("Straight", [
            card(low, suits[0]),
            card(low + 1, suits[1]),  # Avoid a flush.
            card(low + 2, suit()),
            card(low + 3, suit()),
            card((low + 4) % 13, suit()),
        ]))

    low_cards = _perm(rng, 9)
    low_cards[0] = 0  # At least one ace-low straight flush.
    low_cards[1] = 8  # Nine to king, easily mistaken for a royal flush.
    for low in low_cards[:_HAND_COUNT]:
        flush_suit = suit()
        hands.append((
            "Straight Flush",
            [card(rank % 13, flush_suit) for rank in range(low, low + 5)],
        ))

    for royal_suit in range(4):
        hands.append((
            "Royal Flush",
            [card(rank % 13, royal_suit) for rank in range(9, 14)],
        ))

    # Code points within a span of 13 that still are not a flush:
    # two suits, five different ranks, starting at ten or above.
    for low_suit in range(3):
        start = 12 - rng.randrange(3)
        end_offset = 4 + rng.randrange(7)
        offsets = _perm(rng, end_offset)
        hand = [card(start, low_suit)]
        for offset in offsets[:4]:
            rank = start + offset + 1
            hand.append(card(rank % 13, low_suit + rank // 13))
        hands.append(("High Card", hand))

    # King then ace to four: not a straight.
    for low_suit in range(3):
        hands.append(("High Card", [
            card(12, low_suit),
            *(card(rank, low_suit + 1) for rank in range(4)),
        ]))

    return hands


def poker(rng: random.Random | None = None) -> tuple[list[str], str]:
    """Generate shuffled hands of every kind; the answers name each hand."""
    if rng is None:
        rng = random.Random()

    hands = _hands(rng)
    rng.shuffle(hands)

    args, outs = [], []
    for kind, cards in hands:
        rng.shuffle(cards)
        args.append("".join(cards))
        outs.append(kind)
    return args, "\n".join(outs)