"""Counting lucky tickets: numbers whose two halves have equal digit sums."""

from __future__ import annotations

import random

from codegolf.holes.fixed import shuffled_pairs

KNOWN_TICKETS = (
    (8, 2, 70),
    (4, 8, 344),
    (2, 10, 10),
    (4, 10, 670),
    (6, 10, 55252),
    (14, 12, 39222848622984),
)


def count_lucky_tickets(digits: int, base: int) -> int:
    """Count tickets of the given length and base whose halves have equal digit sums."""
    if base < 2:
        raise ValueError(f"base must be at least 2, got {base}")
    if digits < 0:
        raise ValueError(f"digits must not be negative, got {digits}")

    # counts[s] is how many half-tickets have digit sum s.
    counts = [1]
    for _ in range(digits // 2):
        extended = [0] * (len(counts) + base - 1)
        for total, count in enumerate(counts):
            for digit in range(base):
                extended[total + digit] += count
        counts = extended
    return sum(count * count for count in counts)


def lucky_tickets(rng: random.Random | None = None) -> tuple[list[str], str]:
    """Generate the known cases plus five random ones."""
    if rng is None:
        rng = random.Random()

    tickets = list(KNOWN_TICKETS)
    for _ in range(5):
        digits = 2 + 2 * rng.randrange(5)
        base = 2 + rng.randrange(15)
        tickets.append((digits, base, count_lucky_tickets(digits, base)))

    return shuffled_pairs(
        [f"{digits} {base}" for digits, base, _ in tickets],
        [str(result) for _, _, result in tickets],
        rng,
    )