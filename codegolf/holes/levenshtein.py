"""Levenshtein edit distance between words, and its test cases."""

from __future__ import annotations

import random
from os import PathLike
from typing import Sequence

_CASES = 20


def distance(a: str, b: str) -> int:
    """Return the number of single-character edits turning a into b."""
    if len(a) < len(b):
        a, b = b, a
    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, 1):
        current = [i]
        for j, char_b in enumerate(b, 1):
            current.append(
                min(
                    previous[j] + 1,
                    current[j - 1] + 1,
                    previous[j - 1] + (char_a != char_b),
                )
            )
        previous = current
    return previous[-1]


def load_words(path: str | PathLike = "words.txt") -> list[str]:
    """Read one word per line."""
    with open(path, encoding="utf-8", newline="") as file:
        return [line.rstrip("\n").removesuffix("\r") for line in file]


def levenshtein_distance(
    words: Sequence[str], rng: random.Random | None = None
) -> tuple[list[str], str]:
    """Generate twenty word pairs with their distances, including fixed tricky cases."""
    if not words:
        raise ValueError("no words to choose from")
    if rng is None:
        rng = random.Random()

    positions = rng.sample(range(_CASES), _CASES)
    fixed = {
        # Blocks an incorrect simplification of the algorithm.
        positions[1]: ("open however", 5),
        positions[2]: ("however open", 5),
        # Ensures a double-digit distance.
        positions[3]: ("large hypothetical", 11),
    }

    args, outs = [], []
    for i in range(_CASES):
        if i == positions[0]:
            word = rng.choice(words)
            arg, result = f"{word} {word}", 0
        elif i in fixed:
            arg, result = fixed[i]
        else:
            a, b = rng.choice(words), rng.choice(words)
            arg, result = f"{a} {b}", distance(a, b)
        args.append(arg)
        outs.append(str(result))

    return args, "\n".join(outs)