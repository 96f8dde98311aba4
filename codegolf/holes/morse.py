"""Morse code encoding and its test cases."""

from __future__ import annotations

import random

_DOT, _DASH = "▄", "▄▄▄"

MORSE = {
    "A": "▄ ▄▄▄",
    "B": "▄▄▄ ▄ ▄ ▄",
    "C": "▄▄▄ ▄ ▄▄▄ ▄",
    "D": "▄▄▄ ▄ ▄",
    "E": "▄",
    "F": "▄ ▄ ▄▄▄ ▄",
    "G": "▄▄▄ ▄▄▄ ▄",
    "H": "▄ ▄ ▄ ▄",
    "I": "▄ ▄",
    "J": "▄ ▄▄▄ ▄▄▄ ▄▄▄",
    "K": "▄▄▄ ▄ ▄▄▄",
    "L": "▄ ▄▄▄ ▄ ▄",
    "M": "▄▄▄ ▄▄▄",
    "N": "▄▄▄ ▄",
    "O": "▄▄▄ ▄▄▄ ▄▄▄",
    "P": "▄ ▄▄▄ ▄▄▄ ▄",
    "Q": "▄▄▄ ▄▄▄ ▄ ▄▄▄",
    "R": "▄ ▄▄▄ ▄",
    "S": "▄ ▄ ▄",
    "T": "▄▄▄",
    "U": "▄ ▄ ▄▄▄",
    "V": "▄ ▄ ▄ ▄▄▄",
    "W": "▄ ▄▄▄ ▄▄▄",
    "X": "▄▄▄ ▄ ▄ ▄▄▄",
    "Y": "▄▄▄ ▄ ▄▄▄ ▄▄▄",
    "Z": "▄▄▄ ▄▄▄ ▄ ▄",
    "1": "▄ ▄▄▄ ▄▄▄ ▄▄▄ ▄▄▄",
    "2": "▄ ▄ ▄▄▄ ▄▄▄ ▄▄▄",
    "3": "▄ ▄ ▄ ▄▄▄ ▄▄▄",
    "4": "▄ ▄ ▄ ▄ ▄▄▄",
    "5": "▄ ▄ ▄ ▄ ▄",
    "6": "▄▄▄ ▄ ▄ ▄ ▄",
    "7": "▄▄▄ ▄▄▄ ▄ ▄ ▄",
    "8": "▄▄▄ ▄▄▄ ▄▄▄ ▄ ▄",
    "9": "▄▄▄ ▄▄▄ ▄▄▄ ▄▄▄ ▄",
    "0": "▄▄▄ ▄▄▄ ▄▄▄ ▄▄▄ ▄▄▄",
    " ": "    ",
}

_WORDS = ("BUD", "FOR", "JIGS", "NYMPH", "QUICK", "VEX", "WALTZ")


def encode_morse(text: str) -> str:
    """Encode text; characters are separated by three spaces, unknown ones encode as nothing."""
    return "   ".join(MORSE.get(char, "") for char in text)


def _shuffled(text: str, rng: random.Random) -> str:
    chars = list(text)
    rng.shuffle(chars)
    return "".join(chars)


def morse(reverse: bool, rng: random.Random | None = None) -> tuple[list[str], str]:
    """Generate a case; with reverse, the argument is Morse and the answer text."""
    if rng is None:
        rng = random.Random()
    words = [
        *_WORDS,
        _shuffled("0123456789", rng),
        _shuffled("ABCDEFGHIJKLMNOPQRSTUVWXYZ", rng),
    ]
    rng.shuffle(words)

    text = " ".join(words)
    encoded = encode_morse(text)
    if reverse:
        return [encoded], text
    return [text], encoded