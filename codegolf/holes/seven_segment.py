"""Seven-segment display rendering of digit strings."""

from __future__ import annotations

import random

_SEGMENTS = (
    (" _ ", "   ", " _ ", " _ ", "   ", " _ ", " _ ", " _ ", " _ ", " _ "),
    ("| |", "  |", " _|", " _|", "|_|", "|_ ", "|_ ", "  |", "|_|", "|_|"),
    ("|_|", "  |", "|_ ", " _|", "  |", " _|", "|_|", "  |", "|_|", " _|"),
)


def render_digits(digits: str) -> str:
    """Draw the digits as three rows of segments with trailing spaces removed."""
    indices = [int(d) for d in digits]
    out = ""
    for row in _SEGMENTS:
        out = (out + "".join(row[i] for i in indices)).rstrip() + "\n"
    return out.rstrip()


def seven_segment(rng: random.Random | None = None) -> tuple[list[str], str]:
    """Generate a case holding every digit twice in random order."""
    if rng is None:
        rng = random.Random()
    digits = list("00112233445566778899")
    rng.shuffle(digits)
    text = "".join(digits)
    return [text], render_digits(text)