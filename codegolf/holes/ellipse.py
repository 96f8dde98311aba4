"""Ellipse perimeters by the Gauss–Kummer series."""

from __future__ import annotations

import math
import random

_TERMS = 100


def perimeter(a: float, b: float) -> float:
    """Return the perimeter of an ellipse with semi-axes a and b."""
    a, b = float(a), float(b)
    h = math.pow(a - b, 2) / math.pow(a + b, 2)
    total = 0.0
    for n in range(_TERMS):
        binomial = math.gamma(1.5) / (math.gamma(1.0 + n) * math.gamma(1.5 - n))
        total += math.pow(binomial, 2) * math.pow(h, n)
    return total * math.pi * (a + b)


def ellipse_perimeters(rng: random.Random | None = None) -> tuple[list[str], str]:
    """Generate ten random ellipses with their perimeters truncated to integers."""
    if rng is None:
        rng = random.Random()
    args, outs = [], []
    for _ in range(10):
        a = rng.randrange(15) + 5
        b = rng.randrange(5) + 1
        args.append(f"{a} {b}")
        outs.append(str(int(perimeter(a, b))))

    pairs = list(zip(args, outs))
    rng.shuffle(pairs)
    return [arg for arg, _ in pairs], "\n".join(out for _, out in pairs)