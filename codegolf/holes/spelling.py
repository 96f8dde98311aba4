"""Numbers spelled out in British English, and their test cases."""

from __future__ import annotations

import random

_TEENS = (
    "zero", "one", "two", "three", "four", "five", "six", "seven", "eight",
    "nine", "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen",
    "sixteen", "seventeen", "eighteen", "nineteen",
)

_TENS = (
    "", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy",
    "eighty", "ninety",
)


def wordify(n: int) -> str:
    """Spell out 0 <= n <= 1000 in words."""
    if not 0 <= n <= 1000:
        raise ValueError(f"{n} is outside 0 to 1000")
    if n == 1000:
        return "one thousand"
    if n < 20:
        return _TEENS[n]
    if n < 100:
        tens, ones = divmod(n, 10)
        return _TENS[tens] + ("-" + _TEENS[ones] if ones else "")

    hundreds, rest = divmod(n, 100)
    text = _TEENS[hundreds] + " hundred"
    if rest:
        text += " and " + wordify(rest)
    return text


def spelling_numbers(rng: random.Random | None = None) -> tuple[list[str], str]:
    """Generate cases covering both ends of the range plus one number per ten and hundred."""
    if rng is None:
        rng = random.Random()

    numbers = [*range(20), *range(990, 1001)]

    # All but the first ten gain a units digit, so one answer has no hyphen.
    tens = list(range(20, 100, 10))
    rng.shuffle(tens)
    numbers += [tens[0], *(t + 1 + rng.randrange(8) for t in tens[1:])]

    # All but the first hundred gain a remainder, so one answer has no "and".
    hundreds = list(range(100, 1000, 100))
    rng.shuffle(hundreds)
    numbers += [hundreds[0], *(h + 1 + rng.randrange(98) for h in hundreds[1:])]

    rng.shuffle(numbers)
    return [str(n) for n in numbers], "\n".join(wordify(n) for n in numbers)