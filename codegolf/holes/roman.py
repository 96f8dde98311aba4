"""Arabic to Roman numeral conversion and its test cases."""

from __future__ import annotations

import random

_ONES = ("", "I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX")
_TENS = ("", "X", "XX", "XXX", "XL", "L", "LX", "LXX", "LXXX", "XC")
_HUNDREDS = ("", "C", "CC", "CCC", "CD", "D", "DC", "DCC", "DCCC", "CM")
_THOUSANDS = ("", "M", "MM", "MMM")

_SPECIAL_CASES = (4, 9, 40, 90, 400, 900)


def roman(n: int) -> str:
    """Return the Roman numeral for 0 <= n <= 3999 (empty for zero)."""
    if not 0 <= n <= 3999:
        raise ValueError(f"{n} cannot be written as a Roman numeral")
    thousands, rest = divmod(n, 1000)
    hundreds, rest = divmod(rest, 100)
    tens, ones = divmod(rest, 10)
    return _THOUSANDS[thousands] + _HUNDREDS[hundreds] + _TENS[tens] + _ONES[ones]


def arabic_to_roman(
    reverse: bool, rng: random.Random | None = None
) -> tuple[list[str], str]:
    """Generate cases; with reverse, arguments are numerals and answers numbers."""
    if rng is None:
        rng = random.Random()

    numbers = list(_SPECIAL_CASES)
    numbers += [rng.randrange(3998) + 1 for _ in range(14)]
    rng.shuffle(numbers)

    if reverse:
        return [roman(n) for n in numbers], "\n".join(str(n) for n in numbers)
    return [str(n) for n in numbers], "\n".join(roman(n) for n in numbers)