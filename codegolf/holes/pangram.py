"""Pangram detection cases: near-pangrams mixed with true ones."""

from __future__ import annotations

import random
import string

_PANGRAMS = (
    "6>_4\"gv9lb?2!ic7}=-m'fd30ph].o%@w+[8unk&t1es<az(x;${^y#)q,rj\\5/*:",
    "a large fawn jumped quickly over white zinc boxes.",
    "all questions asked by five watched experts amaze the judge.",
    "a quick movement of the enemy will jeopardize six gunboats.",
    "back in june we delivered oxygen equipment of the same size.",
    "battle of thermopylae: quick javelin grazed wry xerxes.",
    "bored? craving a pub quiz fix? why, just come to the royal oak!",
    "bprsjzfwdqyaxgckilvunthemo",
    "brawny gods just flocked up to quiz and vex him.",
    "cute, kind, jovial, foxy physique, amazing beauty? wowser!",
    "fix problem quickly with galvanized jets.",
    "foxy parsons quiz and cajole the lovably dim wiki-girl.",
    "grumpy wizards make toxic brew for the evil queen and jack.",
    "hey zach, should i program a hex editor in java? why not sql or brainf--k!",
    "how razorback-jumping frogs can level six piqued gymnasts!",
    "jackie will budget for the most expensive zoology equipment.",
    "jack quietly moved up front and seized the big ball of wax.",
    "jim quickly realized that the beautiful gowns are expensive.",
    "just poets wax boldly as kings and queens march over fuzz.",
    "my faxed joke won a pager in the cable tv quiz show.",
    "quirky spud boys can jam after zapping five worthy polysixes.",
    "sixty zips were quickly picked from the woven jute bag.",
    "the quick brown fox jumps over the lazy dog.",
    "the wizard quickly jinxed the gnomes before they vaporized.",
    "when zombies arrive, quickly fax judge pat.",
)


def is_pangram(text: str) -> bool:
    """Report whether every letter a to z appears, in either case."""
    return all(c in text or c.upper() in text for c in string.ascii_lowercase)


def _letter(index: int) -> str:
    return chr(ord("a") + index)


def _replace(chars: list[str], old: str, new: str) -> None:
    for j, char in enumerate(chars):
        if char == old:
            chars[j] = new


def pangram_grep(rng: random.Random | None = None) -> tuple[list[str], str]:
    """Generate pangrams and damaged copies; the answer lists the true pangrams."""
    if rng is None:
        rng = random.Random()

    pangrams = [list(text) for text in _PANGRAMS]
    rng.shuffle(pangrams)

    damaged = []
    for i, pangram in enumerate(pangrams):
        clone = list(pangram)
        # Replace letter i with a different letter.
        _replace(clone, _letter(i), _letter((i + rng.randrange(25) + 1) % 26))
        # Replace up to four more letters at random.
        for _ in range(rng.randrange(5)):
            old = _letter(rng.randrange(26))
            new = _letter(rng.randrange(26))
            _replace(clone, old, new)
        damaged.append(clone)
    pangrams += damaged

    for pangram in pangrams:
        for j, char in enumerate(pangram):
            if "a" <= char <= "z" and rng.randrange(2) == 0:
                pangram[j] = char.upper()

    # Insert up to three characters that sort just after 'z'.
    for pangram in pangrams:
        for _ in range(rng.randrange(8) - 4):
            char = chr(ord("{") + rng.randrange(4))
            pangram.insert(rng.randrange(len(pangram)), char)

    rng.shuffle(pangrams)

    args = ["".join(pangram) for pangram in pangrams]
    return args, "\n".join(arg for arg in args if is_pangram(arg))