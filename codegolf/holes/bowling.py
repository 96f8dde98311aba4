"""Ten-pin bowling score sheets and their totals."""

from __future__ import annotations

import random

from codegolf.holes.fixed import shuffled_pairs

GAMES = (
    (" X  X  X  X  X  X  X  X  X XXX", "300"),
    (" X 17 36 63 4-  X 61 7- 6- -- ", "85"),
    (" X 7/ 9-  X -8 8/ -6  X  X X81", "167"),
    (" X 7/ 9-  X -8 8/ -6  X  X X8/", "168"),
    (" X 8- 51  X 35 36 7- 9-  X 8- ", "109"),
    ("-- -- -- -- -- -- -- -- -- -- ", "0"),
    ("-9 5- 35 31 61 43 6- 63 6- 71 ", "69"),
    ("32 3/  X  X  X  X 43 33 33 3/6", "161"),
    ("32 3/  X  X  X  X 43 33 33 36 ", "154"),
    ("43 44 54 45  X  X  X  X 43 23 ", "146"),
    ("53 33 34  X  X  X 53 3/  X X43", "163"),
    ("7/ 4- 36 81 8- 54 44 53 31 8- ", "81"),
    ("71 33 45 45  X  X  X  X 5/ 23 ", "154"),
    ("71 7- 72 8- 81 51 8-  X 6- 81 ", "86"),
    ("72 9- 81  X 9- 8/  X  X  X 9- ", "162"),
    ("81 16 8/ 33  X 7- -7 9- 8- -- ", "83"),
    ("9- -2 35  X  X  X  X 62 22 62 ", "143"),
    ("9/ 5F 5- F/  X -/ 81  X F/ X-/", "152"),
)

_EXTRA_CASES = 22
_SPLIT_ONE = ord("①")


def randomise_frames(frames: str, rng: random.Random | None = None) -> str:
    """Turn misses into fouls and first-ball fives to eights into splits, at random."""
    if rng is None:
        rng = random.Random()

    chars = list(frames)
    for j, char in enumerate(chars):
        if char == "0":
            chars[j] = "-"
            replacement = "F"
        elif char == "-":
            replacement = "F"
        elif char in "5678" and j % 3 == 0:
            # Only the first ball of a frame can leave a split.
            replacement = chr(_SPLIT_ONE + int(char) - 1)
        else:
            continue

        if rng.randrange(2) == 0:
            chars[j] = replacement
    return "".join(chars)


def _random_rolls(rng: random.Random) -> list[int]:
    rolls = [0] * 24
    for number in range(23):
        max_roll = 10 - rolls[number - 1] if number % 2 == 1 else 10
        # Biased towards strikes, spares and misses.
        rolls[number] = min(max(rng.randrange(max_roll + 2) - 1, 0), max_roll)
    if rolls[18] != 10:
        rolls[21] = 0
    return rolls


def _score_sheet(rolls: list[int]) -> tuple[str, int]:
    sheet = ""
    score = 0
    for frame in range(12):
        first, second = rolls[2 * frame], rolls[2 * frame + 1]
        if frame > 9:
            if rolls[18] + rolls[19] != 10:
                sheet += " "
                break
            # The second ball of the tenth frame after two strikes.
            if frame == 10 and rolls[18] == 10 and rolls[16] == 10:
                score += rolls[20]
            if frame == 11 and (rolls[18] != 10 or rolls[20] != 10):
                break
        elif frame > 0:
            sheet += " "
            before = rolls[2 * frame - 2]
            if before + rolls[2 * frame - 1] == 10:
                score += first
                if before == 10:
                    score += second
                    if frame > 1 and rolls[2 * frame - 4] == 10:
                        score += first
        score += first + second

        if first == 10:
            if frame < 9:
                sheet += " "
            sheet += "X"
        else:
            sheet += str(first)
            if frame < 10 or (frame == 10 and rolls[18] == 10):
                sheet += "/" if first + second == 10 else str(second)
    return sheet, score


def ten_pin_bowling(rng: random.Random | None = None) -> tuple[list[str], str]:
    """Generate the known games plus random ones, with their final scores."""
    if rng is None:
        rng = random.Random()

    args, outs = [], []
    for frames, score in GAMES:
        args.append(randomise_frames(frames, rng))
        outs.append(score)

    for _ in range(_EXTRA_CASES):
        sheet, score = _score_sheet(_random_rolls(rng))
        args.append(randomise_frames(sheet, rng))
        outs.append(str(score))

    return shuffled_pairs(args, outs, rng)