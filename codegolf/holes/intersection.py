"""Areas of overlap between axis-aligned bounding boxes, and their test cases."""

from __future__ import annotations

import random
from dataclasses import dataclass

from codegolf.holes.fixed import shuffled_pairs


@dataclass(frozen=True)
class Box:
    """A box given by its top-left corner and its width and height."""

    x: int
    y: int
    w: int
    h: int

    @property
    def right(self) -> int:
        return self.x + self.w

    @property
    def bottom(self) -> int:
        return self.y + self.h

    def __str__(self) -> str:
        return f"{self.x} {self.y} {self.w} {self.h}"


def calculate_intersection(b1: Box, b2: Box) -> int:
    """Return the area shared by two boxes, zero if they do not overlap."""
    width = min(b1.right, b2.right) - max(b1.x, b2.x)
    height = min(b1.bottom, b2.bottom) - max(b1.y, b2.y)
    if width < 0 or height < 0 or width > b1.w + b2.w or height > b1.h + b2.h:
        return 0
    return width * height


def random_box(rng: random.Random | None = None) -> Box:
    """Return a random box with non-zero area."""
    if rng is None:
        rng = random.Random()
    return Box(
        x=rng.randrange(101),
        y=rng.randrange(101),
        w=rng.randrange(50) + 1,
        h=rng.randrange(50) + 1,
    )


_B1 = Box(0, 0, 1, 1)
_B2 = Box(0, 0, 2, 2)
_B3 = Box(3, 3, 2, 1)
_B4 = Box(3, 1, 2, 3)
_B5 = Box(3, 1, 1, 3)
_B6 = Box(0, 0, 10, 10)
_B7 = Box(2, 2, 2, 2)

_DEFAULT_CASES = (
    (_B1, _B2, 1),  # overlap by one pixel
    (_B1, _B3, 0),  # far apart
    (_B3, _B4, 2),  # overlap on one horizontal side
    (_B4, _B5, 3),  # overlap on one vertical side
    (_B4, _B6, 6),  # one inside the other
    (_B2, _B7, 0),  # touching but not overlapping
)

_RANDOM_NON_ZERO = 90
_RANDOM_ZERO = 10

_BIG_BOX = Box(2, 2, 3, 3)
_SIDE_POSITIONS = (0, 2, 3, 5, 6)


def _side_fits(position: int, size: int) -> bool:
    if position == 0:
        return not (size == 4 or size > 6)
    if position == 2:
        return not (size == 2 or size > 4)
    if position == 3:
        return size <= 3
    return size <= 1


def intersection(rng: random.Random | None = None) -> tuple[list[str], str]:
    """Generate fixed, random and edge-touching box pairs with their overlap areas."""
    if rng is None:
        rng = random.Random()

    args: list[str] = []
    outs: list[str] = []

    for a, b, area in _DEFAULT_CASES:
        args.append(f"{a} {b}")
        outs.append(str(area))

    zeros = non_zeros = 0
    while zeros + non_zeros < _RANDOM_ZERO + _RANDOM_NON_ZERO:
        a, b = random_box(rng), random_box(rng)
        area = calculate_intersection(a, b)
        if area > 0 and non_zeros < _RANDOM_NON_ZERO:
            non_zeros += 1
        elif area == 0 and zeros < _RANDOM_ZERO:
            zeros += 1
        else:
            continue
        args.append(f"{a} {b}")
        outs.append(str(area))

    for x in _SIDE_POSITIONS:
        for y in _SIDE_POSITIONS:
            for w in range(1, 7):
                for h in range(1, 7):
                    if not (_side_fits(x, w) and _side_fits(y, h)):
                        continue
                    if rng.random() > 0.5:
                        box = Box(x, y, w, h)
                        if rng.random() > 0.5:
                            args.append(f"{box} {_BIG_BOX}")
                        else:
                            args.append(f"{_BIG_BOX} {box}")
                        outs.append(str(calculate_intersection(box, _BIG_BOX)))

    return shuffled_pairs(args, outs, rng)