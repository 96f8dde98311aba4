"""Pie charts rendered as inline SVG with a legend."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from decimal import Decimal
from typing import Iterable


@dataclass
class Slice:
    """One labelled share of a pie chart."""

    label: str
    quantity: int
    percent: float = field(default=0.0, compare=False)


def _format_float(value: float) -> str:
    """Format a float in its shortest form, switching to exponent form for small or large magnitudes."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"

    sign = "-" if math.copysign(1.0, value) < 0 else ""
    value = abs(value)
    if value == 0:
        return sign + "0"

    parts = Decimal(repr(value)).normalize().as_tuple()
    digits = "".join(map(str, parts.digits))
    point = len(digits) + parts.exponent
    exponent = point - 1

    if exponent < -4 or exponent >= 6:
        mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
        exp_sign = "-" if exponent < 0 else "+"
        return f"{sign}{mantissa}e{exp_sign}{abs(exponent):02d}"

    if point <= 0:
        text = "0." + "0" * -point + digits
    elif point >= len(digits):
        text = digits + "0" * (point - len(digits))
    else:
        text = digits[:point] + "." + digits[point:]
    return sign + text


def _format_percent(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return f"{value:2.1f}"


def _share(quantity: int, total: int) -> float:
    if total:
        return quantity / total
    if quantity == 0:
        return math.nan
    return math.copysign(math.inf, quantity)


class Pie:
    """A pie chart built from slices; each slice's percent is its share of the total."""

    def __init__(self, slices: Iterable[Slice]) -> None:
        slices = list(slices)
        self.quantity = sum(s.quantity for s in slices)
        self.slices = [
            replace(s, percent=_share(s.quantity, self.quantity)) for s in slices
        ]

    def html(self) -> str:
        """Render the chart as an SVG followed by a legend list."""
        parts = ['<svg viewBox="-1 -1 2 2">']

        angle, old_x, old_y = 0.0, 1.0, 0.0
        for piece in self.slices:
            large_arc = 1 if piece.percent > 0.5 else 0
            angle += 2 * math.pi * piece.percent
            x, y = math.cos(angle), math.sin(angle)
            parts.append(
                f'<path d="M{_format_float(old_x)} {_format_float(old_y)}'
                f"A1 1 0 {large_arc} 1 {_format_float(x)} {_format_float(y)}"
                f'L0 0"/>'
            )
            old_x, old_y = x, y

        parts.append("</svg><ul>")

        for piece in self.slices:
            parts.append(
                f"<li class=color>{piece.label}"
                f"<span>{piece.quantity:,} ≈ "
                f"{_format_percent(100 * piece.percent)}%</span>"
            )

        parts.append("</ul>")
        return "".join(parts)