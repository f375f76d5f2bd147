"""Reduce ``calc(<number><unit> * <number>)`` to a literal value."""

from __future__ import annotations

import re
from decimal import Decimal

__all__ = ["simplify"]

_CALC_RE = re.compile(r"calc\((\d+(?:\.\d+)?|\.\d+)([a-z]+) \* (\d+(?:\.\d+)?|\.\d+)\)")


def _format_number(value: float) -> str:
    """Format *value* the way JavaScript's ``String(number)`` does.

    Python's repr already gives the shortest round-trip digits but switches to
    exponent form at different thresholds (``1e-05`` where JavaScript writes
    ``0.00001``) and pads the exponent (``1e-07`` vs ``1e-7``).
    """
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    text = repr(value)
    if "e" not in text:
        return text
    mantissa, exponent = text.split("e")
    power = int(exponent)
    if -7 < power < 21:
        return format(Decimal(text), "f")
    sign = "+" if power > 0 else "-"
    return f"{mantissa}e{sign}{abs(power)}"


def simplify(css_value: str) -> str:
    """Replace every ``calc(N<unit> * M)`` in *css_value* with its product.

    Other ``calc()`` forms (other operators, nesting, unitless left operands)
    pass through untouched.
    """

    def _multiply(match: re.Match[str]) -> str:
        a, unit, b = match.groups()
        return f"{_format_number(float(a) * float(b))}{unit}"

    return _CALC_RE.sub(_multiply, css_value)
