"""Locale-free number formatting for the map grammar."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Context, Decimal, ROUND_HALF_UP

__all__ = ["MapFormat", "DEFAULT_FORMAT", "format_number", "format_int"]

_MAX_INTEGER_DIGITS = 310


@dataclass(frozen=True, slots=True)
class MapFormat:
    """Formatting knobs passed explicitly into every encode call."""

    decimal_separator: str = "."
    max_fraction_digits: int = 10
    patch_fraction_digits: int = 5
    line_terminator: str = "\r\n"


DEFAULT_FORMAT = MapFormat()


def format_number(
    value: float, digits: int = 10, separator: str = "."
) -> str:
    """Fixed-point text with at most ``digits`` fraction digits.

    Rounds half away from zero, trims trailing zeros and never switches to
    exponent notation. A result that rounds to zero is always ``0``.
    """
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"Cannot format non-finite value {value!r}")
    # Decimal(float) is the exact binary value, so the rounding below does
    # not depend on repr() shortening.
    quantum = Decimal(1).scaleb(-digits)
    # Wide enough for the largest double plus the requested fraction.
    ctx = Context(prec=_MAX_INTEGER_DIGITS + digits)
    d = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP, context=ctx)
    if d.is_zero():
        return "0"
    text = format(d, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if separator != ".":
        text = text.replace(".", separator)
    return text


def format_int(value: float) -> str:
    """Integer-only fields: rounded half away from zero, no fraction."""
    return format_number(value, digits=0)
