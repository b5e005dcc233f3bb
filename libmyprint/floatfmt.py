"""Rendering of single-precision floats in fixed, exponent and general form."""

from __future__ import annotations

import math
import struct

from .flags import alternate_changes, precision

_FRACTION_DIGITS = 6


def _f32(value: float) -> float:
    """Round ``value`` to the nearest single-precision float."""
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _single(nf: float) -> float:
    value = _f32(float(nf))
    if not math.isfinite(value):
        raise ValueError(f"cannot render non-finite value {nf!r}")
    return value


def _div(value: float, divisor: int) -> float:
    return _f32(value / _f32(float(divisor)))


def _point_position(value: float) -> int:
    """Index of the digit that the decimal point follows."""
    count = 0
    num = value
    divisor = 1
    while num > 1:
        num = _div(value, divisor)
        divisor *= 10
        count += 1
    return count - 2


def _scale_to_integer(value: float) -> float:
    """Multiply by ten at least once, until no fraction is left."""
    while True:
        value = _f32(value * 10)
        if value.is_integer():
            return value


def _digits(value: float) -> str:
    divisor = 1
    while _div(value, divisor) >= 10:
        divisor *= 10
    out = []
    while divisor > 0:
        out.append(str(int(_div(value, divisor)) % 10))
        divisor //= 10
    return "".join(out)


def _render(nf: float, trailing: bool) -> str:
    value = _single(nf)
    sign = ""
    if value < 0:
        sign = "-"
        value = -value
    point = _point_position(value)
    digits = _digits(_scale_to_integer(value))
    body = "".join(
        digit + ("." if pos == point else "") for pos, digit in enumerate(digits)
    )
    if trailing:
        gap = abs(len(digits) - point)
        if gap < _FRACTION_DIGITS:
            body += "0" * (_FRACTION_DIGITS - gap + 1)
    return sign + body


def _normalise(value: float) -> tuple[float, int]:
    """Bring a positive value into [1, 10) and count the steps taken."""
    if value <= 0:
        raise ValueError(f"cannot normalise non-positive value {value!r}")
    count = 0
    if value < 1:
        while value < 1:
            value = _f32(value * 10)
            count += 1
    else:
        while value >= 10:
            value = _div(value, 10)
            count += 1
    return value, count


def _exponent(nf: float, letter: str) -> str:
    value = _single(nf)
    sign = "-" if value < 1 else "+"
    mantissa, count = _normalise(value)
    return f"{format_float(mantissa)}{letter}{sign}{count:02d}"


def format_float(nf: float) -> str:
    """Render ``nf`` in fixed notation, padded with trailing zeros."""
    return _render(nf, trailing=True)


def format_float_zero(nf: float) -> str:
    """Render ``nf`` in fixed notation without trailing zero padding."""
    return _render(nf, trailing=False)


def format_exp(nf: float) -> str:
    """Render a positive ``nf`` in exponent notation with a lower-case 'e'."""
    return _exponent(nf, "e")


def format_exp_upper(nf: float) -> str:
    """Render a positive ``nf`` in exponent notation with an upper-case 'E'."""
    return _exponent(nf, "E")


def _general(nf: float, flags: str, conversion: str, letter: str) -> str:
    value = _single(nf)
    alternate = flags.startswith("#") and alternate_changes(conversion)
    _, magnitude = _normalise(value)
    if magnitude < precision(flags):
        return format_float(value) if alternate else format_float_zero(value)
    return _exponent(value, letter)


def format_general(nf: float, flags: str, conversion: str) -> str:
    """Choose fixed or exponent notation from the precision in ``flags``.

    Fixed notation is padded only when a '#' flag applies.
    """
    return _general(nf, flags, conversion, "e")


def format_general_upper(nf: float, flags: str, conversion: str) -> str:
    """Like ``format_general`` but with an upper-case exponent letter."""
    return _general(nf, flags, conversion, "E")