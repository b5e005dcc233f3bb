"""Rendering of integers in decimal, hexadecimal and octal, with padding."""

from __future__ import annotations

from .flags import Align, padding
from .numbers import INT_MIN

_INT_MIN_TEXT = "-2147483648"


def _as_signed_char(value: int) -> int:
    return (value + 128) % 256 - 128


def _padded(digits: str, width: int, zero: bool, align: Align) -> str:
    gap = width - len(digits)
    lead = padding(gap, zero, align) if align in (Align.RIGHT, Align.PLUS) else ""
    trail = padding(gap, zero, align) if align == Align.LEFT else ""
    return lead + digits + trail


def format_nbr(nb: int, width: int = 0, zero: bool = False, align: int = Align.RIGHT) -> str:
    """Render a signed decimal number in a field of ``width`` characters.

    A minus sign comes before any padding; with ``Align.PLUS`` a '+' is
    written before zero padding or after blank padding.
    """
    align = Align(align)
    if nb == INT_MIN:
        return _INT_MIN_TEXT
    sign = "-" if nb < 0 else ""
    digits = str(abs(nb))
    gap = width - len(digits)
    if align == Align.RIGHT:
        lead = padding(gap, zero, align)
    elif align == Align.PLUS:
        fill = padding(gap - 1, zero, align)
        lead = "+" + fill if zero else fill + "+"
    else:
        lead = ""
    trail = padding(gap, zero, align) if align == Align.LEFT else ""
    return sign + lead + digits + trail


def format_nbr_u(nb: int, width: int = 0, zero: bool = False, align: int = Align.RIGHT) -> str:
    """Render a decimal number like ``format_nbr`` but never with a '+'."""
    align = Align(align)
    if nb == INT_MIN:
        return _INT_MIN_TEXT
    sign = "-" if nb < 0 else ""
    return sign + _padded(str(abs(nb)), width, zero, align)


def _format_radix(num: int, spec: str, width: int, zero: bool, align: int) -> str:
    align = Align(align)
    zero_mark = "0" if num == 0 else ""
    digits = format(num, spec) if num > 0 else ""
    return zero_mark + _padded(digits, width, zero, align)


def format_hexa(num: int, width: int = 0, zero: bool = False, align: int = Align.RIGHT) -> str:
    """Render a non-negative number in lower-case hexadecimal.

    Zero is written as '0' ahead of any padding; a negative number
    yields only the padding.
    """
    return _format_radix(num, "x", width, zero, align)


def format_hexa_upper(num: int, width: int = 0, zero: bool = False, align: int = Align.RIGHT) -> str:
    """Render a non-negative number in upper-case hexadecimal."""
    return _format_radix(num, "X", width, zero, align)


def format_octa(num: int, width: int = 0, zero: bool = False, align: int = Align.RIGHT) -> str:
    """Render the magnitude of a number in octal."""
    return _format_radix(abs(num), "o", width, zero, align)


def format_octa_char(num: int) -> str:
    """Render the magnitude of a signed byte in octal.

    The value wraps to the signed byte range first; -128 has no positive
    counterpart there and yields an empty string.
    """
    value = _as_signed_char(num)
    if value < 0:
        value = _as_signed_char(-value)
    if value == 0:
        return "0"
    return format(value, "o") if value > 0 else ""


def format_printables(text: str) -> str:
    """Keep characters with codes 32 to 127 and write the others in octal.

    The text ends at the first NUL character.
    """
    visible = text.partition("\0")[0]
    return "".join(
        c if 32 <= ord(c) <= 127 else format_octa(ord(c)) for c in visible
    )