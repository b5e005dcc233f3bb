"""Formatted output driven by a '%' format string."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, TextIO

from .flags import (
    alignment,
    alternate_prefix,
    padding,
    parse_flags,
    space_prefix,
    width,
    zero_pad,
)
from .floatfmt import (
    format_exp,
    format_exp_upper,
    format_float,
    format_general,
    format_general_upper,
)
from .intfmt import (
    format_hexa,
    format_hexa_upper,
    format_nbr,
    format_nbr_u,
    format_octa,
    format_printables,
)
from .numbers import getnbr

_UNSIGNED_NEGATIVE = "4294962729"

# How many times a leading ' ' flag repeats its blank for each conversion.
_SPACE_REPEATS = {
    "d": 1, "i": 1, "u": 1,
    "e": 2, "E": 2,
    "g": 3, "G": 3,
    "c": 4, "s": 4,
    "p": 5, "n": 5,
    "x": 6,
    "S": 7, "%": 7,
    "f": 8, "F": 8,
    "X": 9,
    "o": 10,
}
_DEFAULT_REPEATS = 10


def _to_int32(value: Any) -> int:
    wrapped = int(value) & 0xFFFFFFFF
    return wrapped - 0x100000000 if wrapped >= 0x80000000 else wrapped


def _magnitude(value: Any) -> int:
    number = _to_int32(value)
    return _to_int32(-number) if number < 0 else number


def _next_arg(args: Iterator[Any], conversion: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for '%{conversion}'") from None


def _char(value: Any) -> str:
    if isinstance(value, str) and len(value) == 1:
        return value
    return chr(int(value) % 256)


def _pointer(value: Any, field: int, zero: bool, align: int) -> str:
    raw = _to_int32(value).to_bytes(4, "little", signed=True)
    text = raw.decode("latin-1").partition("\0")[0]
    return "0x" + format_hexa(getnbr(text), int(zero), bool(field), align)


def _body(conversion: str, args: Iterator[Any], flags: str) -> str:
    field = width(flags)
    zero = zero_pad(flags)
    align = alignment(flags)
    match conversion:
        case "d" | "i":
            return format_nbr(_to_int32(_next_arg(args, conversion)), field, zero, align)
        case "u":
            number = _to_int32(_next_arg(args, conversion))
            if number < 0:
                return "u\n" + _UNSIGNED_NEGATIVE
            return "u\n" + format_nbr_u(number, field, zero, align)
        case "e":
            return format_exp(float(_next_arg(args, conversion)))
        case "E":
            return format_exp_upper(float(_next_arg(args, conversion)))
        case "g":
            return format_general(float(_next_arg(args, conversion)), flags, conversion)
        case "G":
            return format_general_upper(float(_next_arg(args, conversion)), flags, conversion)
        case "c":
            return _char(_next_arg(args, conversion))
        case "s":
            text = _next_arg(args, conversion)
            return "(null)" if text is None else str(text)
        case "p":
            return _pointer(_next_arg(args, conversion), field, zero, align)
        case "n":
            _next_arg(args, conversion)
            return ""
        case "x":
            return format_hexa(_magnitude(_next_arg(args, conversion)), field, zero, align)
        case "S":
            text = _next_arg(args, conversion)
            if text is None:
                raise TypeError("'%S' needs a string, not None")
            return format_printables(str(text))
        case "%":
            return "%"
        case "f" | "F":
            return format_float(float(_next_arg(args, conversion)))
        case "X":
            return format_hexa_upper(_magnitude(_next_arg(args, conversion)), field, zero, align)
        case "o":
            number = _magnitude(_next_arg(args, conversion))
            if number < 0:
                return padding(field, zero, align)
            return format_octa(number, field, zero, align)
        case _:
            return "%" + conversion


def format_conversion(conversion: str, args: Iterator[Any], flags: str = "") -> str:
    """Render one conversion, taking its value from the iterator ``args``."""
    repeats = _SPACE_REPEATS.get(conversion, _DEFAULT_REPEATS)
    prefix = alternate_prefix(flags, conversion) + space_prefix(flags, conversion) * repeats
    return prefix + _body(conversion, args, flags)


def sprintf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with each conversion replaced by its rendered argument.

    The format ends at its first NUL character.
    """
    if not isinstance(fmt, str):
        raise TypeError("format must be a string")
    fmt = fmt.partition("\0")[0]
    remaining = iter(args)
    pieces = []
    index = 0
    while index < len(fmt):
        percent = fmt.find("%", index)
        if percent < 0:
            pieces.append(fmt[index:])
            break
        pieces.append(fmt[index:percent])
        spec = parse_flags(fmt, percent)
        conv_index = percent + 1 + len(spec)
        if conv_index >= len(fmt):
            raise ValueError("format ends inside a conversion specification")
        pieces.append(format_conversion(fmt[conv_index], remaining, spec))
        index = conv_index + 1
    return "".join(pieces)


def printf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the formatted text to ``file`` (standard output by default)
    and return the number of characters written."""
    text = sprintf(fmt, *args)
    out = sys.stdout if file is None else file
    out.write(text)
    return len(text)