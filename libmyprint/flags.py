"""Flag parsing for conversion specifications, and padding."""

from __future__ import annotations

import enum
import itertools
import re

from .numbers import getnbr

FLAG_CHARS = frozenset("#0-+ *123456789._;,:")
CONVERSION_CHARS = frozenset("diuxXfFoeEgGaAcspnS%")

_ALT_CONVERSIONS = frozenset("aAdeEfFgGi")
_ALT_PREFIXES = {"o": "0", "x": "0x", "X": "0X"}
_SIGN_RUN = re.compile(r"[+-]+")
_LEADING_DIGITS = re.compile(r"[0-9]*")


class Align(enum.IntEnum):
    """Where padding goes, and whether a '+' sign is shown."""

    RIGHT = 0
    LEFT = 1
    PLUS = 2


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


def parse_flags(fmt: str, index: int) -> str:
    """Return the run of flag characters that follows the '%' at ``index``.

    The run ends at the first character that is not a flag character,
    which is normally the conversion character.
    """
    if not 0 <= index < len(fmt):
        raise IndexError(f"index {index} is outside the format string")
    rest = itertools.islice(fmt, index + 1, None)
    return "".join(itertools.takewhile(lambda c: c in FLAG_CHARS, rest))


def alternate_prefix(flags: str, conversion: str) -> str:
    """Return the prefix that a leading '#' adds for 'o', 'x' and 'X'."""
    if not flags.startswith("#"):
        return ""
    return _ALT_PREFIXES.get(conversion, "")


def alternate_changes(conversion: str) -> bool:
    """Tell whether a '#' flag alters the given conversion's output."""
    return conversion in _ALT_CONVERSIONS


def zero_pad(flags: str) -> bool:
    """Tell whether the flags ask for zero padding.

    The first character in the range '0' to ':' must be '0', some digit
    from 1 to 9 must follow it, and no '.' or '-' may follow it.
    """
    start = next(
        (pos for pos, c in enumerate(flags) if "0" <= c <= ":"),
        None,
    )
    if start is None:
        return False
    rest = flags[start + 1:]
    if any(c in ".-" for c in rest):
        return False
    return flags[start] == "0" and any("1" <= c <= "9" for c in rest)


def width(flags: str) -> int:
    """Return the field width: every digit before the first '.', joined."""
    head = flags.partition(".")[0]
    return getnbr("".join(c for c in head if _is_digit(c)))


def precision(flags: str) -> int:
    """Return the digits right after the first '.', or 6 without a '.'."""
    head, dot, tail = flags.partition(".")
    if not dot:
        return 6
    return getnbr(_LEADING_DIGITS.match(tail).group())


def alignment(flags: str) -> Align:
    """Read the first run of '+' and '-' signs: any '-' means left
    alignment, otherwise a '+' asks for a plus sign."""
    match = _SIGN_RUN.search(flags)
    if match is None:
        return Align.RIGHT
    return Align.LEFT if "-" in match.group() else Align.PLUS


def space_prefix(flags: str, conversion: str) -> str:
    """Return the blank that a leading ' ' flag puts before some conversions."""
    if flags.startswith(" ") and conversion in _ALT_CONVERSIONS:
        return " "
    return ""


def padding(count: int, zero: bool, align: int) -> str:
    """Return ``count`` fill characters: zeros when zero padding applies
    and the field is not left aligned, blanks otherwise."""
    fill = "0" if zero and align != Align.LEFT else " "
    return fill * max(count, 0)