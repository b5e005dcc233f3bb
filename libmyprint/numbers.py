"""Integer helpers: powers, roots, primes, parsing and ordering."""

from __future__ import annotations

import itertools
import re
import sys
from collections.abc import MutableSequence

INT_MIN = -2147483648
INT_MAX = 2147483647

_LEADING_DIGITS = re.compile(r"[0-9]*")


def _fits_int32(value: int) -> bool:
    return INT_MIN <= value <= INT_MAX


def compute_power_rec(nb: int, p: int) -> int:
    """Return ``nb`` raised to ``p``.

    A negative exponent gives 0, and so does a result outside the
    32-bit signed range.
    """
    if p < 0:
        return 0
    result = nb**p
    return result if _fits_int32(result) else 0


def compute_square_root(nb: int) -> int:
    """Return the whole square root of ``nb``, or 0 if it has none."""
    if nb <= 0:
        return 0
    root = _isqrt(nb)
    return root if root * root == nb else 0


def _isqrt(nb: int) -> int:
    import math

    return math.isqrt(nb)


def is_prime(nb: int) -> bool:
    """Tell whether ``nb`` is prime.

    Divisors are searched from 2 up to, but not including, ``nb // 2``,
    so 4 is reported as prime.
    """
    if nb <= 1:
        return False
    return not any(nb % divisor == 0 for divisor in range(2, nb // 2))


def find_prime_sup(nb: int) -> int:
    """Return the smallest number at least ``nb`` that ``is_prime`` accepts."""
    return next(filter(is_prime, itertools.count(nb)))


def getnbr(text: str) -> int:
    """Parse an integer: leading signs, then decimal digits.

    Each '-' among the leading signs flips the sign. Parsing stops at the
    first non-digit. A magnitude above the 32-bit maximum gives 0.
    """
    digits_part = text.lstrip("+-")
    signs = text[: len(text) - len(digits_part)]
    sign = -1 if signs.count("-") % 2 else 1
    digits = _LEADING_DIGITS.match(digits_part).group()
    magnitude = int(digits) if digits else 0
    if magnitude > INT_MAX:
        return 0
    return sign * magnitude


def isneg(n: int) -> str:
    """Write 'N' for a negative number, 'P' otherwise, and return that letter."""
    letter = "N" if n < 0 else "P"
    sys.stdout.write(letter)
    return letter


def sort_int_array(values: MutableSequence[int]) -> None:
    """Sort ``values`` in place in ascending order."""
    values[:] = sorted(values)


def swap(a, b):
    """Return the two values in exchanged order."""
    return b, a