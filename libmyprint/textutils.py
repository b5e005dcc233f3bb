"""String helpers working on ASCII letters and digits."""

from __future__ import annotations

import itertools
import re
import sys
from collections.abc import Iterable

_ASCII_LOWER = "abcdefghijklmnopqrstuvwxyz"
_ASCII_UPPER = _ASCII_LOWER.upper()
_TO_UPPER = str.maketrans(_ASCII_LOWER, _ASCII_UPPER)
_TO_LOWER = str.maketrans(_ASCII_UPPER, _ASCII_LOWER)
_WORD = re.compile(r"[0-9A-Za-z]+")
_SEPARATORS = " -+"


def _is_lower(c: str) -> bool:
    return "a" <= c <= "z"


def _is_upper(c: str) -> bool:
    return "A" <= c <= "Z"


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


def strlen(text: str) -> int:
    """Return the number of characters in ``text``."""
    return len(text)


def revstr(text: str) -> str:
    """Return ``text`` reversed."""
    return text[::-1]


def strcapitalize(text: str) -> str:
    """Capitalise words: the first letter after a space, '-' or '+' goes up,
    other capitals go down.

    The character right after a separator is never itself treated as a
    separator, and the very first character is only ever upcased.
    """
    if not text:
        return text
    out = [text[0].translate(_TO_UPPER)]
    after_separator = False
    for ch in text[1:]:
        if after_separator:
            out.append(ch.translate(_TO_UPPER))
            after_separator = False
        elif ch in _SEPARATORS:
            out.append(ch)
            after_separator = True
        else:
            out.append(ch.translate(_TO_LOWER))
    return "".join(out)


def strcat(dest: str, src: str) -> str:
    """Return ``src`` appended to ``dest``."""
    return dest + src


def strncat(dest: str, src: str, nb: int) -> str:
    """Return at most ``nb`` characters of ``src`` appended to ``dest``."""
    return dest + src[: max(nb, 0)]


def strcmp(s1: str, s2: str) -> int:
    """Compare by length only: 1 if ``s1`` is longer, -1 if shorter, else 0."""
    return (len(s1) > len(s2)) - (len(s1) < len(s2))


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare the lengths of the first ``n`` characters of each string.

    Gives 1 when ``s2`` runs out before ``s1`` within ``n`` characters,
    0 when both reach the same point, -1 otherwise.
    """
    reach = max(min(len(s1), n), 0)
    if len(s2) < reach:
        return 1
    if reach >= len(s2) or reach == n:
        return 0
    return -1


def strncpy(src: str, n: int) -> str:
    """Return a copy of at most the first ``n`` characters of ``src``."""
    return src[: max(n, 0)]


def strstr(text: str, to_find: str) -> str:
    """Return ``text`` from the first occurrence of ``to_find``.

    When there is no occurrence, or ``to_find`` is empty, only the last
    character of ``text`` is returned.
    """
    index = text.find(to_find) if to_find else -1
    if index >= 0:
        return text[index:]
    return text[-1:]


def strupcase(text: str) -> str:
    """Return ``text`` with ASCII lower-case letters turned upper-case."""
    return text.translate(_TO_UPPER)


def strlowcase(text: str) -> str:
    """Return ``text`` with ASCII upper-case letters turned lower-case."""
    return text.translate(_TO_LOWER)


def str_isalpha(text: str) -> bool:
    """Tell whether every character is an ASCII letter."""
    return all(_is_lower(c) or _is_upper(c) for c in text)


def str_isnum(text: str) -> bool:
    """Tell whether every character is an ASCII digit."""
    return all(_is_digit(c) for c in text)


def str_islower(text: str) -> bool:
    """Tell whether every character is an ASCII lower-case letter."""
    return all(_is_lower(c) for c in text)


def str_isupper(text: str) -> bool:
    """Tell whether every character is an ASCII upper-case letter."""
    return all(_is_upper(c) for c in text)


def str_isprintable(text: str) -> bool:
    """Tell whether every character lies between codes 32 and 127."""
    return all(32 <= ord(c) <= 127 for c in text)


def is_alphanum(c: str) -> bool:
    """Tell whether ``c`` is an ASCII letter or digit."""
    return bool(c) and (_is_digit(c) or _is_lower(c) or _is_upper(c))


def count_words(text: str) -> int:
    """Count one plus every place where a non-alphanumeric character is
    followed by an alphanumeric one."""
    transitions = sum(
        1
        for prev, cur in itertools.pairwise(text)
        if not is_alphanum(prev) and is_alphanum(cur)
    )
    return 1 + transitions


def str_to_word_array(text: str) -> list[str]:
    """Split ``text`` into its runs of ASCII letters and digits."""
    return _WORD.findall(text)


def show_word_array(words: Iterable[str]) -> None:
    """Write each word on its own line to standard output."""
    for word in words:
        sys.stdout.write(word + "\n")