import pytest

from libmyprint.flags import Align
from libmyprint.intfmt import (
    format_hexa,
    format_hexa_upper,
    format_nbr,
    format_nbr_u,
    format_octa,
    format_octa_char,
    format_printables,
)
from libmyprint.numbers import INT_MAX, INT_MIN


def test_format_nbr_int_min():
    assert format_nbr(INT_MIN) == "-2147483648"
    assert format_nbr_u(INT_MIN) == "-2147483648"


@pytest.mark.parametrize("n", [0, 7, 42, -42, 1000, -999, INT_MAX])
def test_format_nbr_round_trip(n):
    assert int(format_nbr(n)) == n
    assert format_nbr(n) == str(n)


def test_format_nbr_right_aligned_blanks():
    text = format_nbr(42, 8)
    assert len(text) == 8
    assert text == "42".rjust(8)


def test_format_nbr_zero_padded():
    assert format_nbr(42, 6, True) == "42".zfill(6)


def test_format_nbr_left_aligned():
    assert format_nbr(42, 6, False, Align.LEFT) == "42".ljust(6)
    assert format_nbr(42, 6, True, Align.LEFT) == "42".ljust(6)


def test_format_nbr_plus_sign():
    assert format_nbr(42, 6, False, Align.PLUS) == "+42".rjust(6)
    assert format_nbr(42, 6, True, Align.PLUS) == "+" + "42".zfill(5)


def test_format_nbr_negative_sign_before_padding():
    assert format_nbr(-42, 6) == "-" + "42".rjust(6)


def test_format_nbr_width_smaller_than_digits():
    assert format_nbr(123456, 2) == "123456"


def test_format_nbr_invalid_align():
    with pytest.raises(ValueError):
        format_nbr(1, 0, False, 7)


def test_format_nbr_u_has_no_plus():
    assert format_nbr_u(7, 4, False, Align.PLUS) == "7".rjust(4)
    assert format_nbr_u(7, 4, True, Align.RIGHT) == "7".zfill(4)
    assert format_nbr_u(7, 4, False, Align.LEFT) == "7".ljust(4)


@pytest.mark.parametrize("n", [1, 9, 10, 15, 16, 255, 4096, INT_MAX])
def test_format_hexa_round_trip(n):
    assert int(format_hexa(n), 16) == n
    assert format_hexa(n) == format(n, "x")
    assert format_hexa_upper(n) == format_hexa(n).upper()


def test_format_hexa_padding():
    assert format_hexa(255, 6) == format(255, "x").rjust(6)
    assert format_hexa(255, 6, True) == format(255, "x").zfill(6)
    assert format_hexa_upper(255, 6, False, Align.LEFT) == format(255, "X").ljust(6)


def test_format_hexa_zero_mark_precedes_padding():
    assert format_hexa(0, 3) == "0" + " " * 3
    assert format_hexa(0) == format_hexa_upper(0)


def test_format_hexa_negative_yields_only_padding():
    assert format_hexa(-5) == ""
    assert format_hexa(-5, 4) == " " * 4


@pytest.mark.parametrize("n", [1, 7, 8, 64, 511, -8, -100])
def test_format_octa_round_trip(n):
    assert int(format_octa(n), 8) == abs(n)


def test_format_octa_padding():
    assert format_octa(8, 5, True) == format(8, "o").zfill(5)
    assert format_octa(8, 5, False, Align.LEFT) == format(8, "o").ljust(5)


@pytest.mark.parametrize("n", [-127, -8, -1, 0, 1, 8, 100, 127])
def test_format_octa_char_round_trip(n):
    assert int(format_octa_char(n), 8) == abs(n)


def test_format_octa_char_wraps():
    assert format_octa_char(-128) == ""
    assert format_octa_char(256 + 8) == format_octa_char(8)


def test_format_printables_keeps_visible_text():
    text = "Hello, world! ~"
    assert format_printables(text) == text


def test_format_printables_octal_for_control_characters():
    assert format_printables("a\tb") == "a" + format_octa(9) + "b"
    assert format_printables("\x07") == format_octa(7)


def test_format_printables_stops_at_nul():
    assert format_printables("ab\0cd") == "ab"