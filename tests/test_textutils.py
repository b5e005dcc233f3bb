import pytest

from libmyprint.textutils import (
    count_words,
    is_alphanum,
    revstr,
    show_word_array,
    str_isalpha,
    str_islower,
    str_isnum,
    str_isprintable,
    str_isupper,
    str_to_word_array,
    strcapitalize,
    strcat,
    strcmp,
    strlen,
    strlowcase,
    strncat,
    strncmp,
    strncpy,
    strstr,
    strupcase,
)


@pytest.mark.parametrize("text", ["hello world!", "", "abc"])
def test_strlen(text):
    assert strlen(text) == len(text)


@pytest.mark.parametrize("text", ["abcdefghijklmn", "", "a", "ab", "hello"])
def test_revstr_round_trip(text):
    assert revstr(revstr(text)) == text
    assert len(revstr(text)) == len(text)


def test_revstr_ends_swap():
    result = revstr("abcdefghijklmn")
    assert result[0] == "n"
    assert result[-1] == "a"


def test_strcapitalize_sample():
    text = "hey, how are you? 42WORds forty-two; fifty+one"
    assert strcapitalize(text) == "Hey, How Are You? 42words Forty-Two; Fifty+One"


def test_strcapitalize_empty():
    assert strcapitalize("") == ""


def test_strcat():
    dest, src = "Hello ", "world!\n"
    result = strcat(dest, src)
    assert result.startswith(dest)
    assert result.endswith(src)
    assert len(result) == len(dest) + len(src)


def test_strncat_negative_keeps_dest():
    assert strncat("Hello ", "world!\n", -4) == "Hello "


def test_strncat_limits_length():
    dest, src = "Hello ", "world!\n"
    result = strncat(dest, src, 3)
    assert result.startswith(dest)
    assert len(result) == len(dest) + 3
    assert strncat(dest, src, 100) == strcat(dest, src)


def test_strcmp_sample():
    str1, str2 = "12345", "1234"
    assert strcmp(str1, str1) == 0
    assert strcmp(str2, str2) == 0
    assert strcmp(str1, str2) == 1
    assert strcmp(str2, str1) == -1


def test_strcmp_only_compares_lengths():
    assert strcmp("abc", "xyz") == 0


def test_strncmp_sample():
    str1, str2 = "12345678", "1234"
    assert strncmp(str1, str1, 9) == 0
    assert strncmp(str2, str2, 9) == 0
    assert strncmp(str1, str2, 3) == 0
    assert strncmp(str2, str1, 3) == 0
    assert strncmp(str1, str2, 9) == 1
    assert strncmp(str2, str1, 9) == -1


def test_strncpy():
    src = "holita"
    assert strncpy(src, -10) == ""
    assert strncpy(src, 100) == src
    part = strncpy(src, 3)
    assert len(part) == 3
    assert src.startswith(part)


def test_strstr_found():
    text = "holita"
    result = strstr(text, "lit")
    assert result == "lita"
    assert result.startswith("lit")
    assert text.endswith(result)


@pytest.mark.parametrize("to_find", ["zz", ""])
def test_strstr_not_found_gives_last_char(to_find):
    text = "holita"
    assert strstr(text, to_find) == text[-1]


def test_case_conversions():
    text = "h2oLa"
    assert str_isupper(strupcase("hola"))
    assert str_islower(strlowcase("HOLA"))
    assert strlowcase(strupcase(text)) == strlowcase(text)
    assert strupcase(strlowcase(text)) == strupcase(text)
    assert strupcase("é") == "é"


def test_predicates():
    assert str_isalpha("ht-.r¡CGHGHcJcJTc") is False
    assert str_isalpha("abcXYZ") is True
    assert str_islower("htbnmc") is True
    assert str_isupper("htbnmc") is False
    assert str_isnum("56asd78as9") is False
    assert str_isnum("0123") is True
    assert str_isprintable("hello ~") is True
    assert str_isprintable("\x07") is False


@pytest.mark.parametrize("c", ["a", "Z", "5"])
def test_is_alphanum_true(c):
    assert is_alphanum(c) is True


@pytest.mark.parametrize("c", [" ", "-", "é", ""])
def test_is_alphanum_false(c):
    assert is_alphanum(c) is False


def test_count_words():
    words = ["alpha", "beta42", "Gamma"]
    assert count_words(" ".join(words)) == len(words)
    assert count_words("-".join(words)) == len(words)
    assert count_words("") == 1


def test_str_to_word_array_round_trip():
    words = ["alpha", "beta42", "Gamma"]
    assert str_to_word_array(" ".join(words)) == words
    assert str_to_word_array("  " + ", ".join(words) + "!") == words
    assert str_to_word_array("") == []


def test_show_word_array(capsys):
    words = ["alpha", "beta", "gamma"]
    show_word_array(words)
    assert capsys.readouterr().out.splitlines() == words