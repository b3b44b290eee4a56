import string

import pytest

from ftformat.chars import (
    isalnum,
    isalpha,
    isascii,
    isdigit,
    isprint,
    tolower,
    toupper,
)

ASCII = [chr(i) for i in range(128)]


@pytest.mark.parametrize("ch", ASCII)
def test_classification_matches_ascii_sets(ch):
    assert isalpha(ch) == (ch in string.ascii_letters)
    assert isdigit(ch) == (ch in string.digits)
    assert isalnum(ch) == (ch in string.ascii_letters + string.digits)
    assert isprint(ch) == (" " <= ch <= "~")


def test_int_and_str_agree():
    for i in range(128):
        assert isalpha(i) == isalpha(chr(i))
        assert isprint(i) == isprint(chr(i))


def test_isascii_bounds():
    assert isascii(0) is True
    assert isascii(127) is True
    assert isascii(128) is False
    assert isascii(-1) is False


def test_non_ascii_is_not_alpha():
    assert isalpha("é") is False
    assert isdigit("٣") is False


@pytest.mark.parametrize("ch", string.ascii_lowercase)
def test_case_round_trip(ch):
    assert tolower(toupper(ch)) == ch
    assert toupper(ch) == ch.upper()


def test_case_conversion_on_ints():
    assert toupper(ord("q")) == ord("Q")
    assert tolower(ord("Q")) == ord("q")


@pytest.mark.parametrize("ch", ["1", "!", " ", "é", "~"])
def test_non_letters_unchanged(ch):
    assert toupper(ch) == ch
    assert tolower(ch) == ch


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        isalpha("ab")