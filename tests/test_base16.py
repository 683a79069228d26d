import string

import pytest

from kon.base16 import decode_digit, encode_digit, is_base10, is_base16


def test_encode_uses_upper_case_letters():
    assert encode_digit(10) == "A"
    assert encode_digit(15) == "F"


def test_round_trip_all_values():
    for value in range(16):
        assert decode_digit(encode_digit(value)) == value


def test_lower_case_decodes_like_upper_case():
    for ch in "abcdef":
        assert decode_digit(ch) == decode_digit(ch.upper())


def test_decimal_digits_decode_in_order():
    assert [decode_digit(ch) for ch in string.digits] == list(range(10))


@pytest.mark.parametrize("ch", ["g", "G", "x", " ", "+", "-", "/", ":", "@", "`", "\x00", "é"])
def test_non_digits_decode_to_none(ch):
    assert decode_digit(ch) is None
    assert not is_base16(ch)
    assert not is_base10(ch)


def test_is_base10_matches_decimal_digits():
    for ch in string.digits:
        assert is_base10(ch)
    for ch in "abcdefABCDEF":
        assert not is_base10(ch)


def test_is_base16_matches_hex_digits():
    for ch in string.hexdigits:
        assert is_base16(ch)


@pytest.mark.parametrize("value", [-1, 16, 255])
def test_encode_rejects_out_of_range(value):
    with pytest.raises(ValueError):
        encode_digit(value)


@pytest.mark.parametrize("text", ["", "12"])
def test_decode_rejects_non_single_character(text):
    with pytest.raises(ValueError):
        decode_digit(text)