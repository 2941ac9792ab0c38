from chromalite.conversions.hex import parse_hex, parse_rgb_string, to_hex_string, to_rgb_string, dec_to_hex
from chromalite.errors import ParseError
import pytest
from tests.samples import samples_hex


def test_parse_hex():
    for text, rgb in samples_hex.items():
        assert parse_hex(text) == rgb


def test_parse_hex_is_case_insensitive_and_trims():
    assert parse_hex("  #FF8000\n") == (255, 128, 0)
    assert parse_hex("#AbCdEf") == (0xab, 0xcd, 0xef)


@pytest.mark.parametrize("text", [
    "ff0000",
    "#ff000",
    "#ff00000",
    "#ff0000ff",
    "#fff",
    "#gg0000",
    "#ff 00 00",
    "",
    "#",
])
def test_parse_hex_rejects_malformed(text):
    with pytest.raises(ParseError):
        parse_hex(text)


def test_parse_hex_rejects_non_string():
    with pytest.raises(ParseError):
        parse_hex(0xff0000)


def test_parse_rgb_string():
    assert parse_rgb_string("rgb(0, 255, 0)") == (0, 255, 0)
    assert parse_rgb_string("rgb(42,42,42)") == (42, 42, 42)
    assert parse_rgb_string("  RGB ( 1 ,2,  3 )  ") == (1, 2, 3)


@pytest.mark.parametrize("text", [
    "rgb(1, 2)",
    "rgb(1, 2, 3, 4)",
    "rgb(1, two, 3)",
    "rgb(1.5, 2, 3)",
    "rgb(1, , 3)",
    "rgb 1, 2, 3",
    "rgb(256, 0, 0)",
    "rgb(-1, 0, 0)",
    "rgba(1, 2, 3)",
    "hsl(1, 2, 3)",
])
def test_parse_rgb_string_rejects_malformed(text):
    with pytest.raises(ParseError):
        parse_rgb_string(text)


def test_dec_to_hex_rounds_half_away_from_zero():
    assert dec_to_hex(0) == "00"
    assert dec_to_hex(9.4) == "09"
    assert dec_to_hex(9.5) == "0a"
    assert dec_to_hex(127.5) == "80"
    assert dec_to_hex(254.5) == "ff"
    assert dec_to_hex(255) == "ff"


def test_to_hex_string_is_lowercase_and_padded():
    for text, rgb in samples_hex.items():
        assert to_hex_string(*rgb) == text


def test_to_rgb_string():
    assert to_rgb_string(255, 0, 127.5) == "rgb(255, 0, 128)"
    assert parse_rgb_string(to_rgb_string(1, 2, 3)) == (1, 2, 3)
