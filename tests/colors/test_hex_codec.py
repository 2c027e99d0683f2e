import logging

import pytest

from huekit import ColorUnitRGBA, parse_hex, to_hex
from huekit.colors.hex_codec import expand_shorthand


def test_parse_full_form():
    color = parse_hex("ff8000")
    assert color == ColorUnitRGBA((1.0, 128 / 255, 0.0, 1.0))


def test_parse_with_prefix():
    assert parse_hex("#ff8000") == parse_hex("ff8000")


def test_parse_case_insensitive():
    assert parse_hex("#ABCDEF") == parse_hex("#abcdef")


def test_shorthand_expands_each_digit():
    assert expand_shorthand("a1f") == "aa11ff"
    assert parse_hex("a1f") == parse_hex("aa11ff")
    assert parse_hex("#a1f") == parse_hex("#aa11ff")


def test_channel_extraction():
    color = parse_hex("123456")
    assert color.to_int() == (0x12, 0x34, 0x56, 255)


def test_alpha_argument():
    color = parse_hex("#000", alpha=0.5)
    assert color.value == (0.0, 0.0, 0.0, 0.5)


def test_from_hex_classmethod():
    assert ColorUnitRGBA.from_hex("#fff", 0.25) == ColorUnitRGBA((1.0, 1.0, 1.0, 0.25))


@pytest.mark.parametrize("value", [
    "",
    "#",
    "12345",
    "#12345",
    "1234567",
    "12",
    "##abc",
    "12G456",
    "xyz",
    "+12345",
    "0x1234",
    "12_456",
    " 12345",
    "1234 ",
    "-ab",
])
def test_invalid_inputs_are_none(value):
    assert parse_hex(value) is None


def test_rejection_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="huekit.colors.hex_codec"):
        assert parse_hex("12345") is None
    assert "length 5" in caplog.text


def test_non_string_raises():
    with pytest.raises(TypeError):
        parse_hex(0xFFFFFF)


@pytest.mark.parametrize("value", ["000000", "ffffff", "a1b2c3", "7F7F7F", "00ff10", "DeadBe"])
def test_round_trip(value):
    assert to_hex(parse_hex(value), prefix="") == value.lower()


def test_to_hex_options():
    color = parse_hex("#a1b2c3")
    assert to_hex(color) == "#a1b2c3"
    assert to_hex(color, upper=True) == "#A1B2C3"
    assert color.to_hex(prefix="") == "a1b2c3"


def test_to_hex_ignores_alpha():
    assert to_hex(ColorUnitRGBA((1.0, 0.0, 0.0, 0.1))) == "#ff0000"
