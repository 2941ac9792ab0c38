import warnings
import chromalite
from chromalite import ChannelOverflowWarning, ColorValue, InvalidSpace, ParseError
import pytest


def test_public_names_resolve():
    for name in chromalite.__all__:
        assert hasattr(chromalite, name), name


def test_errors_are_value_errors():
    assert issubclass(ParseError, ValueError)
    assert issubclass(InvalidSpace, ValueError)
    assert issubclass(ChannelOverflowWarning, UserWarning)


def test_invalid_space_carries_details():
    err = InvalidSpace("cmyk")
    assert err.space == "cmyk"
    assert err.allowed == ("hsl", "hsv")
    assert "cmyk" in str(err)


def test_overflow_can_be_escalated_to_an_error():
    with warnings.catch_warnings():
        warnings.simplefilter("error", ChannelOverflowWarning)
        with pytest.raises(ChannelOverflowWarning):
            ColorValue.from_hsv(0.0, 1.0, 2.0)


def test_quick_start():
    red = chromalite.parse("#ff0000")
    assert red.to_hsl() == pytest.approx((0.0, 1.0, 0.5))
    assert chromalite.ColorValue.from_hsl(*red.to_hsl()) == red
