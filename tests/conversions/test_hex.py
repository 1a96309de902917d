import warnings

import pytest
from chromansi.conversions import hex_to_rgb, rgb_to_hex
from chromansi.errors import InvalidHexWarning


@pytest.mark.parametrize("text", ["#ff8000", "ff8000", "#FF8000", "Ff8000"])
def test_hex_to_rgb(text):
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert hex_to_rgb(text).value == (255, 128, 0)

def test_hex_channel_order():
    assert hex_to_rgb("#010203").value == (1, 2, 3)
    assert hex_to_rgb("#000000").value == (0, 0, 0)
    assert hex_to_rgb("#ffffff").value == (255, 255, 255)

@pytest.mark.parametrize("text, expected", [
    ("zzzzzz", (0, 0, 0)),
    ("#", (0, 0, 0)),
    ("", (0, 0, 0)),
    ("#fff", (0, 15, 255)),
    ("12zz56", (0, 0, 18)),
    ("12345678", (0x34, 0x56, 0x78)),
])
def test_malformed_hex_warns_but_never_raises(text, expected):
    with pytest.warns(InvalidHexWarning):
        rgb = hex_to_rgb(text)
    assert rgb.value == expected
    assert all(0 <= c <= 255 for c in rgb)

def test_rgb_to_hex():
    assert rgb_to_hex((255, 128, 0)) == "#ff8000"
    assert rgb_to_hex((0, 0, 0), prefix="") == "000000"

def test_hex_round_trip():
    for text in ["#000000", "#ffffff", "#0a1b2c", "#ff8000", "#123456"]:
        assert rgb_to_hex(hex_to_rgb(text)) == text
