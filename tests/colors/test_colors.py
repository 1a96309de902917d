import pytest
from chromansi.colors import ColorRGB, ColorHSL, new_rgb


def test_new_rgb_keeps_valid_channels():
    assert new_rgb(10, 20, 30).value == (10, 20, 30)

@pytest.mark.parametrize("channels, expected", [
    ((256, 0, 0), (255, 0, 0)),
    ((-1, -500, 1000), (0, 0, 255)),
    ((300, 128, -5), (255, 128, 0)),
    ((10**9, -10**9, 255), (255, 0, 255)),
    ((10**400, -10**400, 5), (255, 0, 5)),
])
def test_new_rgb_saturates(channels, expected):
    assert new_rgb(*channels).value == expected

def test_new_rgb_channels_always_in_range():
    for value in range(-300, 600, 7):
        color = new_rgb(value, -value, value * 3)
        assert all(0 <= c <= 255 for c in color)
        assert all(isinstance(c, int) for c in color)

def test_float_channels_round_half_up():
    assert ColorRGB((1.5, 2.4, 254.6)).value == (2, 2, 255)

def test_rgb_accessors():
    color = ColorRGB((1, 2, 3))
    assert (color.r, color.g, color.b) == (1, 2, 3)
    assert tuple(color) == (1, 2, 3)
    assert color[1] == 2
    assert len(color) == 3

def test_rgb_is_immutable():
    color = ColorRGB((1, 2, 3))
    with pytest.raises(AttributeError):
        color.r = 5
    with pytest.raises(AttributeError):
        color._value = (0, 0, 0)
    with pytest.raises(AttributeError):
        color.extra = 1
    assert color.value == (1, 2, 3)

def test_value_equality_and_hash():
    assert ColorRGB((1, 2, 3)) == new_rgb(1, 2, 3)
    assert ColorRGB((1, 2, 3)) != ColorRGB((1, 2, 4))
    assert len({ColorRGB((1, 2, 3)), new_rgb(1, 2, 3)}) == 1

def test_rgb_and_hsl_are_never_equal():
    assert ColorRGB((0, 0, 0)) != ColorHSL((0, 0, 0))

def test_wrong_channel_count():
    with pytest.raises(ValueError):
        ColorRGB((1, 2))
    with pytest.raises(ValueError):
        ColorHSL((1.0, 0.5, 0.5, 1.0))

def test_rgb_from_hex_string():
    assert ColorRGB("#ff8000").value == (255, 128, 0)
    assert ColorRGB.from_hex("ff8000") == ColorRGB((255, 128, 0))

def test_rgb_to_hex():
    assert ColorRGB((255, 128, 0)).to_hex() == "#ff8000"
    assert ColorRGB((1, 2, 3)).to_hex(prefix="") == "010203"

def test_hsl_clamps_saturation_and_lightness_only():
    hsl = ColorHSL((400.0, 2.0, -1.0))
    assert hsl.value == (400.0, 1.0, 0.0)
    assert (hsl.h, hsl.s, hsl.l) == (400.0, 1.0, 0.0)

def test_hsl_channels_are_floats():
    hsl = ColorHSL((120, 1, 0))
    assert all(isinstance(c, float) for c in hsl)

def test_cross_space_construction_converts():
    assert ColorRGB(ColorHSL((0.0, 1.0, 0.5))).value == (255, 0, 0)
    assert ColorHSL(ColorRGB((0, 255, 0))).value == pytest.approx((120.0, 1.0, 0.5))
    assert ColorRGB.from_hsl((240.0, 1.0, 0.5)).value == (0, 0, 255)

def test_coerce_returns_same_instance():
    color = ColorRGB((1, 2, 3))
    assert ColorRGB.coerce(color) is color
    assert ColorRGB.coerce((1, 2, 3)) == color

def test_repr():
    assert repr(ColorRGB((1, 2, 3))) == "ColorRGB((1, 2, 3))"
