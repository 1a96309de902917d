import itertools

import numpy as np
from chromansi.colors import ColorRGB
from chromansi.conversions import rgb_to_hsl, hsl_to_rgb, np_rgb_to_hsl, np_hsl_to_rgb


def test_round_trip_rgb_to_hsl_to_rgb():
    for rgb in itertools.product(range(0, 256, 15), repeat=3):
        rgb_out = hsl_to_rgb(rgb_to_hsl(rgb))

        assert all(abs(a - b) <= 1 for a, b in zip(rgb, rgb_out)), (rgb, rgb_out.value)

def test_round_trip_through_methods():
    for rgb in [(255, 128, 0), (12, 34, 56), (200, 200, 201)]:
        color = ColorRGB(rgb)
        back = color.to_hsl().to_rgb()
        assert all(abs(a - b) <= 1 for a, b in zip(color, back))

def test_round_trip_numpy():
    grid = np.array(list(itertools.product(range(0, 256, 5), repeat=3)))
    back = np_hsl_to_rgb(np_rgb_to_hsl(grid))
    assert np.abs(back - grid).max() <= 1
