# (r, g, b) in [0, 255] -> (h, s, l) with h in degrees, s and l in [0, 1]
samples_rgb_hsl = {
    (255, 0, 0): (0.0, 1.0, 0.5),
    (0, 255, 0): (120.0, 1.0, 0.5),
    (0, 0, 255): (240.0, 1.0, 0.5),
    (255, 255, 0): (60.0, 1.0, 0.5),
    (0, 255, 255): (180.0, 1.0, 0.5),
    (255, 0, 255): (300.0, 1.0, 0.5),
    (0, 0, 0): (0.0, 0.0, 0.0),
    (255, 255, 255): (0.0, 0.0, 1.0),
    (128, 128, 128): (0.0, 0.0, 128 / 255),
    (255, 128, 0): (30.118, 1.0, 0.5),
    (128, 0, 0): (0.0, 1.0, 128 / 255 / 2),
    (64, 128, 192): (210.0, 0.50394, 128 / 255),
}

# (h, s, l) -> exact (r, g, b)
samples_hsl_rgb = {
    (0.0, 1.0, 0.5): (255, 0, 0),
    (120.0, 1.0, 0.5): (0, 255, 0),
    (240.0, 1.0, 0.5): (0, 0, 255),
    (210.0, 0.5, 0.5): (64, 128, 191),
    (0.0, 0.0, 0.5): (128, 128, 128),
    (0.0, 0.0, 1.0): (255, 255, 255),
    (0.0, 0.0, 0.0): (0, 0, 0),
    (0.0, 1.0, 0.75): (255, 128, 128),
}

GRAYS = [(v, v, v) for v in (0, 1, 17, 64, 127, 128, 200, 254, 255)]
