# 0-255 RGB -> expected HSL / HSV fractions
samples_rgb_hsl = {
    (255, 0, 0): (0.0, 1.0, 0.5),
    (0, 255, 0): (1 / 3, 1.0, 0.5),
    (0, 0, 255): (2 / 3, 1.0, 0.5),
    (255, 255, 0): (1 / 6, 1.0, 0.5),
    (0, 255, 255): (0.5, 1.0, 0.5),
    (255, 0, 255): (5 / 6, 1.0, 0.5),
    (255, 255, 255): (0.0, 0.0, 1.0),
    (0, 0, 0): (0.0, 0.0, 0.0),
    (128, 128, 128): (0.0, 0.0, 128 / 255),
    (255, 128, 0): (128 / 1530, 1.0, 0.5),
    (100, 150, 200): (7 / 12, 100 / 210, 150 / 255),
    (0, 128, 0): (1 / 3, 1.0, 64 / 255),
}

samples_rgb_hsv = {
    (255, 0, 0): (0.0, 1.0, 1.0),
    (0, 255, 0): (1 / 3, 1.0, 1.0),
    (0, 0, 255): (2 / 3, 1.0, 1.0),
    (255, 255, 0): (1 / 6, 1.0, 1.0),
    (0, 255, 255): (0.5, 1.0, 1.0),
    (255, 0, 255): (5 / 6, 1.0, 1.0),
    (255, 255, 255): (0.0, 0.0, 1.0),
    (0, 0, 0): (0.0, 0.0, 0.0),
    (128, 128, 128): (0.0, 0.0, 128 / 255),
    (255, 128, 0): (128 / 1530, 1.0, 1.0),
    (100, 150, 200): (7 / 12, 0.5, 200 / 255),
    (0, 128, 0): (1 / 3, 1.0, 128 / 255),
}

samples_hex = {
    "#ff0000": (255, 0, 0),
    "#00ff00": (0, 255, 0),
    "#0000ff": (0, 0, 255),
    "#808080": (128, 128, 128),
    "#6496c8": (100, 150, 200),
    "#000000": (0, 0, 0),
    "#ffffff": (255, 255, 255),
    "#0a0b0c": (10, 11, 12),
}


def unit(rgb):
    return tuple(c / 255 for c in rgb)


def all_rgb_grid(step=17):
    """Integer RGB triples covering the cube corners and a coarse interior grid."""
    levels = list(range(0, 256, step))
    if levels[-1] != 255:
        levels.append(255)
    for r in levels:
        for g in levels:
            for b in levels:
                yield r, g, b
