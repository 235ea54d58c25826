# hex -> RGB255
samples_hex_rgb = {
    "#ff0000": (255, 0, 0),
    "#00ff00": (0, 255, 0),
    "#0000ff": (0, 0, 255),
    "#ffffff": (255, 255, 255),
    "#000000": (0, 0, 0),
    "#808080": (128, 128, 128),
    "#ff8000": (255, 128, 0),
    "#00ffff": (0, 255, 255),
    "#ff00ff": (255, 0, 255),
    "#336699": (51, 102, 153),
}

# RGB255 -> (hue [0,360), saturation [0,1], lightness [0,1])
samples_rgb_hsl = {
    (255, 0, 0): (0.0, 1.0, 0.5),
    (0, 255, 0): (120.0, 1.0, 0.5),
    (0, 0, 255): (240.0, 1.0, 0.5),
    (255, 255, 255): (0.0, 0.0, 1.0),
    (0, 0, 0): (0.0, 0.0, 0.0),
    (128, 128, 128): (0.0, 0.0, 128 / 255),
    (255, 128, 0): (128 / 255 * 60, 1.0, 0.5),
    (0, 255, 255): (180.0, 1.0, 0.5),
    (255, 0, 255): (300.0, 1.0, 0.5),
    (51, 102, 153): (210.0, 0.5, 0.4),
}
