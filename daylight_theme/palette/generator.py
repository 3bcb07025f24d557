from ..color import hex_to_polar, polar_to_hex
from .base import background_base, foreground_base, is_dark
from .synth import ForceHue, RotateHue, synthesize

OFFSET_SCALE = 400  # offset amounts are divided by this into Oklab L units

FOREGROUND_STEP = 10
BACKGROUND_STEP = 20
SEMANTIC_BACKGROUND_STEP = 60

# Accent hues, relative to the base accent
PALETTE_TRANSFORMS = (
    None,
    RotateHue(-45),
    RotateHue(30),
    RotateHue(-75),
    RotateHue(150),
    RotateHue(190),
)

# Status colors sit at fixed hues whatever the base accent is
SEMANTIC_CHROMA_SCALE = 1.3
SEMANTIC_HUES = {
    "good": 115,
    "bad": 0,
    "warn": 30,
    "neutral": 59,
}


def fg_offset(hex_color, amount, is_dark_theme):
    """Make a foreground less prominent by moving it toward the background.

    Dark theme darkens, light theme lightens. The shift is additive so chained
    steps do not compound.
    """
    polar = hex_to_polar(hex_color)
    adjust = amount / OFFSET_SCALE
    L = polar.L - adjust if is_dark_theme else polar.L + adjust
    return polar_to_hex(polar._replace(L=L))


def bg_offset(hex_color, amount, is_dark_theme):
    """Make a background more prominent by moving it away from the base background.

    Dark theme lightens, light theme darkens.
    """
    polar = hex_to_polar(hex_color)
    adjust = amount / OFFSET_SCALE
    L = polar.L + adjust if is_dark_theme else polar.L - adjust
    return polar_to_hex(polar._replace(L=L))


def _ladder(start, offset, amount, is_dark_theme, steps):
    colors = []
    current = start
    for _ in range(steps):
        current = offset(current, amount, is_dark_theme)
        colors.append(current)
    return colors


def generate_theme_palette(config):
    """Compute every named color a theme is assembled from.

    Args:
        config: ThemeConfig for the hour

    Returns:
        dict of name -> hex string. Keys: foreground, fore2-fore4, background,
        back2-back5, palette1-palette6, good, bad, warn, neutral and the
        matching good_bg, bad_bg, warn_bg, neutral_bg.
    """
    dark = is_dark(config.hour)
    palette = {}

    # === BASE GREYS ===
    palette["foreground"] = polar_to_hex(foreground_base(config))
    palette["background"] = polar_to_hex(background_base(config))

    # === FOREGROUND LADDER ===
    fores = _ladder(palette["foreground"], fg_offset, FOREGROUND_STEP, dark, 3)
    for i, color in enumerate(fores, start=2):
        palette[f"fore{i}"] = color

    # === BACKGROUND LADDER ===
    backs = _ladder(palette["background"], bg_offset, BACKGROUND_STEP, dark, 4)
    for i, color in enumerate(backs, start=2):
        palette[f"back{i}"] = color

    # === ACCENTS ===
    for i, transform in enumerate(PALETTE_TRANSFORMS, start=1):
        palette[f"palette{i}"] = synthesize(config, transform)

    # === SEMANTIC COLORS ===
    for name, hue in SEMANTIC_HUES.items():
        palette[name] = synthesize(config, ForceHue(hue, SEMANTIC_CHROMA_SCALE))

    for name in SEMANTIC_HUES:
        palette[f"{name}_bg"] = bg_offset(
            palette[name], SEMANTIC_BACKGROUND_STEP, dark
        )

    return palette
