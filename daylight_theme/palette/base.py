from ..color import RGB, rgb_to_polar, round_clamped

# Lightness (percent of white) for each hour of the day, 0-23
BACKGROUND_LIGHTNESS = (
    14, 14, 18, 18, 22, 22, 22, 22,
    94, 96, 96, 98, 98, 96, 94, 94,
    25, 22, 18, 18, 14, 14, 14, 14,
)  # fmt: skip
FOREGROUND_LIGHTNESS = (
    84, 84, 88, 88, 84, 84, 84, 84,
    35, 35, 35, 35, 35, 35, 35, 35,
    84, 84, 84, 84, 84, 84, 80, 80,
)  # fmt: skip

DARK_THRESHOLD = 50


def background_lightness(hour):
    return BACKGROUND_LIGHTNESS[hour]


def foreground_lightness(hour):
    return FOREGROUND_LIGHTNESS[hour]


def is_dark(hour):
    """Every dark/light branch in the theme hangs off this one predicate."""
    return background_lightness(hour) <= DARK_THRESHOLD


def base_color(config):
    return rgb_to_polar(config.base)


def _tinted_grey(lightness, tint):
    grey = round_clamped(255 * (lightness / 100.0))
    col = rgb_to_polar(RGB(grey, grey, grey))
    return col._replace(h=tint.h, C=tint.C)


def background_base(config):
    """Background grey for the configured hour, with hue/chroma from tint_bg."""
    return _tinted_grey(background_lightness(config.hour), config.tint_bg)


def foreground_base(config):
    """Foreground grey for the configured hour, with hue/chroma from tint_fg."""
    return _tinted_grey(foreground_lightness(config.hour), config.tint_fg)
