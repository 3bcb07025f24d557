from collections import namedtuple

from .color import RGB

Tint = namedtuple("Tint", ["h", "C"])

DEFAULT_BASE = RGB(255, 189, 60)  # warm amber accent seed
DEFAULT_TINT = Tint(0.0, 0.0)  # neutral grey
DEFAULT_CONTRAST_THRESHOLD = 2.5

# One config per generated theme. Build variants with config._replace(hour=...).
ThemeConfig = namedtuple(
    "ThemeConfig",
    ["hour", "base", "tint_fg", "tint_bg", "contrast_threshold"],
    defaults=(DEFAULT_BASE, DEFAULT_TINT, DEFAULT_TINT, DEFAULT_CONTRAST_THRESHOLD),
)
