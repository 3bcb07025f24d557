from .base import (
    BACKGROUND_LIGHTNESS,
    FOREGROUND_LIGHTNESS,
    background_base,
    foreground_base,
    is_dark,
)
from .generator import bg_offset, fg_offset, generate_theme_palette
from .loader import config_from_dict, load_config_from_json
from .synth import ContrastError, ForceHue, RotateHue, synthesize

__all__ = [
    "BACKGROUND_LIGHTNESS",
    "FOREGROUND_LIGHTNESS",
    "ContrastError",
    "ForceHue",
    "RotateHue",
    "background_base",
    "bg_offset",
    "config_from_dict",
    "fg_offset",
    "foreground_base",
    "generate_theme_palette",
    "is_dark",
    "load_config_from_json",
    "synthesize",
]
