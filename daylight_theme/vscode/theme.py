import json
from collections import namedtuple

from ..palette import generate_theme_palette, is_dark
from .styles import build_colors, build_token_colors

ThemeOutput = namedtuple("ThemeOutput", ["is_dark", "colors", "token_colors"])

THEME_PREFIX = "Daylight"
FILE_PREFIX = "daylight"


def theme_name(hour):
    return f"{THEME_PREFIX} {hour:02d}:00"


def theme_file_name(hour):
    return f"{FILE_PREFIX}-{hour:02d}.json"


def generate(config):
    """Compose the full theme for one hour.

    Args:
        config: ThemeConfig

    Returns:
        ThemeOutput with the dark flag, workbench colors and token colors
    """
    palette = generate_theme_palette(config)
    return ThemeOutput(
        is_dark=is_dark(config.hour),
        colors=build_colors(palette),
        token_colors=build_token_colors(palette),
    )


def build_theme_document(config, name=None):
    """Build the VS Code theme document (name, type, colors, tokenColors)."""
    output = generate(config)
    return {
        "name": name or theme_name(config.hour),
        "type": "dark" if output.is_dark else "light",
        "colors": output.colors,
        "tokenColors": output.token_colors,
    }


def generate_vscode_theme(config, name=None):
    """Generate a VS Code color theme file for one hour.

    Args:
        config: ThemeConfig
        name: Theme name (default: "Daylight HH:00")

    Returns:
        JSON string of the theme data
    """
    return json.dumps(build_theme_document(config, name), indent=2)
