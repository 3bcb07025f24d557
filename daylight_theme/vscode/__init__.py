from .styles import build_colors, build_token_colors
from .theme import (
    ThemeOutput,
    build_theme_document,
    generate,
    generate_vscode_theme,
    theme_file_name,
    theme_name,
)

__all__ = [
    "ThemeOutput",
    "build_colors",
    "build_theme_document",
    "build_token_colors",
    "generate",
    "generate_vscode_theme",
    "theme_file_name",
    "theme_name",
]
