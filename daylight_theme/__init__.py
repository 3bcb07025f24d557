"""Editor color themes synthesized from the hour of day."""

from .color import RGB, Oklab, OklabPolar
from .config import ThemeConfig, Tint
from .palette import ContrastError
from .vscode import ThemeOutput, generate

__version__ = "0.1.0"

__all__ = [
    "RGB",
    "ContrastError",
    "Oklab",
    "OklabPolar",
    "ThemeConfig",
    "ThemeOutput",
    "Tint",
    "generate",
]
