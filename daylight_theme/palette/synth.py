"""
Accent synthesis: start from the configured base accent, optionally move it to
another hue, then walk lightness/chroma until it clears the contrast threshold
against the hour's background.
"""

import math
from collections import namedtuple

from ..color import polar_to_hex, rotate
from ..contrast import contrast_ratio
from .base import background_base, base_color, is_dark

RotateHue = namedtuple("RotateHue", ["degrees"])
ForceHue = namedtuple("ForceHue", ["degrees", "chroma_scale"])

MAX_ITERATIONS = 100

# (lightness factor, chroma factor) applied per search step
DARK_STEP = (1.10, 1.10)  # brighten and saturate away from a dark background
LIGHT_STEP = (0.9, 1.20)  # darken but still saturate against a light background


class ContrastError(Exception):
    """Raised when the accent search cannot reach the required contrast."""

    def __init__(self, color, achieved, required, iterations):
        self.color = color
        self.achieved = achieved
        self.required = required
        self.iterations = iterations
        super().__init__(
            f"could not reach contrast {required}:1 after {iterations} steps "
            f"(best {achieved:.2f}:1 at {polar_to_hex(color)})"
        )


def apply_transform(transform, color, base):
    """Apply a hue transform once.

    Args:
        transform: None, RotateHue or ForceHue
        color: The polar color to transform
        base: The configured base accent, used for ForceHue chroma scaling

    Returns:
        OklabPolar
    """
    if transform is None:
        return color
    if isinstance(transform, RotateHue):
        return rotate(color, transform.degrees)
    if isinstance(transform, ForceHue):
        return color._replace(
            h=(transform.degrees / 360.0) * 2 * math.pi,
            C=base.C * transform.chroma_scale,
        )
    raise TypeError(f"Unknown transform: {transform!r}")


def iter_contrast_search(config, transform=None, max_iterations=MAX_ITERATIONS):
    """Yield (color, contrast) for every candidate the accent search visits.

    The first pair is the transformed base accent; the last one meets
    config.contrast_threshold. Raises ContrastError after max_iterations
    unsuccessful steps.
    """
    base = base_color(config)
    color = apply_transform(transform, base, base)

    bg = background_base(config)
    threshold = config.contrast_threshold
    l_factor, c_factor = DARK_STEP if is_dark(config.hour) else LIGHT_STEP

    contrast = contrast_ratio(color, bg)
    yield color, contrast

    steps = 0
    while contrast < threshold:
        if steps >= max_iterations:
            raise ContrastError(color, contrast, threshold, steps)
        color = color._replace(L=color.L * l_factor, C=color.C * c_factor)
        contrast = contrast_ratio(color, bg)
        steps += 1
        yield color, contrast


def synthesize_polar(config, transform=None, max_iterations=MAX_ITERATIONS):
    color = None
    for color, _ in iter_contrast_search(config, transform, max_iterations):
        pass
    return color


def synthesize(config, transform=None, max_iterations=MAX_ITERATIONS):
    """Derive an accent hex color that meets the contrast threshold for the hour."""
    return polar_to_hex(synthesize_polar(config, transform, max_iterations))
