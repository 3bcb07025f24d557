"""
Oklab color space conversions.

RGB channels are fed into the LMS matrix as-is (0-255, no gamma decode), so
Oklab lightness here runs from 0 to roughly 6.34 rather than 0 to 1. Every
derived theme color depends on these exact coefficients.
"""

import math
from collections import namedtuple

import numpy as np

RGB = namedtuple("RGB", ["r", "g", "b"])
Oklab = namedtuple("Oklab", ["L", "a", "b"])
OklabPolar = namedtuple("OklabPolar", ["L", "C", "h"])

_RGB_TO_LMS = np.array(
    [
        [0.4121656120, 0.5362752080, 0.0514575653],
        [0.2118591070, 0.6807189584, 0.1074065790],
        [0.0883097947, 0.2818474174, 0.6302613616],
    ]
)

_LMS_TO_LAB = np.array(
    [
        [0.2104542553, 0.7936177850, -0.0040720468],
        [1.9779984951, -2.4285922050, 0.4505937099],
        [0.0259040371, 0.7827717662, -0.8086757660],
    ]
)

_LAB_TO_LMS = np.array(
    [
        [1.0, 0.3963377774, 0.2158037573],
        [1.0, -0.1055613458, -0.0638541728],
        [1.0, -0.0894841775, -1.2914855480],
    ]
)

_LMS_TO_RGB = np.array(
    [
        [4.0767245293, -3.3072168827, 0.2307590544],
        [-1.2681437731, 2.6093323231, -0.3411344290],
        [-0.0041119885, -0.7034763098, 1.7068625689],
    ]
)


def round_half_up(value):
    return math.floor(value + 0.5)


def round_clamped(value, min_clamp=0, max_clamp=255):
    """Round half-up, then clamp into [min_clamp, max_clamp]."""
    return min(max(round_half_up(value), min_clamp), max_clamp)


def to_oklab(rgb):
    lms = _RGB_TO_LMS @ np.asarray(rgb, dtype=float)
    L, a, b = _LMS_TO_LAB @ np.cbrt(lms)
    return Oklab(float(L), float(a), float(b))


def to_rgb(lab):
    """Convert Oklab back to an RGB triple, saturating out-of-gamut channels."""
    lms_ = _LAB_TO_LMS @ np.asarray(lab, dtype=float)
    rgb = _LMS_TO_RGB @ (lms_ * lms_ * lms_)
    return RGB(*(round_clamped(float(c)) for c in rgb))


def to_polar(lab):
    return OklabPolar(
        lab.L,
        math.sqrt(lab.a * lab.a + lab.b * lab.b),
        math.atan2(lab.b, lab.a),
    )


def to_cartesian(polar):
    return Oklab(polar.L, polar.C * math.cos(polar.h), polar.C * math.sin(polar.h))


def rotate(polar, degrees):
    """Rotate the hue of a polar color by the given amount in degrees."""
    return polar._replace(h=polar.h + (degrees / 360.0) * 2 * math.pi)


def rgb_to_hex(rgb):
    r, g, b = rgb
    return f"#{r:02x}{g:02x}{b:02x}"


def hex_to_rgb(hex_color):
    """Parse '#rrggbb' (an alpha suffix, if present, is ignored)."""
    hex_color = hex_color.lstrip("#")
    return RGB(*(int(hex_color[i : i + 2], 16) for i in (0, 2, 4)))


def rgb_to_polar(rgb):
    return to_polar(to_oklab(rgb))


def polar_to_rgb(polar):
    return to_rgb(to_cartesian(polar))


def polar_to_hex(polar):
    return rgb_to_hex(polar_to_rgb(polar))


def hex_to_polar(hex_color):
    return rgb_to_polar(hex_to_rgb(hex_color))
