from .color import polar_to_rgb


def _channel(c):
    c = c / 255.0
    return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(rgb):
    """Calculate relative luminance per WCAG 2.0"""
    r, g, b = rgb
    return 0.2126 * _channel(r) + 0.7152 * _channel(g) + 0.0722 * _channel(b)


def luminance_contrast(lum1, lum2):
    """Calculate contrast ratio between two luminances"""
    lighter = max(lum1, lum2)
    darker = min(lum1, lum2)
    return (lighter + 0.05) / (darker + 0.05)


def rgb_contrast(rgb1, rgb2):
    return luminance_contrast(relative_luminance(rgb1), relative_luminance(rgb2))


def contrast_ratio(c1, c2):
    """Contrast ratio between two polar Oklab colors, measured on their RGB form."""
    return rgb_contrast(polar_to_rgb(c1), polar_to_rgb(c2))
