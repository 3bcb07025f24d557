import json
import numbers

from ..color import RGB, hex_to_rgb
from ..config import (
    DEFAULT_BASE,
    DEFAULT_CONTRAST_THRESHOLD,
    DEFAULT_TINT,
    ThemeConfig,
    Tint,
)


def _get(data, *keys):
    for key in keys:
        if key in data:
            return data[key]
    return None


def _parse_base(value):
    if isinstance(value, str):
        if not value.startswith("#") or len(value) not in (7, 9):
            raise ValueError(f"base: expected '#rrggbb', got {value!r}")
        try:
            return hex_to_rgb(value)
        except ValueError:
            raise ValueError(f"base: invalid hex color {value!r}") from None
    if isinstance(value, dict):
        value = [value.get(k) for k in ("r", "g", "b")]
    if isinstance(value, (list, tuple)) and len(value) == 3:
        if all(isinstance(c, int) and 0 <= c <= 255 for c in value):
            return RGB(*value)
    raise ValueError(f"base: expected hex string or three ints 0-255, got {value!r}")


def _parse_tint(key, value):
    if not isinstance(value, dict):
        raise ValueError(f"{key}: expected an object with 'h' and 'C', got {value!r}")
    h = value.get("h", 0.0)
    C = value.get("C", 0.0)
    for name, component in (("h", h), ("C", C)):
        if not isinstance(component, numbers.Real) or isinstance(component, bool):
            raise ValueError(f"{key}.{name}: expected a number, got {component!r}")
    if C < 0:
        raise ValueError(f"{key}.C: chroma must be >= 0, got {C}")
    return Tint(float(h), float(C))


def validate_hour(hour):
    if isinstance(hour, bool) or not isinstance(hour, int) or not 0 <= hour <= 23:
        raise ValueError(f"hour must be an integer 0-23, got {hour!r}")
    return hour


def config_from_dict(data, hour=0):
    """Build a ThemeConfig from a dict of overrides.

    Keys starting with "_" are metadata and skipped. Both camelCase and
    snake_case spellings are accepted.
    """
    data = {k: v for k, v in data.items() if not k.startswith("_")}

    base = _get(data, "base")
    tint_fg = _get(data, "tintFg", "tint_fg")
    tint_bg = _get(data, "tintBg", "tint_bg")
    threshold = _get(data, "contrastThreshold", "contrast_threshold")

    if threshold is None:
        threshold = DEFAULT_CONTRAST_THRESHOLD
    elif not isinstance(threshold, numbers.Real) or isinstance(threshold, bool):
        raise ValueError(f"contrastThreshold: expected a number, got {threshold!r}")
    elif threshold < 1:
        raise ValueError(f"contrastThreshold: must be >= 1, got {threshold}")

    return ThemeConfig(
        hour=validate_hour(data.get("hour", hour)),
        base=DEFAULT_BASE if base is None else _parse_base(base),
        tint_fg=DEFAULT_TINT if tint_fg is None else _parse_tint("tintFg", tint_fg),
        tint_bg=DEFAULT_TINT if tint_bg is None else _parse_tint("tintBg", tint_bg),
        contrast_threshold=float(threshold),
    )


def load_config_from_json(json_path, hour=0):
    """Load theme overrides from a JSON file.

    Args:
        json_path: Path to the overrides JSON file
        hour: Hour to use when the file does not set one

    Returns:
        ThemeConfig
    """
    with open(json_path) as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"{json_path}: expected a JSON object")

    return config_from_dict(data, hour=hour)
