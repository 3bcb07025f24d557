import math

import pytest

from daylight_theme.color import RGB, hex_to_rgb, polar_to_rgb, rgb_to_polar
from daylight_theme.config import ThemeConfig
from daylight_theme.contrast import rgb_contrast
from daylight_theme.palette.base import background_base
from daylight_theme.palette.generator import PALETTE_TRANSFORMS, SEMANTIC_HUES
from daylight_theme.palette.synth import (
    ContrastError,
    ForceHue,
    RotateHue,
    apply_transform,
    iter_contrast_search,
    synthesize,
)

ALL_TRANSFORMS = list(PALETTE_TRANSFORMS) + [
    ForceHue(hue, 1.3) for hue in SEMANTIC_HUES.values()
]


def test_amber_already_clears_a_dark_background():
    steps = list(iter_contrast_search(ThemeConfig(hour=0)))
    assert len(steps) == 1
    color, contrast = steps[0]
    assert contrast >= 2.5
    for original, converted in zip(RGB(255, 189, 60), polar_to_rgb(color)):
        assert abs(original - converted) <= 1


def test_amber_is_darkened_for_a_light_background():
    config = ThemeConfig(hour=8)
    steps = list(iter_contrast_search(config))
    assert len(steps) > 1
    first, last = steps[0][0], steps[-1][0]
    assert last.L < first.L
    assert last.C > first.C
    assert steps[-1][1] >= 2.5


@pytest.mark.parametrize("hour", range(24))
def test_contrast_never_decreases_during_search(hour):
    config = ThemeConfig(hour=hour)
    for transform in ALL_TRANSFORMS:
        ratios = [ratio for _, ratio in iter_contrast_search(config, transform)]
        assert ratios == sorted(ratios)
        assert ratios[-1] >= config.contrast_threshold
        assert all(ratio < config.contrast_threshold for ratio in ratios[:-1])


@pytest.mark.parametrize("hour", [0, 12])
def test_semantic_hue_is_fixed_before_and_during_search(hour):
    config = ThemeConfig(hour=hour)
    steps = list(iter_contrast_search(config, ForceHue(115, 1.3)))
    for color, _ in steps:
        assert color.h == pytest.approx(math.radians(115), abs=1e-12)


def test_force_hue_scales_base_chroma():
    base = rgb_to_polar(RGB(255, 189, 60))
    color = apply_transform(ForceHue(59, 1.3), base, base)
    assert color.L == base.L
    assert color.C == pytest.approx(base.C * 1.3)
    assert color.h == pytest.approx(math.radians(59))


def test_rotate_hue_transform():
    base = rgb_to_polar(RGB(255, 189, 60))
    color = apply_transform(RotateHue(-45), base, base)
    assert color.h == pytest.approx(base.h - math.pi / 4)
    assert (color.L, color.C) == (base.L, base.C)


def test_no_transform_returns_color_unchanged():
    base = rgb_to_polar(RGB(255, 189, 60))
    assert apply_transform(None, base, base) is base


def test_unknown_transform_is_rejected():
    base = rgb_to_polar(RGB(255, 189, 60))
    with pytest.raises(TypeError):
        apply_transform("spin", base, base)


@pytest.mark.parametrize("hour", [0, 8, 16])
def test_synthesize_meets_threshold_against_background(hour):
    config = ThemeConfig(hour=hour)
    bg = polar_to_rgb(background_base(config))
    for transform in ALL_TRANSFORMS:
        accent = hex_to_rgb(synthesize(config, transform))
        assert rgb_contrast(accent, bg) >= 2.5


def test_higher_threshold_pushes_further():
    low = ThemeConfig(hour=8, contrast_threshold=2.5)
    high = ThemeConfig(hour=8, contrast_threshold=4.5)
    bg = polar_to_rgb(background_base(high))
    accent = hex_to_rgb(synthesize(high))
    assert rgb_contrast(accent, bg) >= 4.5
    assert len(list(iter_contrast_search(high))) >= len(list(iter_contrast_search(low)))


def test_unreachable_threshold_raises_after_bound():
    config = ThemeConfig(hour=0, contrast_threshold=22.0)
    with pytest.raises(ContrastError) as excinfo:
        synthesize(config, max_iterations=10)
    error = excinfo.value
    assert error.iterations == 10
    assert error.required == 22.0
    assert error.achieved < 22.0
    assert "22.0:1" in str(error)


def test_search_is_deterministic():
    config = ThemeConfig(hour=13)
    assert synthesize(config, RotateHue(150)) == synthesize(config, RotateHue(150))
