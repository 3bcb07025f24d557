from ..color import hex_to_rgb
from ..contrast import rgb_contrast
from ..palette import is_dark

MIN_TEXT_CONTRAST = 4.5  # Main foreground against background


def generate_readability_report(palette, config):
    """Generate a readability report for one hour's palette.

    Accents and semantic colors are held to config.contrast_threshold, the
    same bar the accent search uses. The foreground ladder is informational
    apart from the main foreground.

    Args:
        palette: dict from generate_theme_palette
        config: ThemeConfig the palette was generated from

    Returns:
        tuple: (report text, list of (key, hex, achieved, required) issues)
    """
    bg = palette["background"]
    bg_rgb = hex_to_rgb(bg)
    threshold = config.contrast_threshold

    report = []
    report.append("=" * 70)
    report.append(f"READABILITY REPORT - {config.hour:02d}:00")
    report.append("=" * 70)
    report.append(f"Theme: {'DARK' if is_dark(config.hour) else 'LIGHT'}")
    report.append(f"Background:       {bg}")
    report.append(f"Foreground:       {palette['foreground']}")
    report.append("")

    categories = [
        ("FOREGROUND (main)", ["foreground"], MIN_TEXT_CONTRAST),
        ("FOREGROUND (ladder)", ["fore2", "fore3", "fore4"], None),
        ("ACCENTS", [f"palette{i}" for i in range(1, 7)], threshold),
        ("SEMANTIC", ["good", "bad", "warn", "neutral"], threshold),
    ]

    issues = []

    for cat_name, keys, min_contrast in categories:
        if min_contrast is None:
            report.append(f"\n{cat_name}")
        else:
            report.append(f"\n{cat_name} (min: {min_contrast}:1)")
        report.append("-" * 50)
        for key in keys:
            hex_val = palette[key]
            cr = rgb_contrast(hex_to_rgb(hex_val), bg_rgb)

            if min_contrast is None:
                status = ""
            elif cr >= min_contrast:
                status = "✓"
            else:
                status = "✗ FAIL"
                issues.append((key, hex_val, cr, min_contrast))

            report.append(f"  {key:12} {hex_val}  vs bg: {cr:5.2f}:1  {status}")

    report.append("\n" + "=" * 70)
    if issues:
        report.append(f"ISSUES FOUND: {len(issues)}")
        for key, hex_val, achieved, required in issues:
            report.append(
                f"  - {key}: {hex_val} has {achieved:.2f}:1, needs {required}:1"
            )
    else:
        report.append("ALL COLORS PASS CONTRAST REQUIREMENTS ✓")
    report.append("=" * 70)

    return "\n".join(report), issues
