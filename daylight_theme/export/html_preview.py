from ..config import ThemeConfig
from ..palette import generate_theme_palette, is_dark
from ..vscode import theme_name

PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <title>Daylight Theme Preview</title>
    <style>
        * { margin: 0; padding: 0; box-sizing: border-box; }
        body {
            font-family: 'SF Mono', 'Fira Code', monospace;
            background: #808080;
            padding: 40px;
        }
        h1 { margin-bottom: 30px; font-weight: 400; color: #ffffff; }
        .hours {
            display: grid;
            grid-template-columns: repeat(auto-fill, minmax(260px, 1fr));
            gap: 15px;
        }
        .hour-card {
            border-radius: 8px;
            overflow: hidden;
            padding: 16px;
        }
        .hour-card h2 { font-size: 14px; font-weight: 400; margin-bottom: 10px; }
        .badge { font-size: 11px; text-transform: uppercase; letter-spacing: 2px; }
        .row { display: flex; gap: 4px; margin-top: 8px; }
        .swatch { flex: 1; height: 24px; border-radius: 3px; }
        .code { margin-top: 12px; font-size: 12px; line-height: 1.5; }
    </style>
</head>
<body>
    <h1>Daylight: 24 hours</h1>
    <div class="hours">
{hour_cards}
    </div>
</body>
</html>
"""

CARD_TEMPLATE = """        <div class="hour-card" style="background: {background}; color: {foreground};">
            <h2>{name} <span class="badge" style="color: {fore4};">{variant}</span></h2>
            <div class="row">{ladder}</div>
            <div class="row">{accents}</div>
            <div class="row">{semantic}</div>
            <div class="code">
                <span style="color: {palette6};">def</span>
                <span style="color: {palette1};">sunrise</span>(<span style="color: {fore2};">hour</span>):<br>
                &nbsp;&nbsp;<span style="color: {fore4}; font-style: italic;"># {name}</span><br>
                &nbsp;&nbsp;<span style="color: {palette2};">return</span>
                <span style="color: {palette3};">"dawn"</span> * <span style="color: {palette5};">{hour}</span>
            </div>
        </div>"""

LADDER_KEYS = [
    "back2",
    "back3",
    "back4",
    "back5",
    "fore4",
    "fore3",
    "fore2",
    "foreground",
]
ACCENT_KEYS = [f"palette{i}" for i in range(1, 7)]
SEMANTIC_KEYS = ["good", "bad", "warn", "neutral"]


def _swatches(palette, keys):
    return "".join(
        f'<div class="swatch" title="{key} {palette[key]}" '
        f'style="background: {palette[key]};"></div>'
        for key in keys
    )


def make_hour_card(config):
    """Render one hour's palette as an HTML card."""
    palette = generate_theme_palette(config)

    replacements = {
        "{name}": theme_name(config.hour),
        "{variant}": "dark" if is_dark(config.hour) else "light",
        "{hour}": str(config.hour),
        "{ladder}": _swatches(palette, LADDER_KEYS),
        "{accents}": _swatches(palette, ACCENT_KEYS),
        "{semantic}": _swatches(palette, SEMANTIC_KEYS),
    }
    for key, value in palette.items():
        replacements[f"{{{key}}}"] = value

    card = CARD_TEMPLATE
    for old, new in replacements.items():
        card = card.replace(old, new)
    return card


def create_html_preview(output_path, config=None, hours=range(24)):
    """Create an HTML preview with one card per hour.

    Args:
        output_path: HTML file to write
        config: ThemeConfig used as a template; its hour is replaced per card
        hours: Hours to include (default: all 24)
    """
    template = config or ThemeConfig(hour=0)
    cards = [make_hour_card(template._replace(hour=hour)) for hour in hours]
    html = PAGE_TEMPLATE.replace("{hour_cards}", "\n".join(cards))

    with open(output_path, "w") as f:
        f.write(html)
