import os

from ..config import ThemeConfig
from ..palette import is_dark
from ..vscode import generate_vscode_theme, theme_file_name

HOURS = range(24)


def export_theme(config, output_dir):
    """Write the theme for config.hour into output_dir and return its path."""
    file_path = os.path.join(output_dir, theme_file_name(config.hour))
    with open(file_path, "w") as f:
        f.write(generate_vscode_theme(config))
    return file_path


def export_themes(output_dir, config=None, hours=HOURS):
    """Export one VS Code theme JSON file per hour.

    Args:
        output_dir: Directory for the theme files (created if missing)
        config: ThemeConfig used as a template; its hour is replaced per file
        hours: Hours to export (default: all 24)

    Returns:
        list of written file paths
    """
    template = config or ThemeConfig(hour=0)
    os.makedirs(output_dir, exist_ok=True)

    paths = []
    for hour in hours:
        hour_config = template._replace(hour=hour)
        file_path = export_theme(hour_config, output_dir)
        variant = "dark" if is_dark(hour) else "light"
        print(f"Generated: {os.path.basename(file_path)} ({variant})")
        paths.append(file_path)

    return paths
