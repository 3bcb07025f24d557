from .html_preview import create_html_preview
from .json_export import export_theme, export_themes
from .report import generate_readability_report

__all__ = [
    "create_html_preview",
    "export_theme",
    "export_themes",
    "generate_readability_report",
]
