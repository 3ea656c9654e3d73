"""Theme ingestion and palette mapping exports."""

from themeport.themes.constants import DEFAULT_THEME_ID
from themeport.themes.loader import load_theme_file, parse_theme_document, parse_theme_text
from themeport.themes.models import CanonicalTheme, OutputPalette, Parsed, Rejected, ThemeMeta
from themeport.themes.registry import ThemeRegistry
from themeport.themes.service import ThemeService

__all__ = [
    "DEFAULT_THEME_ID",
    "CanonicalTheme",
    "OutputPalette",
    "Parsed",
    "Rejected",
    "ThemeMeta",
    "ThemeRegistry",
    "ThemeService",
    "load_theme_file",
    "parse_theme_document",
    "parse_theme_text",
]
