"""Theme compilation helpers."""

from __future__ import annotations

from collections.abc import MutableMapping
from pathlib import Path
from typing import Any, Protocol

from themeport.themes.constants import CSS_VARIABLE_PREFIX, DEFAULT_SELECTOR, DEFAULT_THEME_ID
from themeport.themes.mapper import resolve_essentials, resolve_palette, resolve_status_palette
from themeport.themes.models import CanonicalTheme, OutputPalette, ResolvedTheme, ThemeKind, ThemeMeta
from themeport.themes.qt_stylesheet import build_qt_stylesheet


class PropertyTarget(Protocol):
    """Anything with Qt-style dynamic properties, such as a QObject."""

    def setProperty(self, name: str, value: Any) -> bool: ...


def build_resolved_theme(theme: CanonicalTheme, meta: ThemeMeta) -> ResolvedTheme:
    """Resolve every palette view of ``theme`` and bundle it with ``meta``."""
    return ResolvedTheme(
        meta=meta,
        status_palette=resolve_status_palette(theme),
        palette=resolve_palette(theme),
        essentials=resolve_essentials(theme),
        source=theme,
    )


def default_resolved_theme(kind: ThemeKind = ThemeKind.DARK) -> ResolvedTheme:
    """Built-in fallback: an empty theme resolved entirely from defaults."""
    theme = CanonicalTheme(name="ThemePort Default", kind=kind)
    meta = ThemeMeta(
        id=DEFAULT_THEME_ID,
        label=theme.name,
        kind=kind,
        path=Path(),
        extension_id="themeport",
        extension_name="ThemePort",
    )
    return build_resolved_theme(theme, meta)


def render_stylesheet(
    palette: OutputPalette,
    selector: str = DEFAULT_SELECTOR,
    *,
    prefix: str = CSS_VARIABLE_PREFIX,
) -> str:
    """Render the palette as one custom-property declaration per line."""
    lines = [f"  {name}: {value};" for name, value in palette.css_variables(prefix).items()]
    return f"{selector} {{\n" + "\n".join(lines) + "\n}"


def generate_theme_css(theme: CanonicalTheme, selector: str = DEFAULT_SELECTOR) -> str:
    return render_stylesheet(resolve_palette(theme), selector)


def compile_qt_stylesheet(palette: OutputPalette, *, extra_stylesheet: str = "") -> str:
    return build_qt_stylesheet(palette, extra_stylesheet=extra_stylesheet)


def apply_palette(
    target: MutableMapping[str, str] | PropertyTarget,
    palette: OutputPalette,
    *,
    prefix: str = CSS_VARIABLE_PREFIX,
) -> None:
    """Write every palette slot to ``target`` in one uninterrupted batch.

    ``target`` is either a mutable mapping or an object with Qt-style
    ``setProperty``. All values are computed before the first write, so
    observers never see a half-applied palette.
    """
    variables = palette.css_variables(prefix)
    if isinstance(target, MutableMapping):
        target.update(variables)
        return
    for name, value in variables.items():
        target.setProperty(name, value)
