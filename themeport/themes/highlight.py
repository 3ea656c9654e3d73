"""Syntax-highlighter theme registration."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from themeport.themes.models import CanonicalTheme, StyleRule, StyleSettings

CUSTOM_THEME_PREFIX = "themeport-custom-"
DEFAULT_DARK_HIGHLIGHT_THEME = "github-dark"
DEFAULT_LIGHT_HIGHLIGHT_THEME = "github-light"


class HighlightThemeCache:
    """Remembers which custom theme the highlighter already has registered."""

    def __init__(self) -> None:
        self._current_id: str | None = None

    def get(self) -> str | None:
        return self._current_id

    def set(self, theme_id: str) -> None:
        self._current_id = theme_id

    def clear(self) -> None:
        self._current_id = None

    def current_theme_name(self) -> str | None:
        if self._current_id is None:
            return None
        return highlight_theme_name(self._current_id)


def highlight_theme_name(theme_id: str) -> str:
    return f"{CUSTOM_THEME_PREFIX}{theme_id}"


def default_highlight_theme_name(is_dark: bool) -> str:
    return DEFAULT_DARK_HIGHLIGHT_THEME if is_dark else DEFAULT_LIGHT_HIGHLIGHT_THEME


def build_highlight_theme(theme: CanonicalTheme, name: str) -> dict[str, Any]:
    """Build a TextMate-style theme payload for a highlighting engine.

    Semantic token settings are flattened to their foreground color because
    highlighters only accept plain color strings there.
    """
    payload: dict[str, Any] = {
        "name": name,
        "type": "dark" if theme.is_dark else "light",
        "colors": dict(theme.colors),
        "tokenColors": [_rule_payload(rule) for rule in theme.rules],
    }
    if theme.semantic_highlighting is not None:
        payload["semanticHighlighting"] = theme.semantic_highlighting
    if theme.semantic_rules is not None:
        flattened: dict[str, str] = {}
        for key, value in theme.semantic_rules.items():
            if isinstance(value, str):
                flattened[key] = value
            elif value.foreground:
                flattened[key] = value.foreground
        payload["semanticTokenColors"] = flattened
    return payload


def register_highlight_theme(
    theme: CanonicalTheme,
    theme_id: str,
    cache: HighlightThemeCache,
    register: Callable[[dict[str, Any]], None],
) -> str:
    """Register ``theme`` with a highlighter unless ``cache`` says it already is."""
    name = highlight_theme_name(theme_id)
    if cache.get() == theme_id:
        return name
    register(build_highlight_theme(theme, name))
    cache.set(theme_id)
    return name


def _rule_payload(rule: StyleRule) -> dict[str, Any]:
    entry: dict[str, Any] = {"settings": _settings_payload(rule.settings)}
    if rule.name is not None:
        entry["name"] = rule.name
    if rule.scope is not None:
        entry["scope"] = rule.scope if isinstance(rule.scope, str) else list(rule.scope)
    return entry


def _settings_payload(settings: StyleSettings) -> dict[str, str]:
    payload: dict[str, str] = {}
    if settings.foreground is not None:
        payload["foreground"] = settings.foreground
    if settings.background is not None:
        payload["background"] = settings.background
    if settings.font_style is not None:
        payload["fontStyle"] = settings.font_style
    return payload
