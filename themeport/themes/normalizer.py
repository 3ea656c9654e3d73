"""Type narrowing of validated theme documents."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

from themeport.themes.models import (
    CanonicalTheme,
    StyleRule,
    StyleSettings,
    ThemeKind,
    ThemeValidationError,
)
from themeport.themes.validator import KIND_KEYS, RULES_KEYS, first_present


def normalize_theme_document(data: Mapping[str, Any]) -> CanonicalTheme:
    """Build a CanonicalTheme from a document that passed validation.

    Malformed optional content is dropped silently. Only a document that
    could never have passed validation raises ThemeValidationError.
    """
    if not isinstance(data, Mapping):
        raise ThemeValidationError("normalize_theme_document requires a validated mapping")
    name = data.get("name")
    if not isinstance(name, str) or not name.strip():
        raise ThemeValidationError("normalize_theme_document requires a validated 'name'")
    _, kind_tag = first_present(data, KIND_KEYS)
    try:
        kind = ThemeKind(kind_tag)
    except ValueError as exc:
        raise ThemeValidationError(
            f"normalize_theme_document requires a validated theme kind, got {kind_tag!r}"
        ) from exc

    _, rules = first_present(data, RULES_KEYS)
    highlighting = data.get("semanticHighlighting")
    schema_ref = data.get("$schema")

    return CanonicalTheme(
        name=name,
        kind=kind,
        colors=MappingProxyType(_normalize_colors(data.get("colors"))),
        rules=_normalize_rules(rules),
        semantic_highlighting=highlighting if isinstance(highlighting, bool) else None,
        semantic_rules=_normalize_semantic_rules(data.get("semanticTokenColors")),
        schema_ref=schema_ref if isinstance(schema_ref, str) else None,
    )


def _normalize_colors(colors: object) -> dict[str, str]:
    if not isinstance(colors, Mapping):
        return {}
    return {
        key: value
        for key, value in colors.items()
        if isinstance(key, str) and isinstance(value, str)
    }


def _normalize_rules(rules: object) -> tuple[StyleRule, ...]:
    if not isinstance(rules, list):
        return ()

    normalized: list[StyleRule] = []
    for entry in rules:
        if not isinstance(entry, Mapping):
            continue
        name = entry.get("name")
        scope = entry.get("scope")
        if isinstance(scope, list):
            scope = tuple(item for item in scope if isinstance(item, str))
        elif not isinstance(scope, str):
            scope = None
        normalized.append(
            StyleRule(
                settings=normalize_settings(entry.get("settings")),
                name=name if isinstance(name, str) else None,
                scope=scope,
            )
        )
    return tuple(normalized)


def normalize_settings(settings: object) -> StyleSettings:
    if not isinstance(settings, Mapping):
        return StyleSettings()
    foreground = settings.get("foreground")
    background = settings.get("background")
    font_style = settings.get("fontStyle")
    return StyleSettings(
        foreground=foreground if isinstance(foreground, str) else None,
        background=background if isinstance(background, str) else None,
        font_style=font_style if isinstance(font_style, str) else None,
    )


def _normalize_semantic_rules(
    semantic: object,
) -> Mapping[str, str | StyleSettings] | None:
    if not isinstance(semantic, Mapping):
        return None

    normalized: dict[str, str | StyleSettings] = {}
    for key, value in semantic.items():
        if not isinstance(key, str):
            continue
        if isinstance(value, str):
            normalized[key] = value
        elif isinstance(value, Mapping):
            settings = normalize_settings(value)
            if not settings.is_empty():
                normalized[key] = settings
    if not normalized:
        return None
    return MappingProxyType(normalized)
