"""Structural validation of untrusted theme documents.

Validation reports every violation it finds instead of stopping at the first
one. It checks shape, not color values: non-string entries under ``colors``
are left for the normalizer to drop.

Entries of ``tokenColors`` that are not objects at all are tolerated here and
dropped during normalization, while an object entry with malformed content
(missing or mistyped ``settings``, a bad ``scope``) is a violation.
"""

from __future__ import annotations

from typing import Any, Mapping

from themeport.themes.constants import THEME_KIND_TAGS
from themeport.themes.models import ValidationResult

_MISSING = object()

KIND_KEYS: tuple[str, ...] = ("type", "kind")
RULES_KEYS: tuple[str, ...] = ("tokenColors", "rules")
_SETTINGS_STRING_FIELDS: tuple[str, ...] = ("foreground", "background", "fontStyle")


def first_present(data: Mapping[str, Any], keys: tuple[str, ...]) -> tuple[str, Any]:
    """Return the first of ``keys`` present in ``data`` and its value."""
    for key in keys:
        if key in data:
            return key, data[key]
    return keys[0], _MISSING


def validate_theme_document(data: object) -> ValidationResult:
    """Check ``data`` against the theme document shape."""
    if not isinstance(data, Mapping):
        return ValidationResult(("Theme must be an object",))

    errors: list[str] = []

    name = data.get("name", _MISSING)
    if not isinstance(name, str) or not name.strip():
        errors.append("Theme must have a non-empty 'name' field")

    kind_key, kind = first_present(data, KIND_KEYS)
    if not isinstance(kind, str) or kind not in THEME_KIND_TAGS:
        errors.append(
            f"Theme must have a '{kind_key}' field with one of: {', '.join(THEME_KIND_TAGS)}"
        )

    colors = data.get("colors", _MISSING)
    if colors is not _MISSING and not isinstance(colors, Mapping):
        errors.append("'colors' must be an object")

    rules_key, rules = first_present(data, RULES_KEYS)
    if rules is not _MISSING:
        if not isinstance(rules, list):
            errors.append(f"'{rules_key}' must be an array")
        else:
            for index, entry in enumerate(rules):
                errors.extend(_validate_rule(entry, f"{rules_key}[{index}]"))

    highlighting = data.get("semanticHighlighting", _MISSING)
    if highlighting is not _MISSING and not isinstance(highlighting, bool):
        errors.append("'semanticHighlighting' must be a boolean")

    semantic = data.get("semanticTokenColors", _MISSING)
    if semantic is not _MISSING and not isinstance(semantic, Mapping):
        errors.append("'semanticTokenColors' must be an object")

    return ValidationResult(tuple(errors))


def _validate_rule(entry: object, prefix: str) -> list[str]:
    if not isinstance(entry, Mapping):
        return []

    errors: list[str] = []
    settings = entry.get("settings", _MISSING)
    if settings is _MISSING:
        errors.append(f"{prefix} must have a 'settings' field")
    elif not isinstance(settings, Mapping):
        errors.append(f"{prefix}.settings must be an object")
    else:
        for field_name in _SETTINGS_STRING_FIELDS:
            value = settings.get(field_name, _MISSING)
            if value is not _MISSING and not isinstance(value, str):
                errors.append(f"{prefix}.settings.{field_name} must be a string")

    scope = entry.get("scope", _MISSING)
    if scope is not _MISSING:
        if isinstance(scope, list):
            for index, item in enumerate(scope):
                if not isinstance(item, str):
                    errors.append(f"{prefix}.scope[{index}] must be a string")
        elif not isinstance(scope, str):
            errors.append(f"{prefix}.scope must be a string or array of strings")

    name = entry.get("name", _MISSING)
    if name is not _MISSING and not isinstance(name, str):
        errors.append(f"{prefix}.name must be a string")

    return errors
