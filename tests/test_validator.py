"""Tests for theme document validation."""

from __future__ import annotations

from themeport.themes.validator import validate_theme_document


def _doc(**extra: object) -> dict[str, object]:
    doc: dict[str, object] = {"name": "Night", "type": "dark"}
    doc.update(extra)
    return doc


def test_minimal_document_is_valid() -> None:
    result = validate_theme_document(_doc())
    assert result.valid
    assert result.errors == ()


def test_non_object_document_is_rejected() -> None:
    result = validate_theme_document(["not", "a", "theme"])
    assert result.errors == ("Theme must be an object",)


def test_reports_every_violation() -> None:
    result = validate_theme_document({"name": "", "type": "dim", "colors": []})
    assert not result.valid
    assert len(result.errors) == 3
    assert "Theme must have a non-empty 'name' field" in result.errors
    assert "'colors' must be an object" in result.errors


def test_whitespace_name_is_rejected() -> None:
    assert not validate_theme_document({"name": "   ", "type": "light"}).valid


def test_kind_alias_is_accepted_and_named_in_errors() -> None:
    assert validate_theme_document({"name": "Night", "kind": "hcDark"}).valid
    result = validate_theme_document({"name": "Night", "kind": "neon"})
    assert result.errors == (
        "Theme must have a 'kind' field with one of: dark, light, hcDark, hcLight",
    )


def test_explicit_null_counts_as_present() -> None:
    result = validate_theme_document(_doc(colors=None, tokenColors=None))
    assert "'colors' must be an object" in result.errors
    assert "'tokenColors' must be an array" in result.errors


def test_non_object_rule_entries_are_tolerated() -> None:
    result = validate_theme_document(_doc(tokenColors=["stray", 42, {"settings": {}}]))
    assert result.valid


def test_malformed_rule_content_is_rejected() -> None:
    result = validate_theme_document(
        _doc(
            tokenColors=[
                {"scope": "comment"},
                {"settings": "bold"},
                {"settings": {"foreground": 12}, "scope": ["string", 3], "name": 7},
                {"settings": {}, "scope": {"a": 1}},
            ]
        )
    )
    assert result.errors == (
        "tokenColors[0] must have a 'settings' field",
        "tokenColors[1].settings must be an object",
        "tokenColors[2].settings.foreground must be a string",
        "tokenColors[2].scope[1] must be a string",
        "tokenColors[2].name must be a string",
        "tokenColors[3].scope must be a string or array of strings",
    )


def test_rules_alias_prefixes_messages() -> None:
    result = validate_theme_document(_doc(rules=[{"settings": None}]))
    assert result.errors == ("rules[0].settings must be an object",)


def test_semantic_fields_are_type_checked() -> None:
    result = validate_theme_document(
        _doc(semanticHighlighting="yes", semanticTokenColors=["x"])
    )
    assert result.errors == (
        "'semanticHighlighting' must be a boolean",
        "'semanticTokenColors' must be an object",
    )


def test_color_values_are_not_validated() -> None:
    assert validate_theme_document(_doc(colors={"editor.background": 5})).valid
