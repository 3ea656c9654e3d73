"""Tests for palette rendering and application."""

from __future__ import annotations

from types import MappingProxyType

from PySide6.QtCore import QObject

from themeport.themes.compiler import (
    apply_palette,
    compile_qt_stylesheet,
    default_resolved_theme,
    generate_theme_css,
    render_stylesheet,
)
from themeport.themes.constants import DEFAULT_THEME_ID, LIGHT_PALETTE_DEFAULTS, PALETTE_SLOT_NAMES
from themeport.themes.mapper import resolve_palette
from themeport.themes.models import CanonicalTheme, ThemeKind


def _theme() -> CanonicalTheme:
    return CanonicalTheme(
        name="Night",
        kind=ThemeKind.DARK,
        colors=MappingProxyType({"editor.background": "#111111", "terminal.ansiGreen": "#00ff00"}),
    )


def test_render_stylesheet_declares_every_slot_in_order() -> None:
    css = render_stylesheet(resolve_palette(_theme()), ".app")
    lines = css.splitlines()

    assert lines[0] == ".app {"
    assert lines[-1] == "}"
    assert lines[1] == "  --background: #111111;"
    assert len(lines) == len(PALETTE_SLOT_NAMES) + 2
    assert "  --border: #373737;" in lines
    assert "  --status-success: #00ff00;" in lines


def test_render_stylesheet_custom_prefix() -> None:
    css = render_stylesheet(resolve_palette(_theme()), prefix="--tp-")
    assert css.startswith(":root {\n  --tp-background: #111111;")


def test_generate_theme_css_defaults_to_root() -> None:
    assert generate_theme_css(_theme()).startswith(":root {\n")


def test_apply_palette_to_mapping() -> None:
    target: dict[str, str] = {"--unrelated": "keep"}
    apply_palette(target, resolve_palette(_theme()))
    assert target["--background"] == "#111111"
    assert target["--unrelated"] == "keep"
    assert len(target) == len(PALETTE_SLOT_NAMES) + 1


def test_apply_palette_to_qobject_properties() -> None:
    target = QObject()
    apply_palette(target, resolve_palette(_theme()))
    assert target.property("--background") == "#111111"
    assert target.property("--status-success") == "#00ff00"


def test_compile_qt_stylesheet_fills_palette_and_fonts() -> None:
    qss = compile_qt_stylesheet(resolve_palette(_theme()), extra_stylesheet="QLabel { color: red; }")
    assert "background-color: #111111;" in qss
    assert 'QLabel[status="success"] {\n    color: #00ff00;' in qss
    assert "Noto Sans" in qss
    assert "{" + "background" + "}" not in qss
    assert qss.rstrip().endswith("QLabel { color: red; }")


def test_default_resolved_theme_uses_defaults() -> None:
    resolved = default_resolved_theme(ThemeKind.LIGHT)
    assert resolved.meta.id == DEFAULT_THEME_ID
    assert resolved.palette["background"] == LIGHT_PALETTE_DEFAULTS["background"]
    assert resolved.essentials.selection == "#add6ff"
