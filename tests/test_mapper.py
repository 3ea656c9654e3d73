"""Tests for mapping editor colors onto the application palette."""

from __future__ import annotations

from types import MappingProxyType

import pytest

from themeport.themes.constants import (
    DARK_ESSENTIAL_DEFAULTS,
    DARK_PALETTE_DEFAULTS,
    DARK_STATUS_PRESET,
    LIGHT_PALETTE_DEFAULTS,
    LIGHT_STATUS_PRESET,
    PALETTE_SLOT_NAMES,
)
from themeport.themes.mapper import (
    PALETTE_FALLBACKS,
    first_color,
    resolve_essentials,
    resolve_palette,
    resolve_status_palette,
)
from themeport.themes.models import CanonicalTheme, OutputPalette, ThemeKind


def _theme(kind: ThemeKind = ThemeKind.DARK, **colors: str) -> CanonicalTheme:
    return CanonicalTheme(
        name="Mapped",
        kind=kind,
        colors=MappingProxyType({key.replace("__", "."): value for key, value in colors.items()}),
    )


def test_registry_covers_every_ui_slot() -> None:
    assert tuple(PALETTE_FALLBACKS) + tuple(
        slot for slot in PALETTE_SLOT_NAMES if slot.startswith("status-")
    ) == PALETTE_SLOT_NAMES


@pytest.mark.parametrize("kind", list(ThemeKind))
def test_palette_is_total_for_empty_theme(kind: ThemeKind) -> None:
    palette = resolve_palette(_theme(kind))
    assert tuple(palette) == PALETTE_SLOT_NAMES
    assert all(palette[slot] for slot in PALETTE_SLOT_NAMES)


def test_empty_dark_theme_resolves_to_dark_defaults() -> None:
    palette = resolve_palette(_theme())
    for slot, value in DARK_PALETTE_DEFAULTS.items():
        assert palette[slot] == value
    for name, value in DARK_STATUS_PRESET.items():
        assert palette[f"status-{name}"] == value


def test_empty_light_theme_resolves_to_light_defaults() -> None:
    palette = resolve_palette(_theme(ThemeKind.LIGHT))
    for slot, value in LIGHT_PALETTE_DEFAULTS.items():
        assert palette[slot] == value


def test_resolution_is_deterministic() -> None:
    theme = _theme(editor__background="#111111", button__background="#ff0000")
    assert dict(resolve_palette(theme)) == dict(resolve_palette(theme))


def test_background_only_dark_theme_derives_shades() -> None:
    palette = resolve_palette(_theme(editor__background="#111111"))
    assert palette["background"] == "#111111"
    assert palette["card"] == "#111111"
    assert palette["border"] == "#373737"
    assert palette["secondary"] == "#2b2b2b"
    assert palette["input"] == "#1e1e1e"
    assert palette["sidebar"] == "#1e1e1e"
    assert palette["sidebar-border"] == "#373737"


def test_derivation_sees_earlier_derived_slots() -> None:
    palette = resolve_palette(_theme(editor__background="#111111"))
    # sidebar is derived from background, then sidebar-accent from sidebar
    assert palette["sidebar-accent"] == "#383838"


def test_background_only_light_theme_darkens() -> None:
    palette = resolve_palette(_theme(ThemeKind.LIGHT, editor__background="#ffffff"))
    assert palette["border"] == "#ebebeb"


def test_direct_lookup_beats_derivation() -> None:
    palette = resolve_palette(_theme(editor__background="#111111", panel__border="#abcdef"))
    assert palette["border"] == "#abcdef"
    assert palette["sidebar-border"] == "#abcdef"


def test_fallback_keys_are_probed_in_order() -> None:
    palette = resolve_palette(
        _theme(sideBar__border="#222222", contrastBorder="#333333", widget__border="#444444")
    )
    assert palette["border"] == "#222222"
    assert palette["sidebar-border"] == "#222222"


def test_empty_string_colors_are_skipped() -> None:
    palette = resolve_palette(_theme(editor__foreground="", foreground="#eeeeee"))
    assert palette["foreground"] == "#eeeeee"


def test_primary_feeds_dependent_slots() -> None:
    palette = resolve_palette(_theme(button__background="#ff0000"))
    assert palette["primary"] == "#ff0000"
    assert palette["primary-foreground"] == "#1e1e1e"
    assert palette["ring"] == "#ff0000"
    assert palette["sidebar-ring"] == "#ff0000"
    assert palette["sidebar-primary"] == "#ff0000"


def test_primary_foreground_on_light_theme() -> None:
    palette = resolve_palette(_theme(ThemeKind.LIGHT, activityBar__foreground="#005500"))
    assert palette["primary"] == "#005500"
    assert palette["primary-foreground"] == "#ffffff"
    assert palette["accent"] == "#005500"


def test_status_palette_uses_theme_colors_then_cohesive_preset() -> None:
    status = resolve_status_palette(_theme(terminal__ansiGreen="#00ff00"))
    assert status.success == "#00ff00"
    assert status.warning == DARK_STATUS_PRESET["warning"]
    assert status.error == DARK_STATUS_PRESET["error"]


def test_status_probes_keys_in_priority_order() -> None:
    status = resolve_status_palette(
        _theme(terminal__ansiGreen="#00ff00", terminal__ansiBrightGreen="#11ff11")
    )
    assert status.success == "#00ff00"

    status = resolve_status_palette(_theme(terminal__ansiBrightGreen="#11ff11"))
    assert status.success == "#11ff11"


def test_status_preset_follows_theme_brightness() -> None:
    dark = resolve_status_palette(_theme(ThemeKind.HC_DARK))
    light = resolve_status_palette(_theme(ThemeKind.HC_LIGHT))
    assert dark.as_dict() == DARK_STATUS_PRESET
    assert light.as_dict() == LIGHT_STATUS_PRESET


def test_palette_status_slots_match_status_palette() -> None:
    theme = _theme(terminal__ansiRed="#cc0000", editorInfo__foreground="#0000cc")
    palette = resolve_palette(theme)
    status = resolve_status_palette(theme)
    assert palette["status-error"] == status.error == "#cc0000"
    assert palette["status-info"] == status.info == "#0000cc"
    assert palette["destructive"] == "#cc0000"


def test_essentials() -> None:
    essentials = resolve_essentials(
        _theme(editor__background="#101010", editor__selectionBackground="#334455")
    )
    assert essentials.background == "#101010"
    assert essentials.selection == "#334455"
    assert essentials.accent == DARK_ESSENTIAL_DEFAULTS["accent"]


def test_first_color() -> None:
    theme = _theme(focusBorder="#123456")
    assert first_color(theme, ("button.background", "focusBorder")) == "#123456"
    assert first_color(theme, ("button.background",)) is None


def test_output_palette_requires_every_slot() -> None:
    with pytest.raises(ValueError, match="missing slots"):
        OutputPalette({"background": "#000000"})


def test_output_palette_css_variables() -> None:
    palette = resolve_palette(_theme())
    variables = palette.css_variables("--app-")
    assert len(variables) == len(PALETTE_SLOT_NAMES)
    assert variables["--app-background"] == DARK_PALETTE_DEFAULTS["background"]
