"""Map editor theme colors onto the application palette.

Each palette slot declares a FallbackChain: editor color keys to probe in
priority order, and optionally a derivation computed from slots that are
already resolved. Resolution runs three full passes over the slot registry:

1. direct key lookups for every slot;
2. derivations for slots still unresolved, in registry order, so a
   derivation sees every pass-1 value plus anything derived before it;
3. dark or light defaults for whatever remains.

Status colors are probed separately and fall back to a single preset chosen
by theme brightness, never a mix of the dark and light presets.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass

from themeport.themes.colors import adjust_brightness
from themeport.themes.constants import (
    DARK_ESSENTIAL_DEFAULTS,
    DARK_PALETTE_DEFAULTS,
    DARK_STATUS_PRESET,
    LIGHT_ESSENTIAL_DEFAULTS,
    LIGHT_PALETTE_DEFAULTS,
    LIGHT_STATUS_PRESET,
    STATUS_NAMES,
)
from themeport.themes.models import CanonicalTheme, EssentialColors, OutputPalette, StatusPalette

Derivation = Callable[[Mapping[str, str], CanonicalTheme], str | None]


@dataclass(frozen=True, slots=True)
class FallbackChain:
    """Editor color keys to try in order, plus an optional derivation."""

    keys: tuple[str, ...]
    derive: Derivation | None = None


def _shade(source_slot: str, dark_amount: float, light_amount: float) -> Derivation:
    def derive(resolved: Mapping[str, str], theme: CanonicalTheme) -> str | None:
        base = resolved.get(source_slot)
        if not base:
            return None
        return adjust_brightness(base, dark_amount if theme.is_dark else light_amount)

    return derive


def _copy(source_slot: str) -> Derivation:
    def derive(resolved: Mapping[str, str], theme: CanonicalTheme) -> str | None:
        return resolved.get(source_slot)

    return derive


def _primary_foreground(resolved: Mapping[str, str], theme: CanonicalTheme) -> str | None:
    if resolved.get("primary"):
        return "#1e1e1e" if theme.is_dark else "#ffffff"
    return None


STATUS_FALLBACKS: dict[str, FallbackChain] = {
    "success": FallbackChain(
        keys=(
            "terminal.ansiGreen",
            "terminal.ansiBrightGreen",
            "gitDecoration.addedResourceForeground",
            "editorGutter.addedBackground",
        ),
    ),
    "warning": FallbackChain(
        keys=(
            "terminal.ansiYellow",
            "terminal.ansiBrightYellow",
            "editorWarning.foreground",
            "inputValidation.warningBorder",
            "gitDecoration.modifiedResourceForeground",
        ),
    ),
    "error": FallbackChain(
        keys=(
            "terminal.ansiRed",
            "terminal.ansiBrightRed",
            "editorError.foreground",
            "errorForeground",
            "inputValidation.errorBorder",
            "gitDecoration.deletedResourceForeground",
        ),
    ),
    "info": FallbackChain(
        keys=(
            "terminal.ansiBlue",
            "terminal.ansiBrightBlue",
            "editorInfo.foreground",
            "inputValidation.infoBorder",
            "focusBorder",
        ),
    ),
    "neutral": FallbackChain(
        keys=(
            "editorLineNumber.foreground",
            "tab.inactiveForeground",
            "sideBarTitle.foreground",
            "panelTitle.inactiveForeground",
        ),
    ),
}

PALETTE_FALLBACKS: dict[str, FallbackChain] = {
    "background": FallbackChain(keys=("editor.background",)),
    "foreground": FallbackChain(keys=("editor.foreground", "foreground")),
    "card": FallbackChain(keys=("editor.background", "sideBar.background")),
    "card-foreground": FallbackChain(keys=("editor.foreground", "foreground")),
    "popover": FallbackChain(keys=("dropdown.background", "editor.background")),
    "popover-foreground": FallbackChain(
        keys=("dropdown.foreground", "editor.foreground", "foreground"),
    ),
    "primary": FallbackChain(
        keys=("button.background", "focusBorder", "activityBar.foreground"),
    ),
    "primary-foreground": FallbackChain(
        keys=("button.foreground",),
        derive=_primary_foreground,
    ),
    "secondary": FallbackChain(
        keys=("sideBar.background", "activityBar.background"),
        derive=_shade("background", 0.1, -0.03),
    ),
    "secondary-foreground": FallbackChain(
        keys=("sideBar.foreground", "activityBar.foreground", "editor.foreground"),
    ),
    "muted": FallbackChain(
        keys=("tab.inactiveBackground", "sideBarSectionHeader.background"),
        derive=_shade("background", 0.1, -0.03),
    ),
    "muted-foreground": FallbackChain(
        keys=("editorLineNumber.foreground", "tab.inactiveForeground", "sideBarTitle.foreground"),
    ),
    "accent": FallbackChain(
        keys=("list.activeSelectionBackground", "button.background", "focusBorder"),
        derive=_copy("primary"),
    ),
    "accent-foreground": FallbackChain(
        keys=("list.activeSelectionForeground", "button.foreground"),
        derive=_copy("primary-foreground"),
    ),
    "destructive": FallbackChain(
        keys=(
            "terminal.ansiRed",
            "terminal.ansiBrightRed",
            "editorError.foreground",
            "errorForeground",
        ),
    ),
    "border": FallbackChain(
        keys=("panel.border", "sideBar.border", "contrastBorder", "widget.border", "input.border"),
        derive=_shade("background", 0.15, -0.08),
    ),
    "input": FallbackChain(
        keys=("input.background",),
        derive=_shade("background", 0.05, -0.02),
    ),
    "ring": FallbackChain(keys=("focusBorder",), derive=_copy("primary")),
    "sidebar": FallbackChain(
        keys=("sideBar.background", "activityBar.background"),
        derive=_shade("background", 0.05, -0.02),
    ),
    "sidebar-foreground": FallbackChain(
        keys=("sideBar.foreground", "activityBar.foreground", "editor.foreground"),
    ),
    "sidebar-primary": FallbackChain(
        keys=("button.background", "focusBorder"),
        derive=_copy("primary"),
    ),
    "sidebar-primary-foreground": FallbackChain(
        keys=("button.foreground",),
        derive=_copy("primary-foreground"),
    ),
    "sidebar-accent": FallbackChain(
        keys=("list.activeSelectionBackground", "sideBarSectionHeader.background"),
        derive=_shade("sidebar", 0.1, -0.05),
    ),
    "sidebar-accent-foreground": FallbackChain(
        keys=("list.activeSelectionForeground", "sideBar.foreground"),
    ),
    "sidebar-border": FallbackChain(
        keys=("sideBar.border", "panel.border", "contrastBorder"),
        derive=_copy("border"),
    ),
    "sidebar-ring": FallbackChain(keys=("focusBorder",), derive=_copy("ring")),
}

ESSENTIAL_FALLBACKS: dict[str, FallbackChain] = {
    "background": FallbackChain(keys=("editor.background",)),
    "foreground": FallbackChain(keys=("editor.foreground", "foreground")),
    "accent": FallbackChain(keys=("button.background", "focusBorder")),
    "muted": FallbackChain(keys=("editorLineNumber.foreground",)),
    "border": FallbackChain(keys=("panel.border", "contrastBorder")),
    "selection": FallbackChain(keys=("editor.selectionBackground",)),
}


def first_color(theme: CanonicalTheme, keys: tuple[str, ...]) -> str | None:
    """Return the first non-empty color among ``keys``."""
    for key in keys:
        value = theme.colors.get(key)
        if value:
            return value
    return None


def resolve_status_palette(theme: CanonicalTheme) -> StatusPalette:
    preset = DARK_STATUS_PRESET if theme.is_dark else LIGHT_STATUS_PRESET
    values = {
        name: first_color(theme, STATUS_FALLBACKS[name].keys) or preset[name]
        for name in STATUS_NAMES
    }
    return StatusPalette(**values)


def resolve_slots(
    theme: CanonicalTheme,
    chains: Mapping[str, FallbackChain],
    defaults: Mapping[str, str],
) -> dict[str, str]:
    """Run the lookup, derivation and default passes over ``chains``."""
    resolved: dict[str, str] = {}

    for slot, chain in chains.items():
        color = first_color(theme, chain.keys)
        if color:
            resolved[slot] = color

    for slot, chain in chains.items():
        if slot in resolved or chain.derive is None:
            continue
        derived = chain.derive(resolved, theme)
        if derived:
            resolved[slot] = derived

    for slot in chains:
        if slot not in resolved:
            resolved[slot] = defaults[slot]

    return {slot: resolved[slot] for slot in chains}


def resolve_palette(theme: CanonicalTheme) -> OutputPalette:
    defaults = DARK_PALETTE_DEFAULTS if theme.is_dark else LIGHT_PALETTE_DEFAULTS
    values = resolve_slots(theme, PALETTE_FALLBACKS, defaults)
    status = resolve_status_palette(theme)
    for name, color in status.as_dict().items():
        values[f"status-{name}"] = color
    return OutputPalette(values)


def resolve_essentials(theme: CanonicalTheme) -> EssentialColors:
    defaults = DARK_ESSENTIAL_DEFAULTS if theme.is_dark else LIGHT_ESSENTIAL_DEFAULTS
    return EssentialColors(**resolve_slots(theme, ESSENTIAL_FALLBACKS, defaults))
