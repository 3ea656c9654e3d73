"""Theme framework constants."""

from __future__ import annotations

DEFAULT_THEME_ID = "themeport-default"
DEFAULT_SELECTOR = ":root"
CSS_VARIABLE_PREFIX = "--"

THEME_KIND_TAGS: tuple[str, ...] = ("dark", "light", "hcDark", "hcLight")

# Extension manifests use these values in contributes.themes[].uiTheme.
UI_THEME_KINDS: dict[str, str] = {
    "vs": "light",
    "vs-dark": "dark",
    "hc-black": "hcDark",
    "hc-light": "hcLight",
}

STATUS_NAMES: tuple[str, ...] = ("success", "warning", "error", "info", "neutral")

UI_SLOT_NAMES: tuple[str, ...] = (
    "background",
    "foreground",
    "card",
    "card-foreground",
    "popover",
    "popover-foreground",
    "primary",
    "primary-foreground",
    "secondary",
    "secondary-foreground",
    "muted",
    "muted-foreground",
    "accent",
    "accent-foreground",
    "destructive",
    "border",
    "input",
    "ring",
    "sidebar",
    "sidebar-foreground",
    "sidebar-primary",
    "sidebar-primary-foreground",
    "sidebar-accent",
    "sidebar-accent-foreground",
    "sidebar-border",
    "sidebar-ring",
)

STATUS_SLOT_NAMES: tuple[str, ...] = tuple(f"status-{name}" for name in STATUS_NAMES)

PALETTE_SLOT_NAMES: tuple[str, ...] = UI_SLOT_NAMES + STATUS_SLOT_NAMES

ESSENTIAL_NAMES: tuple[str, ...] = (
    "background",
    "foreground",
    "accent",
    "muted",
    "border",
    "selection",
)

DARK_STATUS_PRESET: dict[str, str] = {
    "success": "#4ade80",
    "warning": "#fbbf24",
    "error": "#f87171",
    "info": "#60a5fa",
    "neutral": "#9ca3af",
}

LIGHT_STATUS_PRESET: dict[str, str] = {
    "success": "#16a34a",
    "warning": "#d97706",
    "error": "#dc2626",
    "info": "#2563eb",
    "neutral": "#4b5563",
}

DARK_PALETTE_DEFAULTS: dict[str, str] = {
    "background": "#1e1e1e",
    "foreground": "#d4d4d4",
    "card": "#252526",
    "card-foreground": "#d4d4d4",
    "popover": "#252526",
    "popover-foreground": "#d4d4d4",
    "primary": "#007acc",
    "primary-foreground": "#ffffff",
    "secondary": "#3c3c3c",
    "secondary-foreground": "#d4d4d4",
    "muted": "#3c3c3c",
    "muted-foreground": "#808080",
    "accent": "#264f78",
    "accent-foreground": "#ffffff",
    "destructive": "#f14c4c",
    "border": "#454545",
    "input": "#3c3c3c",
    "ring": "#007acc",
    "sidebar": "#252526",
    "sidebar-foreground": "#d4d4d4",
    "sidebar-primary": "#007acc",
    "sidebar-primary-foreground": "#ffffff",
    "sidebar-accent": "#37373d",
    "sidebar-accent-foreground": "#d4d4d4",
    "sidebar-border": "#454545",
    "sidebar-ring": "#007acc",
}

LIGHT_PALETTE_DEFAULTS: dict[str, str] = {
    "background": "#ffffff",
    "foreground": "#333333",
    "card": "#ffffff",
    "card-foreground": "#333333",
    "popover": "#ffffff",
    "popover-foreground": "#333333",
    "primary": "#0066b8",
    "primary-foreground": "#ffffff",
    "secondary": "#f3f3f3",
    "secondary-foreground": "#333333",
    "muted": "#f3f3f3",
    "muted-foreground": "#6e6e6e",
    "accent": "#0066b8",
    "accent-foreground": "#ffffff",
    "destructive": "#d32f2f",
    "border": "#e5e5e5",
    "input": "#ffffff",
    "ring": "#0066b8",
    "sidebar": "#f3f3f3",
    "sidebar-foreground": "#333333",
    "sidebar-primary": "#0066b8",
    "sidebar-primary-foreground": "#ffffff",
    "sidebar-accent": "#e8e8e8",
    "sidebar-accent-foreground": "#333333",
    "sidebar-border": "#e5e5e5",
    "sidebar-ring": "#0066b8",
}

DARK_ESSENTIAL_DEFAULTS: dict[str, str] = {
    "background": "#1e1e1e",
    "foreground": "#d4d4d4",
    "accent": "#007acc",
    "muted": "#808080",
    "border": "#454545",
    "selection": "#264f78",
}

LIGHT_ESSENTIAL_DEFAULTS: dict[str, str] = {
    "background": "#ffffff",
    "foreground": "#333333",
    "accent": "#0066b8",
    "muted": "#6e6e6e",
    "border": "#e5e5e5",
    "selection": "#add6ff",
}
