"""Editor installation and extension theme discovery."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from themeport.errors import ThemePortError
from themeport.themes.constants import UI_THEME_KINDS
from themeport.themes.loader import decode_jsonc, read_text_limited
from themeport.themes.models import ThemeKind, ThemeMeta

logger = logging.getLogger(__name__)

_MAX_SETTINGS_BYTES = 1024 * 1024
_MAX_PACKAGE_JSON_BYTES = 1024 * 1024


@dataclass(frozen=True, slots=True)
class EditorVariant:
    """Where one VS Code flavour keeps its settings and extensions."""

    name: str
    settings_path: str
    extensions_dir: str


# First match wins.
EDITOR_VARIANTS: tuple[EditorVariant, ...] = (
    EditorVariant("VS Code", "Code/User/settings.json", ".vscode/extensions"),
    EditorVariant("VS Code Insiders", "Code - Insiders/User/settings.json", ".vscode-insiders/extensions"),
    EditorVariant("Cursor", "Cursor/User/settings.json", ".cursor/extensions"),
    EditorVariant("VSCodium", "VSCodium/User/settings.json", ".vscode-oss/extensions"),
)


@dataclass(frozen=True, slots=True)
class EditorInstall:
    """A detected editor installation."""

    variant: str
    settings_path: Path
    extensions_dir: Path


def app_support_dir(home: Path | None = None) -> Path:
    """Return the per-user application data root for this platform."""
    home = home or Path.home()
    if sys.platform == "darwin":
        return home / "Library" / "Application Support"
    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA")
        return Path(appdata) if appdata else home / "AppData" / "Roaming"
    return home / ".config"


def find_editor_install(
    *,
    home: Path | None = None,
    app_support: Path | None = None,
) -> EditorInstall | None:
    home = home or Path.home()
    app_support = app_support or app_support_dir(home)
    for variant in EDITOR_VARIANTS:
        settings_path = app_support / variant.settings_path
        extensions_dir = home / variant.extensions_dir
        if settings_path.is_file() and extensions_dir.is_dir():
            return EditorInstall(variant.name, settings_path, extensions_dir)
    return None


def read_editor_settings(settings_path: Path) -> dict[str, Any]:
    """Parse an editor settings.json (JSONC); unreadable settings read as empty."""
    try:
        text = read_text_limited(settings_path, max_bytes=_MAX_SETTINGS_BYTES)
        data = decode_jsonc(text)
    except (ThemePortError, ValueError, RecursionError) as exc:
        logger.warning("could not read editor settings %s: %s", settings_path, exc)
        return {}
    return data if isinstance(data, dict) else {}


def current_theme_label(install: EditorInstall) -> str | None:
    return _settings_str(install, "workbench.colorTheme")


def preferred_dark_theme_label(install: EditorInstall) -> str | None:
    return _settings_str(install, "workbench.preferredDarkColorTheme")


def preferred_light_theme_label(install: EditorInstall) -> str | None:
    return _settings_str(install, "workbench.preferredLightColorTheme")


def _settings_str(install: EditorInstall, key: str) -> str | None:
    value = read_editor_settings(install.settings_path).get(key)
    return value if isinstance(value, str) and value else None


def kind_for_ui_theme(ui_theme: object) -> ThemeKind:
    """Map an extension's ``uiTheme`` value to a kind; unknown values are dark."""
    if isinstance(ui_theme, str) and ui_theme in UI_THEME_KINDS:
        return ThemeKind(UI_THEME_KINDS[ui_theme])
    return ThemeKind.DARK


def discover_extension_themes(extensions_dir: Path) -> tuple[list[ThemeMeta], list[str]]:
    """Scan every extension under ``extensions_dir`` for contributed themes.

    Returns the themes sorted by label, plus notes about extensions that
    could not be read.
    """
    themes: list[ThemeMeta] = []
    errors: list[str] = []
    try:
        entries = sorted(path for path in extensions_dir.iterdir() if path.is_dir())
    except OSError as exc:
        return [], [f"Failed to list extensions in {extensions_dir}: {exc}"]

    for extension_dir in entries:
        if extension_dir.name.startswith("."):
            continue
        package_json = extension_dir / "package.json"
        if not package_json.is_file():
            continue
        try:
            manifest = decode_jsonc(read_text_limited(package_json, max_bytes=_MAX_PACKAGE_JSON_BYTES))
        except (ThemePortError, ValueError, RecursionError) as exc:
            errors.append(f"Skipping extension {extension_dir.name}: {exc}")
            continue
        if isinstance(manifest, Mapping):
            themes.extend(_extension_themes(extension_dir, manifest))

    themes.sort(key=lambda meta: meta.label.lower())
    return themes, errors


def _extension_themes(extension_dir: Path, manifest: Mapping[str, Any]) -> list[ThemeMeta]:
    contributes = manifest.get("contributes")
    if not isinstance(contributes, Mapping):
        return []
    contributed = contributes.get("themes")
    if not isinstance(contributed, list):
        return []

    name = manifest.get("name") if isinstance(manifest.get("name"), str) else extension_dir.name
    publisher = manifest.get("publisher") if isinstance(manifest.get("publisher"), str) else ""
    display_name = manifest.get("displayName")
    extension_id = f"{publisher or 'local'}.{name}"
    extension_name = display_name if isinstance(display_name, str) and display_name else name

    themes: list[ThemeMeta] = []
    for entry in contributed:
        if not isinstance(entry, Mapping):
            continue
        label = entry.get("label")
        rel_path = entry.get("path")
        if not isinstance(label, str) or not label or not isinstance(rel_path, str):
            continue
        theme_path = (extension_dir / rel_path).resolve()
        if not theme_path.is_file():
            continue
        themes.append(
            ThemeMeta(
                id=f"{extension_id}/{label}",
                label=label,
                kind=kind_for_ui_theme(entry.get("uiTheme")),
                path=theme_path,
                extension_id=extension_id,
                extension_name=extension_name,
            )
        )
    return themes
