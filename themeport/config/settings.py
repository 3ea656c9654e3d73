"""Application settings via QSettings."""

from __future__ import annotations

import os
from pathlib import Path

from PySide6.QtCore import QSettings

from themeport.themes.constants import DEFAULT_SELECTOR, DEFAULT_THEME_ID


class AppSettings:
    """Wraps QSettings for persistent app configuration."""

    def __init__(
        self,
        qsettings: QSettings | None = None,
        app_data_dir: Path | None = None,
    ) -> None:
        self._qs = qsettings if qsettings is not None else QSettings("ThemePort", "ThemePort")
        self._app_data_override = app_data_dir

    # -- theme --

    @property
    def theme_id(self) -> str:
        raw = self._qs.value("ui/theme_id", DEFAULT_THEME_ID, type=str)
        value = (raw or "").strip()
        return value or DEFAULT_THEME_ID

    @theme_id.setter
    def theme_id(self, value: str) -> None:
        cleaned = (value or "").strip() or DEFAULT_THEME_ID
        self._qs.setValue("ui/theme_id", cleaned)

    @property
    def theme_last_known_good_id(self) -> str:
        raw = self._qs.value("ui/theme_last_known_good_id", DEFAULT_THEME_ID, type=str)
        value = (raw or "").strip()
        return value or DEFAULT_THEME_ID

    @theme_last_known_good_id.setter
    def theme_last_known_good_id(self, value: str) -> None:
        cleaned = (value or "").strip() or DEFAULT_THEME_ID
        self._qs.setValue("ui/theme_last_known_good_id", cleaned)

    @property
    def follow_editor_theme(self) -> bool:
        return self._qs.value("ui/follow_editor_theme", True, type=bool)

    @follow_editor_theme.setter
    def follow_editor_theme(self, value: bool) -> None:
        self._qs.setValue("ui/follow_editor_theme", bool(value))

    # -- stylesheet --

    @property
    def stylesheet_selector(self) -> str:
        raw = self._qs.value("css/selector", DEFAULT_SELECTOR, type=str)
        value = (raw or "").strip()
        return value or DEFAULT_SELECTOR

    @stylesheet_selector.setter
    def stylesheet_selector(self, value: str) -> None:
        cleaned = (value or "").strip() or DEFAULT_SELECTOR
        self._qs.setValue("css/selector", cleaned)

    # -- editor --

    @property
    def extensions_dir_override(self) -> str:
        raw = self._qs.value("editor/extensions_dir", "", type=str)
        return (raw or "").strip()

    @extensions_dir_override.setter
    def extensions_dir_override(self, value: str) -> None:
        self._qs.setValue("editor/extensions_dir", (value or "").strip())

    # -- helpers --

    @property
    def app_data_dir(self) -> Path:
        path = self._app_data_override or self._default_app_data_dir()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @property
    def themes_dir(self) -> Path:
        path = self.app_data_dir / "themes"
        path.mkdir(parents=True, exist_ok=True)
        return path

    @property
    def logs_dir(self) -> Path:
        path = self.app_data_dir / "logs"
        path.mkdir(parents=True, exist_ok=True)
        return path

    @staticmethod
    def _default_app_data_dir() -> Path:
        base = Path(os.environ.get("APPDATA", Path.home() / ".config"))
        return base / "themeport"
