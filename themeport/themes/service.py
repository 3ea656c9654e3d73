"""Runtime theme apply and persistence service."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from PySide6.QtCore import QObject, Signal
from PySide6.QtWidgets import QApplication

from themeport.themes.compiler import (
    apply_palette,
    build_resolved_theme,
    compile_qt_stylesheet,
    default_resolved_theme,
)
from themeport.themes.constants import DEFAULT_THEME_ID
from themeport.themes.discovery import EditorInstall, current_theme_label, find_editor_install
from themeport.themes.highlight import HighlightThemeCache, register_highlight_theme
from themeport.themes.models import Parsed, ResolvedTheme, ThemeMeta
from themeport.themes.registry import ThemeRegistry

logger = logging.getLogger(__name__)


class ThemeService(QObject):
    """Apply themes to QApplication and persist selection."""

    theme_changed = Signal(str)

    def __init__(
        self,
        app: QApplication,
        settings,
        registry: ThemeRegistry,
        *,
        highlight_cache: HighlightThemeCache | None = None,
        highlight_register: Callable[[dict[str, Any]], None] | None = None,
        editor_install: Callable[[], EditorInstall | None] = find_editor_install,
    ) -> None:
        super().__init__()
        self._app = app
        self._settings = settings
        self._registry = registry
        self._highlight_cache = highlight_cache or HighlightThemeCache()
        self._highlight_register = highlight_register
        self._editor_install = editor_install
        self._active_theme: ResolvedTheme | None = None

    @property
    def active_theme(self) -> ResolvedTheme | None:
        return self._active_theme

    @property
    def active_theme_id(self) -> str:
        return self._active_theme.meta.id if self._active_theme is not None else ""

    def reload_themes(self) -> list[str]:
        self._registry.reload()
        return self._registry.load_errors()

    def available_themes(self) -> list[ThemeMeta]:
        return self._registry.list_themes()

    def apply_theme(self, theme_id: str, *, persist: bool = True) -> tuple[bool, str]:
        meta = self._registry.get_theme(theme_id)
        if meta is None:
            return False, f"Theme not found: {theme_id}"
        result = self._registry.load(theme_id)
        if not isinstance(result, Parsed):
            logger.warning("rejected theme %s: %s", theme_id, result.reason)
            return False, f"Could not load theme {meta.label}: {result.reason}"

        resolved = build_resolved_theme(result.theme, meta)
        self._activate(resolved)
        if persist:
            self._settings.theme_id = theme_id
        self._settings.theme_last_known_good_id = theme_id
        self.theme_changed.emit(theme_id)
        logger.info("applied theme %s (%s)", theme_id, meta.kind.value)
        return True, f"Applied theme: {meta.label}"

    def apply_startup_theme(self) -> tuple[bool, str]:
        candidates = [self._settings.theme_id, self._settings.theme_last_known_good_id]
        if self._settings.follow_editor_theme:
            editor_theme = self._editor_theme_id()
            if editor_theme:
                candidates.append(editor_theme)
        seen: set[str] = set()

        for candidate in candidates:
            if not candidate or candidate == DEFAULT_THEME_ID or candidate in seen:
                continue
            seen.add(candidate)
            ok, message = self.apply_theme(candidate, persist=True)
            if ok:
                return True, message

        self._activate(default_resolved_theme())
        self._settings.theme_id = DEFAULT_THEME_ID
        self._settings.theme_last_known_good_id = DEFAULT_THEME_ID
        self.theme_changed.emit(DEFAULT_THEME_ID)
        return False, "No valid theme found; reverted to built-in default palette."

    def _activate(self, resolved: ResolvedTheme) -> None:
        self._app.setStyleSheet(compile_qt_stylesheet(resolved.palette))
        apply_palette(self._app, resolved.palette)
        if self._highlight_register is not None:
            register_highlight_theme(
                resolved.source,
                resolved.meta.id,
                self._highlight_cache,
                self._highlight_register,
            )
        self._active_theme = resolved

    def _editor_theme_id(self) -> str | None:
        install = self._editor_install()
        if install is None:
            return None
        label = current_theme_label(install)
        if label is None:
            return None
        meta = self._registry.find_by_label(label)
        return meta.id if meta is not None else None
