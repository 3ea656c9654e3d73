"""Theme discovery and registry."""

from __future__ import annotations

import logging
from pathlib import Path

from themeport.errors import ErrorCode
from themeport.themes.discovery import discover_extension_themes
from themeport.themes.loader import YAML_SUFFIXES, load_theme_file
from themeport.themes.models import ParseResult, Parsed, Rejected, ThemeMeta

logger = logging.getLogger(__name__)

_MAX_THEME_FILE_CANDIDATES = 512
_USER_THEME_SUFFIXES = frozenset({".json"}) | YAML_SUFFIXES
USER_EXTENSION_ID = "user"


class ThemeRegistry:
    """Collects themes from editor extensions and the user theme directory."""

    def __init__(self, extensions_root: Path | None, user_root: Path) -> None:
        self._extensions_root = extensions_root
        self._user_root = user_root
        self._themes: dict[str, ThemeMeta] = {}
        self._load_errors: list[str] = []

    def reload(self) -> None:
        self._themes = {}
        self._load_errors = []
        self._load_extensions()
        self._load_user_files()
        for message in self._load_errors:
            logger.warning("theme registry: %s", message)

    def list_themes(self) -> list[ThemeMeta]:
        return sorted(self._themes.values(), key=lambda meta: meta.label.lower())

    def get_theme(self, theme_id: str) -> ThemeMeta | None:
        return self._themes.get(theme_id)

    def find_by_label(self, label: str) -> ThemeMeta | None:
        for meta in self._themes.values():
            if meta.label == label:
                return meta
        return None

    def load(self, theme_id: str) -> ParseResult:
        meta = self._themes.get(theme_id)
        if meta is None:
            return Rejected(f"Theme not found: {theme_id}", code=ErrorCode.THEME_NOT_FOUND)
        return load_theme_file(meta.path)

    def load_errors(self) -> list[str]:
        return list(self._load_errors)

    def _load_extensions(self) -> None:
        root = self._extensions_root
        if root is None or not root.is_dir():
            return
        themes, errors = discover_extension_themes(root)
        self._load_errors.extend(errors)
        for meta in themes:
            self._themes[meta.id] = meta

    def _load_user_files(self) -> None:
        root = self._user_root
        if not root.exists():
            return
        try:
            all_files = sorted(
                path
                for path in root.iterdir()
                if path.is_file() and path.suffix.lower() in _USER_THEME_SUFFIXES
            )
        except OSError as exc:
            self._load_errors.append(f"Failed to list themes in {root}: {exc}")
            return

        candidates: list[Path] = []
        for path in all_files:
            if path.is_symlink():
                self._load_errors.append(f"Skipping symlink theme file: {path}")
                continue
            candidates.append(path)
        if len(candidates) > _MAX_THEME_FILE_CANDIDATES:
            self._load_errors.append(
                f"Theme file limit exceeded in {root}; "
                f"only first {_MAX_THEME_FILE_CANDIDATES} files were scanned."
            )
            candidates = candidates[:_MAX_THEME_FILE_CANDIDATES]

        for path in candidates:
            result = load_theme_file(path)
            if not isinstance(result, Parsed):
                self._load_errors.append(result.reason)
                continue

            theme = result.theme
            existing = self.find_by_label(theme.name)
            if existing is not None and existing.extension_id != USER_EXTENSION_ID:
                self._load_errors.append(
                    f"User theme {theme.name!r} overrides extension theme {existing.id!r}."
                )
                theme_id = existing.id
            else:
                theme_id = f"{USER_EXTENSION_ID}/{path.stem}"
            self._themes[theme_id] = ThemeMeta(
                id=theme_id,
                label=theme.name,
                kind=theme.kind,
                path=path,
                extension_id=USER_EXTENSION_ID,
                extension_name="User themes",
            )
