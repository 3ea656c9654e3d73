"""Tests for persisted application settings."""

from __future__ import annotations

from pathlib import Path

from PySide6.QtCore import QSettings

from themeport.config.settings import AppSettings
from themeport.themes.constants import DEFAULT_SELECTOR, DEFAULT_THEME_ID


def _qsettings(tmp_path: Path) -> QSettings:
    return QSettings(str(tmp_path / "themeport.ini"), QSettings.Format.IniFormat)


def _settings(tmp_path: Path, qs: QSettings | None = None) -> AppSettings:
    return AppSettings(qs if qs is not None else _qsettings(tmp_path), app_data_dir=tmp_path / "data")


def test_defaults(tmp_path: Path) -> None:
    settings = _settings(tmp_path)
    assert settings.theme_id == DEFAULT_THEME_ID
    assert settings.theme_last_known_good_id == DEFAULT_THEME_ID
    assert settings.follow_editor_theme is True
    assert settings.stylesheet_selector == DEFAULT_SELECTOR
    assert settings.extensions_dir_override == ""


def test_values_round_trip_through_qsettings(tmp_path: Path) -> None:
    qs = _qsettings(tmp_path)
    settings = _settings(tmp_path, qs)
    settings.theme_id = "  acme.night/Night "
    settings.follow_editor_theme = False
    settings.stylesheet_selector = ".app"
    settings.extensions_dir_override = str(tmp_path / "ext")
    qs.sync()

    reopened = _settings(tmp_path)
    assert reopened.theme_id == "acme.night/Night"
    assert reopened.follow_editor_theme is False
    assert reopened.stylesheet_selector == ".app"
    assert reopened.extensions_dir_override == str(tmp_path / "ext")


def test_blank_values_fall_back_to_defaults(tmp_path: Path) -> None:
    settings = _settings(tmp_path)
    settings.theme_id = "   "
    settings.stylesheet_selector = ""
    assert settings.theme_id == DEFAULT_THEME_ID
    assert settings.stylesheet_selector == DEFAULT_SELECTOR


def test_data_directories_are_created(tmp_path: Path) -> None:
    settings = _settings(tmp_path)
    assert settings.app_data_dir == tmp_path / "data"
    assert settings.themes_dir.is_dir()
    assert settings.logs_dir == tmp_path / "data" / "logs"
    assert settings.logs_dir.is_dir()
