"""Command line entry point."""

from __future__ import annotations

import argparse
import json
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Sequence

import yaml

from themeport.config.settings import AppSettings
from themeport.errors import format_error_for_user
from themeport.themes.compiler import render_stylesheet
from themeport.themes.discovery import find_editor_install
from themeport.themes.loader import load_theme_file
from themeport.themes.mapper import resolve_palette
from themeport.themes.models import Parsed, Rejected
from themeport.themes.registry import ThemeRegistry


def _configure_logger(settings: AppSettings) -> logging.Logger:
    logger = logging.getLogger("themeport.cli")
    if logger.handlers:
        return logger

    logger.setLevel(logging.INFO)
    handler = RotatingFileHandler(
        settings.logs_dir / "themeport.log",
        maxBytes=512_000,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def _build_parser(settings: AppSettings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="themeport",
        description="Convert editor color themes into an application palette.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    validate = commands.add_parser("validate", help="check a theme file")
    validate.add_argument("file", type=Path)

    css = commands.add_parser("css", help="print the palette as CSS custom properties")
    css.add_argument("file", type=Path)
    css.add_argument("--selector", default=settings.stylesheet_selector)

    palette = commands.add_parser("palette", help="print the resolved palette")
    palette.add_argument("file", type=Path)
    palette.add_argument("--format", choices=("json", "yaml"), default="json")

    commands.add_parser("list", help="list discoverable themes")
    return parser


def _report_rejection(result: Rejected, logger: logging.Logger) -> None:
    error = result.to_error()
    logger.warning("rejected %s: %s", error.path, error.message)
    print(format_error_for_user(error))


def _list_themes(settings: AppSettings, logger: logging.Logger) -> int:
    override = settings.extensions_dir_override
    if override:
        extensions_root: Path | None = Path(override)
    else:
        install = find_editor_install()
        extensions_root = install.extensions_dir if install is not None else None

    registry = ThemeRegistry(extensions_root, settings.themes_dir)
    registry.reload()
    for message in registry.load_errors():
        logger.warning("theme load warning: %s", message)
    for meta in registry.list_themes():
        print(f"{meta.id}\t{meta.kind.value}\t{meta.label}")
    return 0


def run_cli(argv: Sequence[str] | None = None, settings: AppSettings | None = None) -> int:
    """Parse ``argv`` and run one subcommand, returning the exit status."""
    settings = settings or AppSettings()
    logger = _configure_logger(settings)
    args = _build_parser(settings).parse_args(argv)

    if args.command == "list":
        return _list_themes(settings, logger)

    result = load_theme_file(args.file)
    if not isinstance(result, Parsed):
        _report_rejection(result, logger)
        return 1

    if args.command == "validate":
        print(f"{args.file.name}: ok ({result.theme.name}, {result.theme.kind.value})")
    elif args.command == "css":
        print(render_stylesheet(resolve_palette(result.theme), args.selector))
    elif args.format == "yaml":
        print(yaml.safe_dump(dict(resolve_palette(result.theme)), sort_keys=False), end="")
    else:
        print(json.dumps(dict(resolve_palette(result.theme)), indent=2))
    return 0
