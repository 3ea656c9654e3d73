"""Theme document parsing.

Every entry point returns a ParseResult. Malformed text, schema violations
and unreadable files all come back as ``Rejected`` with a single reason
string; nothing here raises for bad theme content.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Literal

import yaml

from themeport.errors import ErrorCode, ThemePortError, classify_exception
from themeport.themes.models import ParseResult, Parsed, Rejected
from themeport.themes.normalizer import normalize_theme_document
from themeport.themes.validator import validate_theme_document

ThemeSyntax = Literal["json", "yaml"]

MAX_THEME_BYTES = 2 * 1024 * 1024
YAML_SUFFIXES = frozenset({".yaml", ".yml"})


def parse_theme_text(text: str, *, syntax: ThemeSyntax = "json") -> ParseResult:
    """Deserialize theme text and parse the resulting document."""
    if syntax == "yaml":
        try:
            data = yaml.safe_load(text)
        except (yaml.YAMLError, ValueError, RecursionError) as exc:
            return Rejected(f"Invalid YAML: {exc}", code=ErrorCode.MALFORMED_SYNTAX)
    else:
        # oversized integer literals raise ValueError, deep nesting RecursionError
        try:
            data = decode_jsonc(text)
        except (ValueError, RecursionError) as exc:
            return Rejected(f"Invalid JSON: {exc}", code=ErrorCode.MALFORMED_SYNTAX)
    return parse_theme_document(data)


def parse_theme_document(data: object) -> ParseResult:
    """Validate and normalize an already-deserialized theme document."""
    validation = validate_theme_document(data)
    if not validation.valid:
        return Rejected(
            "; ".join(validation.errors),
            code=ErrorCode.SCHEMA_VIOLATION,
            errors=validation.errors,
        )
    return Parsed(normalize_theme_document(data))


def load_theme_file(path: Path) -> ParseResult:
    """Read and parse a theme file, picking YAML or JSON by suffix."""
    try:
        text = read_text_limited(path, max_bytes=MAX_THEME_BYTES)
    except ThemePortError as exc:
        return Rejected(f"{path.name}: {exc.message}", code=exc.code, path=path)

    syntax: ThemeSyntax = "yaml" if path.suffix.lower() in YAML_SUFFIXES else "json"
    result = parse_theme_text(text, syntax=syntax)
    if isinstance(result, Rejected):
        return Rejected(
            f"{path.name}: {result.reason}",
            code=result.code,
            errors=result.errors,
            path=path,
        )
    return result


def decode_jsonc(text: str) -> object:
    """Decode JSON with comments, rejecting the NaN and Infinity literals."""
    return json.loads(strip_json_comments(text), parse_constant=_reject_constant)


def _reject_constant(name: str) -> object:
    raise ValueError(f"invalid JSON literal {name}")


def read_text_limited(path: Path, *, max_bytes: int) -> str:
    try:
        size = path.stat().st_size
    except OSError as exc:
        raise classify_exception(exc, path) from exc
    if size > max_bytes:
        raise ThemePortError(
            ErrorCode.FILE_TOO_LARGE,
            message=f"file exceeds max size ({max_bytes} bytes)",
            path=path,
        )
    try:
        return path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        raise classify_exception(exc, path) from exc


def strip_json_comments(text: str) -> str:
    """Remove ``//`` and ``/* */`` comments outside of JSON string literals.

    Line comments keep their terminating newline so that decode errors still
    report the right line number.
    """
    out: list[str] = []
    index = 0
    length = len(text)
    in_string = False

    while index < length:
        char = text[index]
        if in_string:
            out.append(char)
            if char == "\\" and index + 1 < length:
                out.append(text[index + 1])
                index += 2
                continue
            if char == '"':
                in_string = False
            index += 1
            continue

        if char == '"':
            in_string = True
            out.append(char)
            index += 1
            continue

        pair = text[index:index + 2]
        if pair == "//":
            end = text.find("\n", index)
            index = length if end == -1 else end
            continue
        if pair == "/*":
            end = text.find("*/", index + 2)
            index = length if end == -1 else end + 2
            continue

        out.append(char)
        index += 1

    return "".join(out)
