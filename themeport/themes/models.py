"""Theme framework models."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType

from themeport.errors import ErrorCode, ThemePortError
from themeport.themes.constants import PALETTE_SLOT_NAMES


class ThemeValidationError(ValueError):
    """Raised when code hands an unvalidated document to the normalizer."""


class ThemeKind(str, Enum):
    """Theme type discriminator as written in theme documents."""

    DARK = "dark"
    LIGHT = "light"
    HC_DARK = "hcDark"
    HC_LIGHT = "hcLight"

    @property
    def is_dark(self) -> bool:
        return self in (ThemeKind.DARK, ThemeKind.HC_DARK)

    @property
    def is_high_contrast(self) -> bool:
        return self in (ThemeKind.HC_DARK, ThemeKind.HC_LIGHT)


@dataclass(frozen=True, slots=True)
class StyleSettings:
    """Color and font style applied by a token rule."""

    foreground: str | None = None
    background: str | None = None
    font_style: str | None = None

    def is_empty(self) -> bool:
        return self.foreground is None and self.background is None and self.font_style is None


@dataclass(frozen=True, slots=True)
class StyleRule:
    """A token color rule targeting one or more scopes."""

    settings: StyleSettings
    name: str | None = None
    scope: str | tuple[str, ...] | None = None

    def scopes(self) -> tuple[str, ...]:
        if self.scope is None:
            return ()
        if isinstance(self.scope, str):
            return (self.scope,)
        return self.scope


@dataclass(frozen=True, slots=True)
class CanonicalTheme:
    """A validated, type-narrowed theme document."""

    name: str
    kind: ThemeKind
    colors: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    rules: tuple[StyleRule, ...] = ()
    semantic_highlighting: bool | None = None
    semantic_rules: Mapping[str, str | StyleSettings] | None = None
    schema_ref: str | None = None

    @property
    def is_dark(self) -> bool:
        return self.kind.is_dark


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Every structural violation found in a theme document."""

    errors: tuple[str, ...] = ()

    @property
    def valid(self) -> bool:
        return not self.errors


@dataclass(frozen=True, slots=True)
class Parsed:
    """Successful parse outcome."""

    theme: CanonicalTheme
    ok = True


@dataclass(frozen=True, slots=True)
class Rejected:
    """Failed parse outcome with a single human-readable reason."""

    reason: str
    code: ErrorCode = ErrorCode.SCHEMA_VIOLATION
    errors: tuple[str, ...] = ()
    path: Path | None = None
    ok = False

    def to_error(self) -> ThemePortError:
        return ThemePortError(
            self.code,
            message=self.reason,
            path=self.path,
            details={"errors": list(self.errors)} if len(self.errors) > 1 else {},
        )


ParseResult = Parsed | Rejected


@dataclass(frozen=True, slots=True)
class StatusPalette:
    """Semantic status indicator colors."""

    success: str
    warning: str
    error: str
    info: str
    neutral: str

    def as_dict(self) -> dict[str, str]:
        return {
            "success": self.success,
            "warning": self.warning,
            "error": self.error,
            "info": self.info,
            "neutral": self.neutral,
        }


class OutputPalette(Mapping[str, str]):
    """Read-only mapping of every application palette slot to a color."""

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, str]) -> None:
        missing = [slot for slot in PALETTE_SLOT_NAMES if not values.get(slot)]
        if missing:
            raise ValueError(f"palette is missing slots: {', '.join(missing)}")
        self._values = MappingProxyType({slot: values[slot] for slot in PALETTE_SLOT_NAMES})

    def __getitem__(self, slot: str) -> str:
        return self._values[slot]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"OutputPalette({dict(self._values)!r})"

    def css_variables(self, prefix: str = "--") -> dict[str, str]:
        return {f"{prefix}{slot}": value for slot, value in self._values.items()}


@dataclass(frozen=True, slots=True)
class EssentialColors:
    """Reduced color summary for simple consumers."""

    background: str
    foreground: str
    accent: str
    muted: str
    border: str
    selection: str


@dataclass(frozen=True, slots=True)
class ThemeMeta:
    """Identity and provenance of a discoverable theme."""

    id: str
    label: str
    kind: ThemeKind
    path: Path
    extension_id: str
    extension_name: str


@dataclass(frozen=True, slots=True)
class ResolvedTheme:
    """A theme mapped onto the application palette."""

    meta: ThemeMeta
    status_palette: StatusPalette
    palette: OutputPalette
    essentials: EssentialColors
    source: CanonicalTheme
