"""TextMate scope matching over token rules."""

from __future__ import annotations

from themeport.themes.models import CanonicalTheme, StyleRule


def scope_matches(candidate: str, pattern: str) -> bool:
    """Return True when ``pattern`` covers ``candidate`` in the scope hierarchy.

    A rule for ``comment`` applies to ``comment.line.double-slash`` but not
    to ``commentary``.
    """
    if candidate == pattern:
        return True
    return candidate.startswith(pattern + ".")


def rules_for_scope(theme: CanonicalTheme, scope: str) -> list[StyleRule]:
    return [
        rule
        for rule in theme.rules
        if any(scope_matches(scope, pattern) for pattern in rule.scopes())
    ]


def foreground_for_scope(theme: CanonicalTheme, scope: str) -> str | None:
    for rule in rules_for_scope(theme, scope):
        if rule.settings.foreground:
            return rule.settings.foreground
    return None
