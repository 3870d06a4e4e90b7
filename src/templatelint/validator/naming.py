"""Naming guidelines for ids and class names: lowercase words joined by hyphens."""

from __future__ import annotations

import re

from templatelint.models.diagnostics import DiagnosticCode
from templatelint.validator.collector import DiagnosticCollector

_CONFORMING_NAME_RE = re.compile(r"[a-z\d]+(?:-[a-z\d]+)*", re.ASCII)
_LEADING_UPPER_RE = re.compile(r"^[A-Z]")
_HYPHEN_UPPER_RE = re.compile(r"-[A-Z]")
_UPPER_RE = re.compile(r"[A-Z]")


def conforms(name: str) -> bool:
    return _CONFORMING_NAME_RE.fullmatch(name) is not None


def suggest_name(name: str) -> str:
    """Convert camelCase, PascalCase or snake_case to kebab-case.

    >>> suggest_name("userName_field")
    'user-name-field'
    """
    suggestion = name.replace("_", "-")
    suggestion = _LEADING_UPPER_RE.sub(lambda m: m.group().lower(), suggestion)
    suggestion = _HYPHEN_UPPER_RE.sub(lambda m: m.group().lower(), suggestion)
    return _UPPER_RE.sub(lambda m: "-" + m.group().lower(), suggestion)


def check_naming(collector: DiagnosticCollector, name: str, kind: str, offset: int) -> None:
    """Report ``name`` at ``offset`` unless it follows the guidelines."""
    if conforms(name):
        return
    collector.add(
        DiagnosticCode.NAMING_CONVENTION,
        f"The {kind} '{name}' does not conform to naming guidelines (all-lowercase, hyphens)",
        offset,
        hint=f"Suggest writing it as '{suggest_name(name)}' instead",
    )
