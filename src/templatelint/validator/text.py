"""Checks plain text runs between tags."""

from __future__ import annotations

import re

from templatelint.models.diagnostics import DiagnosticCode
from templatelint.validator.collector import DiagnosticCollector

_BARE_AMPERSAND_RE = re.compile(r"&(?!amp;)")


def check_text(collector: DiagnosticCollector, content: str, start: int, end: int) -> None:
    for match in _BARE_AMPERSAND_RE.finditer(content, start, end):
        collector.add(
            DiagnosticCode.BARE_AMPERSAND,
            "Got bare ampersand ('&') in text",
            match.start(),
            hint="Need to escape ampersands as '&amp;'",
        )
