"""Accumulates diagnostics for one template and returns them in source order."""

from __future__ import annotations

from templatelint.models.diagnostics import Diagnostic, DiagnosticCode
from templatelint.scanner.positions import LineIndex


class DiagnosticCollector:
    def __init__(self, content: str, file_name: str) -> None:
        self._file_name = file_name
        self._lines = LineIndex(content)
        self._diagnostics: list[Diagnostic] = []

    def locate(self, offset: int) -> tuple[int, int]:
        return self._lines.locate(offset)

    def add(
        self,
        code: DiagnosticCode,
        message: str,
        offset: int,
        hint: str | None = None,
    ) -> Diagnostic:
        line, column = self._lines.locate(offset)
        diagnostic = Diagnostic(
            code=code,
            message=message,
            file_name=self._file_name,
            line=line,
            column=column,
            hint=hint or None,
        )
        self._diagnostics.append(diagnostic)
        return diagnostic

    def __len__(self) -> int:
        return len(self._diagnostics)

    def sorted(self) -> list[Diagnostic]:
        """Diagnostics ordered by (line, column); ties keep insertion order."""
        return sorted(self._diagnostics, key=lambda d: (d.line, d.column))
