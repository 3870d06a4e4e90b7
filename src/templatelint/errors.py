"""Exceptions raised by templatelint."""

from __future__ import annotations


class TemplateLintError(Exception):
    """Base class for templatelint failures."""


class UnrecognizedSyntaxError(TemplateLintError):
    """Raised when the scanner meets input no lexical category accepts.

    Aborts the whole validation run; diagnostics gathered so far are dropped.
    """

    SNIPPET_LENGTH = 15

    def __init__(self, remaining: str, file_name: str, line: int, column: int) -> None:
        self.snippet = (
            remaining[: self.SNIPPET_LENGTH].replace("\n", "\\n").replace("\r", "\\r")
        )
        self.file_name = file_name
        self.line = line
        self.column = column
        super().__init__(
            f'Unknown thing "{self.snippet}"\n'
            f"Don't know how to proceed at line {line}, column {column} of file {file_name}"
        )
