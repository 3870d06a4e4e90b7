"""Structured diagnostic records with template source positions."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class DiagnosticCode(StrEnum):
    BARE_AMPERSAND = "bare_ampersand"
    UNQUOTED_EXPRESSION = "unquoted_expression"
    DUPLICATE_ID = "duplicate_id"
    UNUSED_ID = "unused_id"
    UNUSED_CLASS = "unused_class"
    NAMING_CONVENTION = "naming_convention"
    SELF_CLOSING_SLASH = "self_closing_slash"
    UNEXPECTED_CLOSING_TAG = "unexpected_closing_tag"
    MISMATCHED_CLOSING_TAG = "mismatched_closing_tag"
    UNCLOSED_TAG = "unclosed_tag"
    COMMENT_OPENER = "comment_opener"
    COMMENT_CLOSER = "comment_closer"
    NESTED_COMMENT_OPENER = "nested_comment_opener"
    COMMENT_CLOSER_IN_CLOSING_TAG = "comment_closer_in_closing_tag"


class Diagnostic(BaseModel):
    """A single finding in a template, positioned at a 1-based line and column."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    code: DiagnosticCode
    message: str
    file_name: str = Field(alias="fileName")
    line: int = Field(ge=1)
    column: int = Field(ge=1)
    hint: str | None = None

    @property
    def position(self) -> tuple[int, int]:
        return self.line, self.column

    def format(self) -> str:
        """Render as ``file:line:column: message`` with an optional hint line."""
        text = f"{self.file_name}:{self.line}:{self.column}: {self.message}"
        if self.hint:
            text += f"\n    hint: {self.hint}"
        return text
