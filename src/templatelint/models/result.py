"""Outcome of one validation call: diagnostics, or a fatal failure."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from templatelint.models.diagnostics import Diagnostic


class Success(BaseModel):
    """The template was scanned; ``diagnostics`` may still be non-empty."""

    model_config = ConfigDict(frozen=True)

    status: Literal["success"] = "success"
    diagnostics: list[Diagnostic] = []

    @property
    def ok(self) -> bool:
        return True


class Fatal(BaseModel):
    """The template could not be validated at all.

    Diagnostics gathered before the failure are discarded, so a ``Fatal``
    must never be read as "no issues".
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    status: Literal["fatal"] = "fatal"
    message: str
    file_name: str = Field(alias="fileName")
    line: int
    column: int

    @property
    def ok(self) -> bool:
        return False


ValidationOutcome = Success | Fatal
