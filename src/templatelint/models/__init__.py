"""Pydantic domain models for templatelint."""

from templatelint.models.diagnostics import Diagnostic, DiagnosticCode
from templatelint.models.options import ValidationOptions
from templatelint.models.result import Fatal, Success, ValidationOutcome
from templatelint.models.usage import UsageOrigin

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "Fatal",
    "Success",
    "UsageOrigin",
    "ValidationOptions",
    "ValidationOutcome",
]
