"""templatelint: static checks for component template markup."""

from templatelint.errors import TemplateLintError, UnrecognizedSyntaxError
from templatelint.models import (
    Diagnostic,
    DiagnosticCode,
    Fatal,
    Success,
    UsageOrigin,
    ValidationOptions,
    ValidationOutcome,
)
from templatelint.validator import TemplateValidator, validate_template

__version__ = "0.1.0"

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "Fatal",
    "Success",
    "TemplateLintError",
    "TemplateValidator",
    "UnrecognizedSyntaxError",
    "UsageOrigin",
    "ValidationOptions",
    "ValidationOutcome",
    "__version__",
    "validate_template",
]
