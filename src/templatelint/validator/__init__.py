"""Template validation: scanning loop, tag balance, usage cross-referencing."""

from templatelint.validator.balance import VOID_ELEMENTS, TagBalanceTracker, TagFrame
from templatelint.validator.collector import DiagnosticCollector
from templatelint.validator.engine import TemplateValidator, validate_template
from templatelint.validator.usage import UsageIndex

__all__ = [
    "VOID_ELEMENTS",
    "DiagnosticCollector",
    "TagBalanceTracker",
    "TagFrame",
    "TemplateValidator",
    "UsageIndex",
    "validate_template",
]
