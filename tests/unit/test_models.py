"""Tests for Pydantic domain models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from templatelint.models.diagnostics import Diagnostic, DiagnosticCode
from templatelint.models.options import ValidationOptions
from templatelint.models.result import Fatal, Success
from templatelint.models.usage import UsageOrigin


class TestEnums:
    def test_usage_origin_values(self) -> None:
        assert UsageOrigin.CONTROLLER == "controller"
        assert UsageOrigin.AMBIENT == "ambient"
        assert UsageOrigin.LABEL == "label"

    def test_diagnostic_code_values(self) -> None:
        assert DiagnosticCode.DUPLICATE_ID == "duplicate_id"
        assert DiagnosticCode.UNCLOSED_TAG == "unclosed_tag"


class TestDiagnostic:
    def test_populate_by_alias(self) -> None:
        d = Diagnostic(
            code=DiagnosticCode.UNUSED_ID,
            message="Unused ID 'a'",
            fileName="t.html",
            line=1,
            column=6,
        )
        assert d.file_name == "t.html"
        assert d.hint is None
        assert d.position == (1, 6)

    def test_dump_uses_camel_case_file_name(self) -> None:
        d = Diagnostic(
            code=DiagnosticCode.UNUSED_ID,
            message="Unused ID 'a'",
            file_name="t.html",
            line=1,
            column=6,
        )
        dumped = d.model_dump(mode="json", by_alias=True)
        assert dumped["fileName"] == "t.html"
        assert dumped["code"] == "unused_id"

    def test_is_immutable(self) -> None:
        d = Diagnostic(
            code=DiagnosticCode.UNUSED_ID, message="m", file_name="f", line=1, column=1
        )
        with pytest.raises(ValidationError):
            d.line = 2  # type: ignore[misc]

    def test_rejects_zero_line(self) -> None:
        with pytest.raises(ValidationError):
            Diagnostic(code=DiagnosticCode.UNUSED_ID, message="m", file_name="f", line=0, column=1)

    def test_format_with_hint(self) -> None:
        d = Diagnostic(
            code=DiagnosticCode.DUPLICATE_ID,
            message="Duplicate ID 'a'",
            file_name="t.html",
            line=3,
            column=9,
            hint="First occurrence at line 1, column 6",
        )
        assert d.format() == (
            "t.html:3:9: Duplicate ID 'a'\n    hint: First occurrence at line 1, column 6"
        )


class TestValidationOptions:
    def test_defaults_are_empty(self) -> None:
        options = ValidationOptions()
        assert options.controller_source == ""
        assert options.ambient_source == ""

    def test_camel_case_aliases(self) -> None:
        options = ValidationOptions(controllerSource="#a", ambientSource="#b")
        assert options.controller_source == "#a"
        assert options.ambient_source == "#b"


class TestOutcomes:
    def test_success_is_ok(self) -> None:
        assert Success().ok
        assert Success().diagnostics == []

    def test_fatal_is_not_ok(self) -> None:
        fatal = Fatal(message="boom", file_name="t.html", line=2, column=1)
        assert not fatal.ok
        assert fatal.status == "fatal"
