"""Tests for the lowercase-hyphen naming guidelines."""

from __future__ import annotations

import pytest

from templatelint.models.diagnostics import DiagnosticCode
from templatelint.validator.collector import DiagnosticCollector
from templatelint.validator.naming import check_naming, conforms, suggest_name


class TestConforms:
    @pytest.mark.parametrize("name", ["nav", "nav-bar", "h1-title-2", "404"])
    def test_conforming(self, name: str) -> None:
        assert conforms(name)

    @pytest.mark.parametrize(
        "name", ["", "navBar", "nav_bar", "nav--bar", "-nav", "nav-", "Nav", "naïve"]
    )
    def test_not_conforming(self, name: str) -> None:
        assert not conforms(name)


class TestSuggestName:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("userName", "user-name"),
            ("UserName", "user-name"),
            ("user_name", "user-name"),
            ("My_Big_Thing", "my-big-thing"),
            ("getHTML", "get-h-t-m-l"),
            ("already-fine", "already-fine"),
        ],
    )
    def test_kebab_case(self, name: str, expected: str) -> None:
        assert suggest_name(name) == expected


class TestCheckNaming:
    def test_reports_with_hint(self) -> None:
        collector = DiagnosticCollector("<div id=\"userName\">", "t.html")
        check_naming(collector, "userName", "ID", 5)
        [diagnostic] = collector.sorted()
        assert diagnostic.code is DiagnosticCode.NAMING_CONVENTION
        assert diagnostic.message == (
            "The ID 'userName' does not conform to naming guidelines (all-lowercase, hyphens)"
        )
        assert diagnostic.hint == "Suggest writing it as 'user-name' instead"
        assert diagnostic.position == (1, 6)

    def test_conforming_name_is_silent(self) -> None:
        collector = DiagnosticCollector("", "t.html")
        check_naming(collector, "user-name", "class", 0)
        assert len(collector) == 0
