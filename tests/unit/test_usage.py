"""Tests for cross-referencing ids and classes against auxiliary sources."""

from __future__ import annotations

from templatelint.models.usage import UsageOrigin
from templatelint.validator.usage import UsageIndex
from tests.conftest import SAMPLE_AMBIENT, SAMPLE_CONTROLLER


class TestIdReferences:
    def test_controller_patterns(self) -> None:
        index = UsageIndex.from_sources(
            controller_source="$('#main'); document.getElementById(\"side-bar\");"
        )
        assert index.id_origin("main") is UsageOrigin.CONTROLLER
        assert index.id_origin("side-bar") is UsageOrigin.CONTROLLER

    def test_by_id_helper_only_counts_in_ambient(self) -> None:
        index = UsageIndex.from_sources(
            controller_source='by.id("from-controller")',
            ambient_source="by.id('from-ambient')",
        )
        assert index.id_origin("from-controller") is None
        assert index.id_origin("from-ambient") is UsageOrigin.AMBIENT

    def test_ambient_overwrites_controller(self) -> None:
        index = UsageIndex.from_sources(controller_source="#foo", ambient_source="#foo")
        assert index.id_origin("foo") is UsageOrigin.AMBIENT

    def test_sample_sources(self) -> None:
        index = UsageIndex.from_sources(SAMPLE_CONTROLLER, SAMPLE_AMBIENT)
        assert index.id_origin("todo-list") is UsageOrigin.CONTROLLER
        assert index.id_origin("legacy_Panel") is UsageOrigin.AMBIENT

    def test_label_reference_overwrites(self) -> None:
        index = UsageIndex.from_sources(ambient_source="#email")
        index.mark_label_reference("email")
        assert index.id_origin("email") is UsageOrigin.LABEL


class TestClassReferences:
    def test_class_selectors(self) -> None:
        index = UsageIndex.from_sources(
            controller_source="el.querySelector('.menu-item')",
            ambient_source="$('.menu-item, .toast')",
        )
        assert index.class_origin("menu-item") is UsageOrigin.AMBIENT
        assert index.class_origin("toast") is UsageOrigin.AMBIENT
        assert index.class_origin("querySelector") is UsageOrigin.CONTROLLER
        assert index.class_origin("missing") is None

    def test_empty_sources(self) -> None:
        index = UsageIndex.from_sources()
        assert index.ids == {}
        assert index.classes == {}


class TestDeferredIdChecks:
    def test_unresolved_ids_are_reported(self) -> None:
        index = UsageIndex.from_sources()
        index.defer_id_check("first", 5)
        index.defer_id_check("second", 30)
        index.mark_label_reference("second")
        unused = list(index.unused_deferred_ids())
        assert [(c.id, c.offset) for c in unused] == [("first", 5)]
