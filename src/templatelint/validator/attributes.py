"""Validates an opening tag's attributes and feeds the tag-balance stack."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from templatelint.models.diagnostics import DiagnosticCode
from templatelint.models.usage import UsageOrigin
from templatelint.scanner.tags import Attribute, OpeningTag, ValueStyle
from templatelint.validator.balance import TagBalanceTracker
from templatelint.validator.collector import DiagnosticCollector
from templatelint.validator.naming import check_naming
from templatelint.validator.usage import UsageIndex

logger = logging.getLogger("templatelint.validator")

_INTERPOLATION_MARKER = "{{"


@dataclass
class FirstOccurrences:
    """First ``(line, column)`` of each id or class name in the document."""

    positions: dict[str, tuple[int, int]] = field(default_factory=dict)

    def __contains__(self, name: str) -> bool:
        return name in self.positions

    def record(self, name: str, position: tuple[int, int]) -> None:
        self.positions.setdefault(name, position)

    def get(self, name: str) -> tuple[int, int]:
        return self.positions[name]


class TagAnalyzer:
    def __init__(
        self,
        collector: DiagnosticCollector,
        usage: UsageIndex,
        balance: TagBalanceTracker,
    ) -> None:
        self._collector = collector
        self._usage = usage
        self._balance = balance
        self._seen_ids = FirstOccurrences()
        self._seen_classes = FirstOccurrences()

    def analyze(self, tag: OpeningTag) -> None:
        self._balance.open(tag.name, tag.start)

        for attribute in tag.attributes:
            if attribute.style is ValueStyle.DOUBLE_CURLY:
                self._collector.add(
                    DiagnosticCode.UNQUOTED_EXPRESSION,
                    f"Unquoted template expression in attribute value: {{{{{attribute.value}}}}}",
                    attribute.start + len(attribute.name) + 1,
                )
            elif attribute.name == "id":
                self._check_id(attribute)
            elif tag.name == "label" and attribute.name == "for":
                self._usage.mark_label_reference(attribute.value)
            elif attribute.name == "class" and _INTERPOLATION_MARKER not in attribute.value:
                self._check_classes(attribute)

        if tag.slash_offset is not None:
            self._collector.add(
                DiagnosticCode.SELF_CLOSING_SLASH,
                f"XHTML-style self-closing slash at the end of <{tag.name}> element tag",
                tag.slash_offset,
                hint=(
                    "The slash has no meaning here: void elements never take a closing tag "
                    "and other elements still need one"
                ),
            )

    def _check_id(self, attribute: Attribute) -> None:
        element_id = attribute.value
        if element_id in self._seen_ids:
            line, column = self._seen_ids.get(element_id)
            self._collector.add(
                DiagnosticCode.DUPLICATE_ID,
                f"Duplicate ID '{element_id}'",
                attribute.start,
                hint=f"First occurrence at line {line}, column {column}",
            )
            return

        self._seen_ids.record(element_id, self._collector.locate(attribute.start))
        origin = self._usage.id_origin(element_id)
        if origin is None:
            # A later <label for=...> may still reference it.
            self._usage.defer_id_check(element_id, attribute.start)
        if origin is not UsageOrigin.AMBIENT:
            check_naming(self._collector, element_id, "ID", attribute.start)

    def _check_classes(self, attribute: Attribute) -> None:
        for class_name in attribute.value.split():
            if class_name in self._seen_classes:
                continue
            self._seen_classes.record(class_name, self._collector.locate(attribute.start))
            origin = self._usage.class_origin(class_name)
            if origin is None:
                logger.debug("class %r has no reference in auxiliary sources", class_name)
                self._collector.add(
                    DiagnosticCode.UNUSED_CLASS,
                    f"Unused class '{class_name}'",
                    attribute.start,
                )
            if origin is not UsageOrigin.AMBIENT:
                check_naming(self._collector, class_name, "class", attribute.start)
