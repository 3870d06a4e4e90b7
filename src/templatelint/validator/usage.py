"""Cross-references template ids and classes against auxiliary sources.

The controller source is scanned first, then the ambient source. Every
match overwrites the recorded origin, so a name found in both ends up
as ``AMBIENT``.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass, field

from templatelint.models.usage import UsageOrigin

_ID_SELECTOR_RE = re.compile(r"#([\w\-]+)", re.ASCII)
_GET_ELEMENT_BY_ID_RE = re.compile(r"\bgetElementById\(['\"]([\w-]+)", re.ASCII)
_BY_ID_RE = re.compile(r"\bby\.id\(['\"]([\w-]+)", re.ASCII)
_CLASS_SELECTOR_RE = re.compile(r"\.([\w\-]+)", re.ASCII)

_CONTROLLER_ID_PATTERNS = (_ID_SELECTOR_RE, _GET_ELEMENT_BY_ID_RE)
_AMBIENT_ID_PATTERNS = (_ID_SELECTOR_RE, _GET_ELEMENT_BY_ID_RE, _BY_ID_RE)


@dataclass(frozen=True)
class DeferredIdCheck:
    id: str
    offset: int


@dataclass
class UsageIndex:
    """Maps id and class names to the origin that references them."""

    ids: dict[str, UsageOrigin] = field(default_factory=dict)
    classes: dict[str, UsageOrigin] = field(default_factory=dict)
    _deferred: list[DeferredIdCheck] = field(default_factory=list)

    @classmethod
    def from_sources(cls, controller_source: str = "", ambient_source: str = "") -> UsageIndex:
        index = cls()
        for pattern in _CONTROLLER_ID_PATTERNS:
            index._record(index.ids, pattern, controller_source, UsageOrigin.CONTROLLER)
        for pattern in _AMBIENT_ID_PATTERNS:
            index._record(index.ids, pattern, ambient_source, UsageOrigin.AMBIENT)
        index._record(index.classes, _CLASS_SELECTOR_RE, controller_source, UsageOrigin.CONTROLLER)
        index._record(index.classes, _CLASS_SELECTOR_RE, ambient_source, UsageOrigin.AMBIENT)
        return index

    @staticmethod
    def _record(
        target: dict[str, UsageOrigin],
        pattern: re.Pattern[str],
        source: str,
        origin: UsageOrigin,
    ) -> None:
        for match in pattern.finditer(source or ""):
            target[match.group(1)] = origin

    def id_origin(self, name: str) -> UsageOrigin | None:
        return self.ids.get(name)

    def class_origin(self, name: str) -> UsageOrigin | None:
        return self.classes.get(name)

    def mark_label_reference(self, name: str) -> None:
        """A ``<label for=...>`` counts as a use of the id it points at."""
        self.ids[name] = UsageOrigin.LABEL

    def defer_id_check(self, name: str, offset: int) -> None:
        self._deferred.append(DeferredIdCheck(name, offset))

    def unused_deferred_ids(self) -> Iterator[DeferredIdCheck]:
        """Yield queued ids that are still unreferenced after the full scan."""
        for check in self._deferred:
            if self.id_origin(check.id) is None:
                yield check
