"""Stack machine matching closing tags to their opening tags.

A closing tag that does not match the innermost open tag discards open
tags one at a time, reporting each, until it finds its partner or the
stack runs out.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from templatelint.models.diagnostics import DiagnosticCode
from templatelint.scanner.tags import ClosingTag
from templatelint.validator.collector import DiagnosticCollector

VOID_ELEMENTS = frozenset({"br", "hr", "input", "img", "link", "meta"})


@dataclass(frozen=True)
class TagFrame:
    expected_tag_name: str
    line: int
    column: int

    @property
    def hint(self) -> str:
        return (
            f"Mismatched opening <{self.expected_tag_name}> "
            f"at line {self.line}, column {self.column}"
        )


@dataclass
class TagBalanceTracker:
    collector: DiagnosticCollector
    stack: list[TagFrame] = field(default_factory=list)

    def open(self, tag_name: str, offset: int) -> None:
        if tag_name in VOID_ELEMENTS:
            return
        line, column = self.collector.locate(offset)
        self.stack.append(TagFrame(tag_name, line, column))

    def close(self, tag: ClosingTag) -> bool:
        """Match ``tag`` against the stack.

        Returns False when a comment closer is fused into the closing tag;
        scanning must stop there.
        """
        if tag.comment_closer:
            self.collector.add(
                DiagnosticCode.COMMENT_CLOSER_IN_CLOSING_TAG,
                f"Mismatched HTML comment closer in closing tag (</{tag.name} -->)",
                tag.end - 3,
            )
            return False

        if not self.stack:
            self._report_unopened(tag)
            return True

        frame = self.stack.pop()
        while frame.expected_tag_name != tag.name:
            self.collector.add(
                DiagnosticCode.MISMATCHED_CLOSING_TAG,
                f"Got </{tag.name}> before the expected </{frame.expected_tag_name}>",
                tag.start,
                hint=frame.hint,
            )
            if not self.stack:
                self._report_unopened(tag)
                break
            frame = self.stack.pop()
        return True

    def drain(self, end_offset: int) -> None:
        """Report every tag still open at the end of the document."""
        while self.stack:
            frame = self.stack.pop()
            self.collector.add(
                DiagnosticCode.UNCLOSED_TAG,
                f"Got end of template before the expected </{frame.expected_tag_name}>",
                end_offset,
                hint=frame.hint,
            )

    def _report_unopened(self, tag: ClosingTag) -> None:
        self.collector.add(
            DiagnosticCode.UNEXPECTED_CLOSING_TAG,
            f"Got </{tag.name}> without <{tag.name}>",
            tag.start,
        )
