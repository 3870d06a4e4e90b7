"""Single-pass template validation: the scanning loop and its entry points."""

from __future__ import annotations

import logging

from templatelint.errors import UnrecognizedSyntaxError
from templatelint.models.diagnostics import Diagnostic, DiagnosticCode
from templatelint.models.options import ValidationOptions
from templatelint.models.result import Fatal, Success, ValidationOutcome
from templatelint.scanner.lexer import COMMENT_OPENER, Token, TokenKind, classify
from templatelint.scanner.tags import ClosingTag, OpeningTag
from templatelint.validator.attributes import TagAnalyzer
from templatelint.validator.balance import TagBalanceTracker
from templatelint.validator.collector import DiagnosticCollector
from templatelint.validator.text import check_text
from templatelint.validator.usage import UsageIndex

logger = logging.getLogger("templatelint.validator")

_TERMINAL_MESSAGES = {
    TokenKind.UNTERMINATED_COMMENT: (
        DiagnosticCode.COMMENT_OPENER,
        "Mismatched HTML comment opener (<!--)",
    ),
    TokenKind.STRAY_COMMENT_CLOSER: (
        DiagnosticCode.COMMENT_CLOSER,
        "Mismatched HTML comment closer (-->)",
    ),
    TokenKind.NESTED_COMMENT_OPENER: (
        DiagnosticCode.NESTED_COMMENT_OPENER,
        "HTML comment opener (<!--) inside HTML comment",
    ),
}


class _ValidationRun:
    """All mutable state of one validation call."""

    def __init__(self, content: str, file_name: str, options: ValidationOptions) -> None:
        self.content = content
        self.file_name = file_name
        self.collector = DiagnosticCollector(content, file_name)
        self.usage = UsageIndex.from_sources(options.controller_source, options.ambient_source)
        self.balance = TagBalanceTracker(self.collector)
        self.analyzer = TagAnalyzer(self.collector, self.usage, self.balance)

    def run(self) -> list[Diagnostic]:
        pos = 0
        while pos < len(self.content):
            token = classify(self.content, pos)
            if token is None:
                line, column = self.collector.locate(pos)
                raise UnrecognizedSyntaxError(self.content[pos:], self.file_name, line, column)
            if not self._handle(token):
                logger.info(
                    "Stopped scanning %s at offset %d (%s)", self.file_name, pos, token.kind
                )
                return self.collector.sorted()
            pos = token.end

        self.balance.drain(len(self.content))
        for check in self.usage.unused_deferred_ids():
            self.collector.add(DiagnosticCode.UNUSED_ID, f"Unused ID '{check.id}'", check.offset)
        return self.collector.sorted()

    def _handle(self, token: Token) -> bool:
        """Process one token; False means the scan must stop here."""
        if token.kind is TokenKind.SKIP:
            return True
        if token.kind is TokenKind.TEXT:
            check_text(self.collector, self.content, token.start, token.end)
            return True
        if isinstance(token.tag, OpeningTag):
            self.analyzer.analyze(token.tag)
            return True
        if isinstance(token.tag, ClosingTag):
            return self.balance.close(token.tag)

        code, message = _TERMINAL_MESSAGES[token.kind]
        offset = token.start
        if token.kind is TokenKind.NESTED_COMMENT_OPENER:
            offset = token.end - len(COMMENT_OPENER)
        self.collector.add(code, message, offset)
        return False


class TemplateValidator:
    """Validates template markup against tag balance and naming rules.

    Raises ``UnrecognizedSyntaxError`` when the markup cannot be scanned;
    use ``validate_template`` to receive that as a ``Fatal`` result instead.
    """

    def validate(
        self,
        content: str,
        file_name: str,
        options: ValidationOptions | None = None,
    ) -> list[Diagnostic]:
        logger.debug("Validating %s (%d chars)", file_name, len(content))
        diagnostics = _ValidationRun(content, file_name, options or ValidationOptions()).run()
        logger.debug("Validated %s: %d diagnostic(s)", file_name, len(diagnostics))
        return diagnostics


def validate_template(
    content: str,
    file_name: str,
    options: ValidationOptions | None = None,
) -> ValidationOutcome:
    """Validate ``content`` and return ``Success`` or ``Fatal``."""
    try:
        diagnostics = TemplateValidator().validate(content, file_name, options)
    except UnrecognizedSyntaxError as exc:
        logger.warning("Could not validate %s: %s", file_name, exc)
        return Fatal(message=str(exc), file_name=exc.file_name, line=exc.line, column=exc.column)
    return Success(diagnostics=diagnostics)
