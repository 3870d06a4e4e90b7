"""Classifies the lexical unit at a cursor position.

Categories are tried in a fixed priority order and the first match wins:

1. skipped units: directives (``<!doctype html>``), comments, ``{{ }}`` interpolations
2. text runs
3. opening tags
4. closing tags
5. broken comment syntax: unterminated opener, stray closer, nested opener

Anything else is unrecognized and ``classify`` returns None.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

from templatelint.scanner.tags import ClosingTag, OpeningTag, scan_closing_tag, scan_opening_tag

_DIRECTIVE_RE = re.compile(r"<![A-Za-z0-9_]+\s[^>]*>")
_COMMENT_RE = re.compile(r"<!--(?:(?!-->)(?!<!--).)*-->", re.DOTALL)
_INTERPOLATION_RE = re.compile(r"\{\{(?:(?!\}\}).)*\}\}", re.DOTALL)
_TEXT_RE = re.compile(r"(?:(?!<)(?!\{\{)(?!-->).)+", re.DOTALL)
_UNTERMINATED_COMMENT_RE = re.compile(r"<!--(?:(?!-->).)*\Z", re.DOTALL)
_NESTED_COMMENT_OPENER_RE = re.compile(r"<!--(?:(?!-->)(?!<!--).)*<!--", re.DOTALL)

COMMENT_OPENER = "<!--"
COMMENT_CLOSER = "-->"


class TokenKind(StrEnum):
    SKIP = "skip"
    TEXT = "text"
    OPENING_TAG = "opening_tag"
    CLOSING_TAG = "closing_tag"
    UNTERMINATED_COMMENT = "unterminated_comment"
    STRAY_COMMENT_CLOSER = "stray_comment_closer"
    NESTED_COMMENT_OPENER = "nested_comment_opener"


@dataclass(frozen=True)
class Token:
    """A classified span ``[start, end)`` of the template text."""

    kind: TokenKind
    start: int
    end: int
    tag: OpeningTag | ClosingTag | None = None


def classify(content: str, pos: int) -> Token | None:
    """Return the token starting at ``pos``, or None if nothing matches."""
    for pattern in (_DIRECTIVE_RE, _COMMENT_RE, _INTERPOLATION_RE):
        match = pattern.match(content, pos)
        if match:
            return Token(TokenKind.SKIP, pos, match.end())

    match = _TEXT_RE.match(content, pos)
    if match:
        return Token(TokenKind.TEXT, pos, match.end())

    opening = scan_opening_tag(content, pos)
    if opening is not None:
        return Token(TokenKind.OPENING_TAG, pos, opening.end, opening)

    closing = scan_closing_tag(content, pos)
    if closing is not None:
        return Token(TokenKind.CLOSING_TAG, pos, closing.end, closing)

    match = _UNTERMINATED_COMMENT_RE.match(content, pos)
    if match:
        return Token(TokenKind.UNTERMINATED_COMMENT, pos, match.end())

    if content.startswith(COMMENT_CLOSER, pos):
        return Token(TokenKind.STRAY_COMMENT_CLOSER, pos, pos + len(COMMENT_CLOSER))

    match = _NESTED_COMMENT_OPENER_RE.match(content, pos)
    if match:
        return Token(TokenKind.NESTED_COMMENT_OPENER, pos, match.end())

    return None
