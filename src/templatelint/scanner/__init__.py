"""Cursor-level lexing of template markup."""

from templatelint.scanner.lexer import Token, TokenKind, classify
from templatelint.scanner.positions import LineIndex
from templatelint.scanner.tags import (
    Attribute,
    ClosingTag,
    OpeningTag,
    ValueStyle,
    scan_closing_tag,
    scan_opening_tag,
)

__all__ = [
    "Attribute",
    "ClosingTag",
    "LineIndex",
    "OpeningTag",
    "Token",
    "TokenKind",
    "ValueStyle",
    "classify",
    "scan_closing_tag",
    "scan_opening_tag",
]
