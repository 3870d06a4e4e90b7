"""Hand-written lexer for opening and closing tags.

Opening tag grammar::

    "<" NAME ( WS+ NAME ( "='" [^']* "'" | '="' [^"]* '"' | "={{" EXPR "}}" )? )* WS* ( "/" WS* )? ">"

``NAME`` is one or more ASCII word characters or hyphens; ``EXPR`` is any run
of characters other than a line terminator that does not contain ``}}``.

Closing tag grammar::

    "</" WORD ( "-" WORD )* "--"? ">"
"""

from __future__ import annotations

import string
from dataclasses import dataclass, field
from enum import StrEnum

_WORD_CHARS = frozenset(string.ascii_letters + string.digits + "_")
_NAME_CHARS = _WORD_CHARS | {"-"}
_WHITESPACE = frozenset(" \t\n\r\f\v\u00a0\u1680\u2028\u2029\u202f\u205f\u3000\ufeff") | frozenset(
    map(chr, range(0x2000, 0x200B))
)
_LINE_TERMINATORS = frozenset("\n\r\u2028\u2029")


class ValueStyle(StrEnum):
    NONE = "none"
    SINGLE_QUOTED = "single_quoted"
    DOUBLE_QUOTED = "double_quoted"
    DOUBLE_CURLY = "double_curly"


@dataclass(frozen=True)
class Attribute:
    """One attribute of an opening tag. ``start`` is the offset of its name."""

    name: str
    value: str
    style: ValueStyle
    start: int


@dataclass(frozen=True)
class OpeningTag:
    name: str
    start: int
    end: int
    attributes: list[Attribute] = field(default_factory=list)
    slash_offset: int | None = None


@dataclass(frozen=True)
class ClosingTag:
    name: str
    start: int
    end: int
    comment_closer: bool = False


def _skip(content: str, pos: int, chars: frozenset[str]) -> int:
    while pos < len(content) and content[pos] in chars:
        pos += 1
    return pos


def _scan_value(content: str, pos: int) -> tuple[str, ValueStyle, int] | None:
    """Scan an attribute value starting at the ``=``; None if none matches."""
    if not content.startswith("=", pos):
        return None
    pos += 1
    if pos >= len(content):
        return None
    quote = content[pos]
    if quote in ("'", '"'):
        close = content.find(quote, pos + 1)
        if close == -1:
            return None
        style = ValueStyle.SINGLE_QUOTED if quote == "'" else ValueStyle.DOUBLE_QUOTED
        return content[pos + 1 : close], style, close + 1
    if content.startswith("{{", pos):
        close = content.find("}}", pos + 2)
        if close == -1 or any(char in _LINE_TERMINATORS for char in content[pos + 2 : close]):
            return None
        return content[pos + 2 : close], ValueStyle.DOUBLE_CURLY, close + 2
    return None


def scan_opening_tag(content: str, start: int) -> OpeningTag | None:
    """Lex an opening tag at ``start``, or return None when the grammar fails."""
    if not content.startswith("<", start):
        return None
    name_end = _skip(content, start + 1, _NAME_CHARS)
    if name_end == start + 1:
        return None
    tag_name = content[start + 1 : name_end]

    attributes: list[Attribute] = []
    pos = name_end
    while True:
        after_ws = _skip(content, pos, _WHITESPACE)
        attr_end = _skip(content, after_ws, _NAME_CHARS)
        if after_ws == pos or attr_end == after_ws:
            pos = after_ws
            break
        attr_name = content[after_ws:attr_end]
        scanned = _scan_value(content, attr_end)
        if scanned is None:
            attributes.append(Attribute(attr_name, "", ValueStyle.NONE, after_ws))
            pos = attr_end
        else:
            value, style, pos = scanned
            attributes.append(Attribute(attr_name, value, style, after_ws))

    slash_offset = None
    if content.startswith("/", pos):
        slash_offset = pos
        pos = _skip(content, pos + 1, _WHITESPACE)
    if not content.startswith(">", pos):
        return None
    return OpeningTag(tag_name, start, pos + 1, attributes, slash_offset)


def scan_closing_tag(content: str, start: int) -> ClosingTag | None:
    """Lex a closing tag at ``start``, or return None when the grammar fails."""
    if not content.startswith("</", start):
        return None
    pos = start + 2
    word_end = _skip(content, pos, _WORD_CHARS)
    if word_end == pos:
        return None
    pos = word_end
    while content.startswith("-", pos):
        word_end = _skip(content, pos + 1, _WORD_CHARS)
        if word_end == pos + 1:
            break
        pos = word_end
    tag_name = content[start + 2 : pos]

    comment_closer = content.startswith("--", pos)
    if comment_closer:
        pos += 2
    if not content.startswith(">", pos):
        return None
    return ClosingTag(tag_name, start, pos + 1, comment_closer)
