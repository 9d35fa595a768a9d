"""Go-style tag literals: quoted-string unquoting and ``key:"value"`` lookup."""

from __future__ import annotations

import re
from typing import Dict, Iterator, List, Optional, Tuple

from .errors import TagParseError

_ESCAPE = re.compile(r'\\(?:[abfnrtv\\"]|x[0-9a-fA-F]{2}|u[0-9a-fA-F]{4}|U[0-9a-fA-F]{8}|[0-7]{3})')
_SIMPLE_ESCAPES = {
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    "\\": "\\",
    '"': '"',
}


def unquote(literal: str) -> str:
    """Decode a back-quoted raw or double-quoted interpreted string literal."""
    if len(literal) < 2 or literal[0] != literal[-1]:
        raise TagParseError(literal, "not a quoted string")
    quote, body = literal[0], literal[1:-1]

    if quote == "`":
        if "`" in body:
            raise TagParseError(literal, "back quote inside raw string")
        return body.replace("\r", "")
    if quote != '"':
        raise TagParseError(literal, "not a quoted string")
    if "\n" in body:
        raise TagParseError(literal, "newline in interpreted string")

    decoded: List[str] = []
    pos = 0
    while pos < len(body):
        char = body[pos]
        if char == '"':
            raise TagParseError(literal, "unescaped quote")
        if char != "\\":
            decoded.append(char)
            pos += 1
            continue
        match = _ESCAPE.match(body, pos)
        if match is None:
            raise TagParseError(literal, f"invalid escape at offset {pos}")
        decoded.append(_decode_escape(literal, match.group(0)))
        pos = match.end()
    return "".join(decoded)


def _decode_escape(literal: str, sequence: str) -> str:
    kind = sequence[1]
    if kind in _SIMPLE_ESCAPES:
        return _SIMPLE_ESCAPES[kind]
    if kind in "xuU":
        code = int(sequence[2:], 16)
    else:
        code = int(sequence[1:], 8)
    if kind in "uU" and (0xD800 <= code <= 0xDFFF or code > 0x10FFFF):
        raise TagParseError(literal, f"invalid code point in {sequence}")
    if kind not in "uU" and code > 0xFF:
        raise TagParseError(literal, f"octal escape out of range in {sequence}")
    return chr(code)


def _iter_tag_pairs(tag: str) -> Iterator[Tuple[str, str]]:
    """Yield ``(key, quoted value)`` pairs until the first malformed entry."""
    while tag:
        tag = tag.lstrip(" ")
        if not tag:
            return
        i = 0
        while i < len(tag) and tag[i] > " " and tag[i] not in ':"\x7f':
            i += 1
        if i == 0 or i + 1 >= len(tag) or tag[i] != ":" or tag[i + 1] != '"':
            return
        name = tag[:i]
        tag = tag[i + 1 :]

        i = 1
        while i < len(tag) and tag[i] != '"':
            if tag[i] == "\\":
                i += 1
            i += 1
        if i >= len(tag):
            return
        yield name, tag[: i + 1]
        tag = tag[i + 1 :]


def lookup_tag(tag: str, key: str) -> Optional[str]:
    """Return the unquoted value stored under ``key``, or None when absent."""
    for name, quoted in _iter_tag_pairs(tag):
        if name != key:
            continue
        try:
            return unquote(quoted)
        except TagParseError:
            return None
    return None


def parse_tag(tag: str) -> Dict[str, List[str]]:
    """Return every well-formed entry of ``tag`` as ``key -> comma-separated tokens``."""
    result: Dict[str, List[str]] = {}
    for name, quoted in _iter_tag_pairs(tag):
        try:
            value = unquote(quoted)
        except TagParseError:
            break
        result.setdefault(name, value.split(","))
    return result


def has_tag_value(tag: str, key: str, value: str) -> bool:
    """True when ``value`` is one of the comma-separated tokens under ``key``."""
    return value in (lookup_tag(tag, key) or "").split(",")


__all__ = ["has_tag_value", "lookup_tag", "parse_tag", "unquote"]
