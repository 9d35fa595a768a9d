"""Doc-comment to markup conversion."""

from __future__ import annotations

from markupsafe import Markup, escape

PRE_OPEN = Markup("<pre>\n\n")
PRE_CLOSE = Markup("</pre>\n")


def format_text(text: str) -> Markup:
    """Escape ``text`` line by line, wrapping indented runs in ``<pre>`` blocks.

    An indented line opens a block, the next non-empty unindented line closes
    it. Blank lines never change state, so a block may span paragraphs.
    """
    parts = []
    preformatted = False
    for line in text.split("\n"):
        indent = _starts_with_space(line)
        if indent and not preformatted:
            parts.append(PRE_OPEN)
            preformatted = True
        elif not indent and line and preformatted:
            parts.append(PRE_CLOSE)
            preformatted = False
        parts.append(escape(line) + Markup("\n"))
    if preformatted:
        parts.append(PRE_CLOSE)
    return Markup("").join(parts)


# str.isspace also accepts the ASCII information separators
_NOT_SPACE = frozenset("\x1c\x1d\x1e\x1f")


def _starts_with_space(line: str) -> bool:
    first = line[:1]
    return first.isspace() and first not in _NOT_SPACE


__all__ = ["PRE_CLOSE", "PRE_OPEN", "format_text"]
