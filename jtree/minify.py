"""Strip whitespace and comments from JSON text."""

from __future__ import annotations

import re

_LEXEME_PATTERN = re.compile(
    r'"(?:\\.|[^"\\])*"?'  # string literal, kept as is
    r"|//[^\n]*"  # line comment
    r"|/\*(?:/|.*?(?:\*/|\Z))"  # block comment
    r"|[ \t\r\n]+",  # whitespace
    re.DOTALL,
)


def _keep_strings(match: re.Match) -> str:
    lexeme = match.group()
    return lexeme if lexeme.startswith('"') else ""


def minify(json: str) -> str:
    """Return ``json`` without spaces, tabs, line breaks and comments.

    String literals are left untouched. Text after a NUL character is dropped.
    """
    text = json.split("\0", 1)[0]
    return _LEXEME_PATTERN.sub(_keep_strings, text)