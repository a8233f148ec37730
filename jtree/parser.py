"""Parse JSON text into a tree of Item nodes."""

from __future__ import annotations

import re
from typing import Optional

from jtree.item import Item, ItemType, saturate

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_NUMBER_CHARS = frozenset("0123456789+-eE.")
_NUMBER_LIMIT = 63
_DECIMAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_ESCAPES = {
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    '"': '"',
    "\\": "\\",
    "/": "/",
}


class ParseError(ValueError):
    """Raised when text is not valid JSON.

    ``position`` is the offset in the text where the problem was found, or
    None where the parser could not tell.
    """

    def __init__(self, message: str, position: Optional[int] = None) -> None:
        super().__init__(message)
        self.position = position


def parse_hex4(text: str) -> int:
    """Read four hexadecimal digits; return 0 if they are missing or invalid."""
    digits = text[:4]
    if len(digits) < 4 or any(c not in _HEX_DIGITS for c in digits):
        return 0
    return int(digits, 16)


class _Parser:
    def __init__(self, text: str) -> None:
        # Input ends at the first NUL character, as with a C string.
        self.text = text.split("\0", 1)[0]
        self.length = len(self.text)

    def skip_whitespace(self, pos: int) -> int:
        while pos < self.length and ord(self.text[pos]) <= 32:
            pos += 1
        return pos

    def char_at(self, pos: int) -> str:
        return self.text[pos] if pos < self.length else ""

    def parse_value(self, pos: int) -> tuple[Item, int]:
        text = self.text
        if text.startswith("null", pos):
            return Item(type=ItemType.NULL), pos + 4
        if text.startswith("false", pos):
            return Item(type=ItemType.FALSE), pos + 5
        if text.startswith("true", pos):
            return Item(type=ItemType.TRUE, value_int=1), pos + 4
        first = self.char_at(pos)
        if first == '"':
            value, end = self.parse_string(pos)
            return Item(type=ItemType.STRING, value_string=value), end
        if first == "-" or first.isascii() and first.isdigit():
            return self.parse_number(pos)
        if first == "[":
            return self.parse_array(pos)
        if first == "{":
            return self.parse_object(pos)
        raise ParseError("unexpected character", pos)

    def parse_number(self, pos: int) -> tuple[Item, int]:
        stop = pos
        while (
            stop < self.length
            and stop - pos < _NUMBER_LIMIT
            and self.text[stop] in _NUMBER_CHARS
        ):
            stop += 1
        match = _DECIMAL.match(self.text, pos, stop)
        if match is None:
            raise ParseError("invalid number")
        number = float(match.group())
        item = Item(type=ItemType.NUMBER, value_double=number, value_int=saturate(number))
        return item, match.end()

    def parse_string(self, pos: int) -> tuple[str, int]:
        text = self.text
        if self.char_at(pos) != '"':
            raise ParseError("expected a string", pos)

        end = pos + 1
        while end < self.length and text[end] != '"':
            if text[end] == "\\":
                if end + 1 >= self.length:
                    raise ParseError("string ends inside an escape sequence")
                end += 1
            end += 1
        if end >= self.length:
            raise ParseError("unterminated string")

        parts: list[str] = []
        cursor = pos + 1
        while cursor < end:
            backslash = text.find("\\", cursor, end)
            if backslash == -1:
                parts.append(text[cursor:end])
                break
            parts.append(text[cursor:backslash])
            marker = text[backslash + 1]
            if marker == "u":
                char, consumed = self.utf16_literal(backslash, end)
                parts.append(char)
            elif marker in _ESCAPES:
                parts.append(_ESCAPES[marker])
                consumed = 2
            else:
                raise ParseError("invalid escape sequence", backslash)
            cursor = backslash + consumed

        return "".join(parts), end + 1

    def utf16_literal(self, start: int, end: int) -> tuple[str, int]:
        text = self.text
        if end - start < 6:
            raise ParseError("truncated unicode escape", start)
        first = parse_hex4(text[start + 2 : start + 6])
        if 0xDC00 <= first <= 0xDFFF or first == 0:
            raise ParseError("invalid unicode escape", start)

        if not 0xD800 <= first <= 0xDBFF:
            return chr(first), 6

        second_start = start + 6
        if end - second_start < 6:
            raise ParseError("truncated surrogate pair", start)
        if text[second_start : second_start + 2] != "\\u":
            raise ParseError("missing second half of surrogate pair", start)
        second = parse_hex4(text[second_start + 2 : second_start + 6])
        if not 0xDC00 <= second <= 0xDFFF:
            raise ParseError("invalid second half of surrogate pair", start)
        codepoint = 0x10000 + (((first & 0x3FF) << 10) | (second & 0x3FF))
        return chr(codepoint), 12

    def parse_array(self, pos: int) -> tuple[Item, int]:
        children: list[Item] = []
        cursor = self.skip_whitespace(pos + 1)
        if self.char_at(cursor) == "]":
            return Item(type=ItemType.ARRAY), cursor + 1

        while True:
            child, cursor = self.parse_value(self.skip_whitespace(cursor))
            children.append(child)
            cursor = self.skip_whitespace(cursor)
            if self.char_at(cursor) != ",":
                break
            cursor += 1

        if self.char_at(cursor) != "]":
            raise ParseError("expected ']' at end of array", cursor)
        return Item(type=ItemType.ARRAY, children=children), cursor + 1

    def parse_object(self, pos: int) -> tuple[Item, int]:
        children: list[Item] = []
        cursor = self.skip_whitespace(pos + 1)
        if self.char_at(cursor) == "}":
            return Item(type=ItemType.OBJECT), cursor + 1

        while True:
            key, cursor = self.parse_string(self.skip_whitespace(cursor))
            cursor = self.skip_whitespace(cursor)
            if self.char_at(cursor) != ":":
                raise ParseError("expected ':' after member name", cursor)
            child, cursor = self.parse_value(self.skip_whitespace(cursor + 1))
            child.key = key
            children.append(child)
            cursor = self.skip_whitespace(cursor)
            if self.char_at(cursor) != ",":
                break
            cursor += 1

        if self.char_at(cursor) != "}":
            raise ParseError("expected '}' at end of object", cursor)
        return Item(type=ItemType.OBJECT, children=children), cursor + 1


def parse_with_opts(text: str, require_null_terminated: bool = False) -> tuple[Item, int]:
    """Parse one JSON value from ``text``.

    Returns the root item and the offset just past the value. With
    ``require_null_terminated`` anything but whitespace after the value is an
    error.
    """
    if text is None:
        raise ParseError("no input")
    parser = _Parser(text)
    item, end = parser.parse_value(parser.skip_whitespace(0))
    if require_null_terminated:
        end = parser.skip_whitespace(end)
        if end < parser.length:
            raise ParseError("unexpected text after the value", end)
    return item, end


def parse(text: str) -> Item:
    """Parse one JSON value from ``text``; trailing text is ignored."""
    item, _ = parse_with_opts(text, False)
    return item