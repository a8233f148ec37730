"""Render a tree of Item nodes as JSON text."""

from __future__ import annotations

import math
import sys
from typing import Optional

from jtree.item import Item, ItemType

_NUMBER_LIMIT = 63
_SHORT_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


class PrintError(ValueError):
    """Raised when an item cannot be rendered, or does not fit the space given."""


def _c_string(text: str) -> str:
    """Cut ``text`` at its first NUL character."""
    return text.split("\0", 1)[0]


def _size(text: str) -> int:
    """Length of ``text`` in encoded bytes."""
    return len(text.encode("utf-8", "surrogatepass"))


def _format_number(number: float) -> str:
    if math.isnan(number) or math.isinf(number):
        return "null"
    if abs(math.floor(number) - number) <= sys.float_info.epsilon and abs(number) < 1.0e60:
        text = "%.0f" % number
    elif abs(number) < 1.0e-6 or abs(number) > 1.0e9:
        text = "%e" % number
    else:
        text = ("%f" % number).rstrip("0")
        if text.endswith("."):
            text = text[:-1]
        if not text:
            raise PrintError("number could not be rendered")
    if len(text) > _NUMBER_LIMIT:
        raise PrintError("number is too long to render")
    return text


def _escape_char(char: str) -> str:
    escaped = _SHORT_ESCAPES.get(char)
    if escaped is not None:
        return escaped
    if ord(char) < 32:
        return "\\u%04x" % ord(char)
    return char


class _Writer:
    """Accumulates output, optionally within a fixed byte budget."""

    def __init__(self, formatted: bool, limit: Optional[int] = None) -> None:
        self.formatted = formatted
        self.limit = limit
        self.parts: list[str] = []
        self.offset = 0

    def reserve(self, needed: int) -> None:
        # Room for ``needed`` bytes plus a terminator must remain.
        if self.limit is not None and self.offset + needed + 1 > self.limit:
            raise PrintError("output does not fit in the buffer")

    def emit(self, text: str) -> None:
        self.parts.append(text)
        self.offset += _size(text)

    def text(self) -> str:
        return "".join(self.parts)

    def value(self, item: Optional[Item], depth: int) -> None:
        if item is None:
            raise PrintError("no item to print")
        kind = item.type
        if kind is ItemType.NULL:
            self.reserve(5)
            self.emit("null")
        elif kind is ItemType.FALSE:
            self.reserve(6)
            self.emit("false")
        elif kind is ItemType.TRUE:
            self.reserve(5)
            self.emit("true")
        elif kind is ItemType.NUMBER:
            text = _format_number(item.value_double)
            self.reserve(_size(text))
            self.emit(text)
        elif kind is ItemType.RAW:
            if item.value_string is None:
                raise PrintError("raw item has no text")
            raw = _c_string(item.value_string)
            self.reserve(_size(raw) + 1)
            self.emit(raw)
        elif kind is ItemType.STRING:
            self.string(item.value_string)
        elif kind is ItemType.ARRAY:
            self.array(item, depth)
        elif kind is ItemType.OBJECT:
            self.object(item, depth)
        else:
            raise PrintError(f"cannot print an item of type {kind.name}")

    def string(self, text: Optional[str]) -> None:
        if text is None:
            self.reserve(3)
            self.emit('""')
            return
        body = "".join(_escape_char(char) for char in _c_string(text))
        self.reserve(_size(body) + 3)
        self.emit(f'"{body}"')

    def array(self, item: Item, depth: int) -> None:
        self.reserve(1)
        self.emit("[")
        separator = ", " if self.formatted else ","
        count = len(item.children)
        for position, child in enumerate(item.children, 1):
            self.value(child, depth + 1)
            if position < count:
                self.reserve(len(separator) + 1)
                self.emit(separator)
        self.reserve(2)
        self.emit("]")

    def object(self, item: Item, depth: int) -> None:
        formatted = self.formatted
        opening = "{\n" if formatted else "{"
        self.reserve(len(opening) + 1)
        self.emit(opening)
        colon = ":\t" if formatted else ":"
        count = len(item.children)
        for position, child in enumerate(item.children, 1):
            if formatted:
                self.reserve(depth + 1)
                self.emit("\t" * (depth + 1))
            self.string(child.key)
            self.reserve(len(colon))
            self.emit(colon)
            self.value(child, depth + 1)
            tail = ("," if position < count else "") + ("\n" if formatted else "")
            self.reserve(len(tail) + 1)
            self.emit(tail)
        if formatted:
            self.reserve(depth + 2)
            self.emit("\t" * depth + "}")
        else:
            self.reserve(2)
            self.emit("}")


def _render(item: Item, formatted: bool, limit: Optional[int] = None) -> str:
    writer = _Writer(formatted, limit)
    writer.value(item, 0)
    return writer.text()


def print_formatted(item: Item) -> str:
    """Render ``item`` with newlines and tab indentation."""
    return _render(item, True)


def print_unformatted(item: Item) -> str:
    """Render ``item`` as compact JSON text."""
    return _render(item, False)


def print_buffered(item: Item, prebuffer: int, formatted: bool = True) -> str:
    """Render ``item``; ``prebuffer`` is a size hint and must not be negative."""
    if prebuffer < 0:
        raise PrintError("buffer size must not be negative")
    return _render(item, formatted)


def print_preallocated(item: Item, length: int, formatted: bool = True) -> str:
    """Render ``item`` into at most ``length`` bytes, terminator included.

    Raises PrintError when the output does not fit.
    """
    if length < 0:
        raise PrintError("buffer size must not be negative")
    return _render(item, formatted, limit=length)