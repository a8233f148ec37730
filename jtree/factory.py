"""Constructors for JSON tree nodes."""

from __future__ import annotations

import struct
from typing import Iterable, Optional

from jtree.item import Item, ItemType, saturate


def create_null() -> Item:
    return Item(type=ItemType.NULL)


def create_true() -> Item:
    return Item(type=ItemType.TRUE)


def create_false() -> Item:
    return Item(type=ItemType.FALSE)


def create_bool(value: bool) -> Item:
    return Item(type=ItemType.TRUE if value else ItemType.FALSE)


def create_number(number: float) -> Item:
    """Create a number node; the integer view saturates at 32-bit limits."""
    number = float(number)
    return Item(type=ItemType.NUMBER, value_double=number, value_int=saturate(number))


def _require_text(text: Optional[str]) -> str:
    if text is None:
        raise TypeError("a string value is required, not None")
    return str(text)


def create_string(text: str) -> Item:
    return Item(type=ItemType.STRING, value_string=_require_text(text))


def create_raw(raw: str) -> Item:
    """Create a node whose text is emitted verbatim when printed."""
    return Item(type=ItemType.RAW, value_string=_require_text(raw))


def create_array() -> Item:
    return Item(type=ItemType.ARRAY)


def create_object() -> Item:
    return Item(type=ItemType.OBJECT)


def create_int_array(numbers: Iterable[int]) -> Item:
    return Item(type=ItemType.ARRAY, children=[create_number(int(n)) for n in numbers])


def _to_single(value: float) -> float:
    """Round a value to single precision and widen it again."""
    return struct.unpack("<f", struct.pack("<f", float(value)))[0]


def create_float_array(numbers: Iterable[float]) -> Item:
    """Create an array of numbers held at single precision."""
    return Item(
        type=ItemType.ARRAY, children=[create_number(_to_single(n)) for n in numbers]
    )


def create_double_array(numbers: Iterable[float]) -> Item:
    return Item(type=ItemType.ARRAY, children=[create_number(n) for n in numbers])


def create_string_array(strings: Iterable[str]) -> Item:
    return Item(type=ItemType.ARRAY, children=[create_string(s) for s in strings])