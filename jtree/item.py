"""JSON tree nodes: the item type tag and the Item node itself."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional

_VERSION = (1, 4, 7)

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_ASCII_FOLD = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def version() -> str:
    """Return the library version as "major.minor.patch"."""
    return "{}.{}.{}".format(*_VERSION)


class ItemType(Enum):
    """The kind of value an Item holds."""

    INVALID = 0
    FALSE = 1
    TRUE = 2
    NULL = 3
    NUMBER = 4
    STRING = 5
    ARRAY = 6
    OBJECT = 7
    RAW = 8


def saturate(number: float) -> int:
    """Clamp a double to the range of a 32-bit signed integer, truncating."""
    if math.isnan(number):
        return 0
    if number >= INT_MAX:
        return INT_MAX
    if number <= INT_MIN:
        return INT_MIN
    return int(number)


def _keys_match(a: Optional[str], b: Optional[str]) -> bool:
    """Case-insensitive (ASCII only) key comparison; None matches only None."""
    if a is None or b is None:
        return a is b
    return a.translate(_ASCII_FOLD) == b.translate(_ASCII_FOLD)


@dataclass
class Item:
    """One node of a JSON tree.

    Arrays and objects keep their members in ``children``; object members
    carry their name in ``key``.
    """

    type: ItemType = ItemType.INVALID
    value_string: Optional[str] = None
    value_int: int = 0
    value_double: float = 0.0
    key: Optional[str] = None
    children: list[Item] = field(default_factory=list)
    is_reference: bool = False
    string_is_const: bool = False

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self) -> Iterator[Item]:
        return iter(self.children)

    # ----- lookup -------------------------------------------------------

    def get_item(self, index: int) -> Optional[Item]:
        """Return the child at ``index``; negative indices give the first child."""
        index = max(index, 0)
        if index < len(self.children):
            return self.children[index]
        return None

    def _find_key(self, key: Optional[str]) -> Optional[int]:
        return next(
            (i for i, child in enumerate(self.children) if _keys_match(child.key, key)),
            None,
        )

    def get_object_item(self, key: Optional[str]) -> Optional[Item]:
        """Return the first member whose name matches ``key`` ignoring ASCII case."""
        index = self._find_key(key)
        return None if index is None else self.children[index]

    def get_object_item_case_sensitive(self, key: Optional[str]) -> Optional[Item]:
        """Return the first member whose name equals ``key`` exactly."""
        if key is None:
            return None
        return next((child for child in self.children if child.key == key), None)

    def has_object_item(self, key: Optional[str]) -> bool:
        return self.get_object_item(key) is not None

    # ----- adding -------------------------------------------------------

    def add_item(self, item: Optional[Item]) -> None:
        """Append ``item`` to this array or object; None is ignored."""
        if item is None:
            return
        self.children.append(item)

    def add_item_to_object(self, key: str, item: Optional[Item]) -> None:
        """Append ``item`` under the name ``key``, owning a copy of the name."""
        if item is None:
            return
        item.key = key
        item.string_is_const = False
        self.children.append(item)

    def add_item_to_object_const(self, key: str, item: Optional[Item]) -> None:
        """Append ``item`` under ``key``, marking the name as a constant."""
        if item is None:
            return
        item.key = key
        item.string_is_const = True
        self.children.append(item)

    def add_reference(self, item: Item) -> None:
        """Append a reference node that shares the value and members of ``item``."""
        self.add_item(_make_reference(item))

    def add_reference_to_object(self, key: str, item: Item) -> None:
        """Add a reference to ``item`` under the name ``key``."""
        self.add_item_to_object(key, _make_reference(item))

    # ----- removing -----------------------------------------------------

    def detach_item(self, index: int) -> Optional[Item]:
        """Remove and return the child at ``index``, or None if there is none."""
        if index < 0 or index >= len(self.children):
            return None
        return self.children.pop(index)

    def delete_item(self, index: int) -> None:
        self.detach_item(index)

    def detach_item_from_object(self, key: Optional[str]) -> Optional[Item]:
        """Remove and return the member named ``key`` (ASCII case ignored)."""
        index = self._find_key(key)
        return None if index is None else self.children.pop(index)

    def delete_item_from_object(self, key: Optional[str]) -> None:
        self.detach_item_from_object(key)

    # ----- inserting and replacing --------------------------------------

    def insert_item(self, index: int, item: Item) -> None:
        """Insert before position ``index``; past the end it appends."""
        self.children.insert(max(index, 0), item)

    def replace_item(self, index: int, item: Item) -> None:
        """Replace the child at ``index``; out-of-range indices are ignored."""
        if 0 <= index < len(self.children):
            self.children[index] = item

    def replace_item_in_object(self, key: Optional[str], item: Item) -> None:
        """Replace the member named ``key``, giving ``item`` that name."""
        index = self._find_key(key)
        if index is None:
            return
        item.key = key
        item.string_is_const = False
        self.children[index] = item

    # ----- values -------------------------------------------------------

    def set_number(self, number: float) -> float:
        """Store ``number``, saturating the integer view; return the number."""
        self.value_int = saturate(number)
        self.value_double = number
        return number

    def duplicate(self, recurse: bool) -> Item:
        """Return a copy that is never a reference; copy members if ``recurse``."""
        return Item(
            type=self.type,
            value_string=self.value_string,
            value_int=self.value_int,
            value_double=self.value_double,
            key=self.key,
            children=[child.duplicate(True) for child in self.children] if recurse else [],
            is_reference=False,
            string_is_const=self.string_is_const,
        )

    # ----- predicates ---------------------------------------------------

    def is_invalid(self) -> bool:
        return self.type is ItemType.INVALID

    def is_false(self) -> bool:
        return self.type is ItemType.FALSE

    def is_true(self) -> bool:
        return self.type is ItemType.TRUE

    def is_bool(self) -> bool:
        return self.type in (ItemType.TRUE, ItemType.FALSE)

    def is_null(self) -> bool:
        return self.type is ItemType.NULL

    def is_number(self) -> bool:
        return self.type is ItemType.NUMBER

    def is_string(self) -> bool:
        return self.type is ItemType.STRING

    def is_array(self) -> bool:
        return self.type is ItemType.ARRAY

    def is_object(self) -> bool:
        return self.type is ItemType.OBJECT

    def is_raw(self) -> bool:
        return self.type is ItemType.RAW


def _make_reference(item: Item) -> Item:
    """Build a nameless node sharing the value and member list of ``item``."""
    return Item(
        type=item.type,
        value_string=item.value_string,
        value_int=item.value_int,
        value_double=item.value_double,
        key=None,
        children=item.children,
        is_reference=True,
        string_is_const=item.string_is_const,
    )