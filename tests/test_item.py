import pytest

from jtree.item import Item, ItemType, version


def _string(text, key=None):
    return Item(type=ItemType.STRING, value_string=text, key=key)


def _number(value):
    item = Item(type=ItemType.NUMBER)
    item.set_number(value)
    return item


def _array(*values):
    array = Item(type=ItemType.ARRAY)
    for value in values:
        array.add_item(_string(value))
    return array


def _object(**members):
    obj = Item(type=ItemType.OBJECT)
    for key, value in members.items():
        obj.add_item_to_object(key, _string(value))
    return obj


def test_version():
    assert version() == "1.4.7"


def test_default_item_is_invalid():
    item = Item()
    assert item.is_invalid()
    assert len(item) == 0


def test_len_and_iter():
    array = _array("a", "b", "c")
    assert len(array) == 3
    assert [child.value_string for child in array] == ["a", "b", "c"]


def test_get_item():
    array = _array("a", "b")
    assert array.get_item(1).value_string == "b"
    assert array.get_item(2) is None
    assert array.get_item(-5).value_string == "a"
    assert Item(type=ItemType.ARRAY).get_item(0) is None


def test_get_object_item_ignores_case():
    obj = _object(Name="x", other="y")
    assert obj.get_object_item("NAME").value_string == "x"
    assert obj.get_object_item("missing") is None


def test_get_object_item_case_sensitive():
    obj = _object(Name="x")
    assert obj.get_object_item_case_sensitive("Name").value_string == "x"
    assert obj.get_object_item_case_sensitive("name") is None
    assert obj.get_object_item_case_sensitive(None) is None


def test_has_object_item():
    obj = _object(key="v")
    assert obj.has_object_item("KEY") is True
    assert obj.has_object_item("nothing") is False


def test_add_item_ignores_none():
    array = _array("a")
    array.add_item(None)
    assert len(array) == 1


def test_add_item_to_object_and_const():
    obj = Item(type=ItemType.OBJECT)
    first = _string("1")
    second = _string("2")
    obj.add_item_to_object("one", first)
    obj.add_item_to_object_const("two", second)
    assert (first.key, first.string_is_const) == ("one", False)
    assert (second.key, second.string_is_const) == ("two", True)
    assert [child.key for child in obj] == ["one", "two"]


def test_add_reference_shares_members():
    target = _array("a")
    holder = Item(type=ItemType.ARRAY)
    holder.add_reference(target)
    ref = holder.get_item(0)
    assert ref.is_reference
    assert ref.is_array()
    assert ref.children is target.children
    target.add_item(_string("b"))
    assert len(ref) == 2
    assert target.is_reference is False


def test_add_reference_to_object_names_reference_only():
    target = _string("value", key="original")
    obj = Item(type=ItemType.OBJECT)
    obj.add_reference_to_object("alias", target)
    ref = obj.get_object_item("alias")
    assert ref.value_string == "value"
    assert ref.is_reference
    assert target.key == "original"


def test_detach_item():
    array = _array("a", "b", "c")
    detached = array.detach_item(1)
    assert detached.value_string == "b"
    assert [c.value_string for c in array] == ["a", "c"]
    assert array.detach_item(-1) is None
    assert array.detach_item(5) is None
    assert len(array) == 2


def test_delete_item():
    array = _array("a", "b")
    array.delete_item(0)
    assert [c.value_string for c in array] == ["b"]


def test_detach_and_delete_from_object():
    obj = _object(alpha="1", beta="2")
    detached = obj.detach_item_from_object("ALPHA")
    assert detached.value_string == "1"
    assert obj.detach_item_from_object("gamma") is None
    obj.delete_item_from_object("beta")
    assert len(obj) == 0


def test_insert_item_positions():
    array = _array("b", "d")
    array.insert_item(1, _string("c"))
    array.insert_item(-3, _string("a"))
    array.insert_item(99, _string("e"))
    assert [c.value_string for c in array] == ["a", "b", "c", "d", "e"]


def test_replace_item():
    array = _array("a", "b")
    array.replace_item(1, _string("z"))
    array.replace_item(-1, _string("q"))
    array.replace_item(7, _string("q"))
    assert [c.value_string for c in array] == ["a", "z"]


def test_replace_item_in_object_sets_key():
    obj = _object(Key="old")
    replacement = _string("new", key="ignored")
    obj.replace_item_in_object("KEY", replacement)
    assert obj.get_item(0) is replacement
    assert replacement.key == "KEY"
    obj.replace_item_in_object("absent", _string("x"))
    assert len(obj) == 1


def test_set_number_saturates():
    item = Item(type=ItemType.NUMBER)
    assert item.set_number(1e10) == 1e10
    assert item.value_int == 2147483647
    item.set_number(-1e10)
    assert item.value_int == -2147483648
    assert item.value_double == -1e10


def test_set_number_truncates_toward_zero():
    positive = _number(3.7)
    negative = _number(-3.7)
    assert positive.value_int == 3
    assert negative.value_int == -positive.value_int


def test_duplicate_recursive_is_equal_and_independent():
    original = _object(a="1", b="2")
    copy = original.duplicate(True)
    assert copy == original
    copy.get_item(0).value_string = "changed"
    assert original.get_item(0).value_string == "1"
    assert copy.children is not original.children


def test_duplicate_shallow_drops_members():
    original = _object(a="1")
    original.key = "root"
    copy = original.duplicate(False)
    assert len(copy) == 0
    assert copy.key == "root"
    assert copy.is_object()


def test_duplicate_clears_reference_flag():
    holder = Item(type=ItemType.ARRAY)
    holder.add_reference(_array("x"))
    copy = holder.get_item(0).duplicate(True)
    assert copy.is_reference is False
    assert [c.value_string for c in copy] == ["x"]


@pytest.mark.parametrize(
    "kind, predicate",
    [
        (ItemType.INVALID, "is_invalid"),
        (ItemType.FALSE, "is_false"),
        (ItemType.TRUE, "is_true"),
        (ItemType.NULL, "is_null"),
        (ItemType.NUMBER, "is_number"),
        (ItemType.STRING, "is_string"),
        (ItemType.ARRAY, "is_array"),
        (ItemType.OBJECT, "is_object"),
        (ItemType.RAW, "is_raw"),
    ],
)
def test_predicates_are_exclusive(kind, predicate):
    item = Item(type=kind)
    names = [
        "is_invalid", "is_false", "is_true", "is_null", "is_number",
        "is_string", "is_array", "is_object", "is_raw",
    ]
    results = {name: getattr(item, name)() for name in names}
    assert results[predicate] is True
    assert sum(results.values()) == 1
    assert item.is_bool() == (kind in (ItemType.TRUE, ItemType.FALSE))