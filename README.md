# jtree

`jtree` holds a JSON document as a tree of `Item` nodes. It parses text into such a
tree, lets you build and edit trees by hand, prints them back out (pretty or compact),
and strips whitespace and comments from JSON text. It has no dependencies outside the
standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## The tree

`jtree.item.Item` is a dataclass with these fields:

- `type`: an `ItemType` (`INVALID`, `FALSE`, `TRUE`, `NULL`, `NUMBER`, `STRING`,
  `ARRAY`, `OBJECT`, `RAW`)
- `value_string`: the text of a string or raw item
- `value_double`: the value of a number
- `value_int`: the number truncated to an integer and clamped to the 32-bit signed range
- `key`: the member name when the item belongs to an object
- `children`: the members of an array or object
- `is_reference`, `string_is_const`: flags set by `add_reference`,
  `add_reference_to_object` and `add_item_to_object_const`

`len(item)` counts the members and iterating over an item yields them.
`jtree.item.version()` returns `"1.4.7"`.

## Parsing

```python
from jtree.parser import parse, parse_with_opts, ParseError

root = parse('{"name": "Jack", "age": 27, "tags": ["a", "b"]}')
root.get_object_item("name").value_string     # "Jack"
root.get_object_item("AGE").value_double      # 27.0 (key lookup ignores ASCII case)
root.get_object_item_case_sensitive("AGE")    # None
len(root.get_object_item("tags"))             # 2

item, end = parse_with_opts("[1, 2] trailing")  # end == 6, just past the value

try:
    parse_with_opts("[1, 2] trailing", True)
except ParseError as error:
    print("bad JSON:", error, "at", error.position)
```

`parse` ignores any text after the value. `parse_with_opts(text, True)` raises
`ParseError` when anything other than whitespace follows it. `ParseError` is a
`ValueError`; its `position` is the offset of the problem, or `None` where it is not
known. Input ends at the first NUL character.

## Building and editing

```python
from jtree import factory

root = factory.create_object()
root.add_item_to_object("name", factory.create_string("Jack"))
root.add_item_to_object("scores", factory.create_int_array([1, 2, 3]))
root.add_item_to_object("active", factory.create_bool(True))

scores = root.get_object_item("scores")
scores.insert_item(0, factory.create_number(0))    # [0, 1, 2, 3]
scores.replace_item(1, factory.create_number(10))  # [0, 10, 2, 3]
scores.delete_item(3)                              # [0, 10, 2]

copy = root.duplicate(True)
for child in copy:
    print(child.key)
```

`jtree.factory` also has `create_null`, `create_true`, `create_false`, `create_raw`
(text printed verbatim), `create_array`, `create_float_array` (values rounded to single
precision), `create_double_array` and `create_string_array`. `create_string` and
`create_raw` raise `TypeError` when given `None`.

Other methods on `Item`: `get_item`, `has_object_item`, `add_item`,
`add_item_to_object_const`, `add_reference`, `add_reference_to_object`, `detach_item`,
`detach_item_from_object`, `delete_item_from_object`, `replace_item_in_object` and
`set_number`. Out-of-range indices and missing keys are ignored, or give `None` where a
value is returned. Each item can be checked with `is_null()`, `is_bool()`, `is_true()`,
`is_false()`, `is_number()`, `is_string()`, `is_array()`, `is_object()`, `is_raw()` and
`is_invalid()`.

## Printing

```python
from jtree.printer import print_formatted, print_unformatted

print_unformatted(root)
# '{"name":"Jack","scores":[0,10,2],"active":true}'
print(print_formatted(root))
```

Pretty output puts each object member on its own line, indented with tabs and with a tab
after the colon; array elements are separated by `", "`. Whole numbers print without a
fractional part, very small or very large ones in exponent notation, and values that are
not finite print as `null`.

`print_buffered(item, prebuffer, formatted)` renders like the two above; `prebuffer` is
only a size hint. `print_preallocated(item, length, formatted)` renders only if the
output plus a terminator fits in `length` bytes. Both raise `PrintError` (a
`ValueError`) for a negative size, and every printer raises it for an item it cannot
render, such as an `INVALID` item.

## Minifying

```python
from jtree.minify import minify

minify('{ "a" : 1, // note\n "b" : [1, 2] /* gone */ }')
# '{"a":1,"b":[1,2]}'
```

String literals are left as they are.

## What it does not do

`jtree` is a library only: it installs no command-line program. It has no support for
custom memory allocators or other allocation hooks.