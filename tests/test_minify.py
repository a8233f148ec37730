import pytest

from jtree.minify import minify
from jtree.parser import parse
from jtree.printer import print_unformatted

COMPACT = '{"a":[1,2.5,"x"],"b":{"c":null}}'


def test_compact_text_is_unchanged():
    assert minify(COMPACT) == COMPACT


@pytest.mark.parametrize("whitespace", [" ", "\t", "\r\n", " \n\t "])
def test_whitespace_is_removed(whitespace):
    spaced = COMPACT.replace(",", whitespace + "," + whitespace).replace(":", ":" + whitespace)
    assert minify(whitespace + spaced + whitespace) == COMPACT


def test_block_comment_is_removed():
    assert minify(COMPACT.replace(",", ",/* note */")) == COMPACT


def test_line_comment_is_removed():
    text = COMPACT[:-1] + "// trailing note\n" + COMPACT[-1:]
    assert minify(text) == COMPACT


def test_comment_closing_right_after_opening():
    assert minify("1/*/2") == "12"


def test_unterminated_block_comment_drops_rest():
    assert minify("[1] /* open") == "[1]"


def test_strings_keep_spaces_and_comment_markers():
    compact = '["a b // c","/* d */"]'
    assert minify(compact.replace('","', '" , "')) == compact


def test_escaped_quote_does_not_end_string():
    compact = '["a \\" b","c"]'
    assert minify(compact.replace('","', '" ,\n "')) == compact


def test_text_after_nul_is_dropped():
    assert minify("[1]\0 [2]") == "[1]"


def test_minified_text_parses_to_same_tree():
    text = '{\n  "a": [1, 2.5, "x"], // list\n  "b": { /* inner */ "c": null }\n}'
    assert print_unformatted(parse(minify(text))) == COMPACT


def test_minify_is_idempotent():
    text = ' [ 1 , /* x */ "y z" ]\n'
    once = minify(text)
    assert minify(once) == once