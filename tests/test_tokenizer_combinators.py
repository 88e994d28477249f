import io

import pytest

from _scanio.tokenizer import CharStream
from _scanio.tokenizer.combinators import bind, one_of, optional, repeated
from _scanio.tokenizer.common import tokenize_word
from _scanio.tokenizer.errors import TokenizationError


def char_stream(contents):
    return CharStream(io.BytesIO(contents.encode("utf-8")))


@pytest.mark.parametrize("inp_str", ["foo foo foo", "foo foo foobar"])
def test_combinators(inp_str):
    stream = char_stream(inp_str)

    foo_tokenizer = tokenize_word(stream, "foo", "foo")
    space_tokenizer = tokenize_word(stream, " ", " ")

    test_tokenizer = repeated(one_of(foo_tokenizer, space_tokenizer))()

    assert [t.kind for t in test_tokenizer] == ["foo", " ", "foo", " ", "foo"]


def test_one_of_winds_back_and_reports_all_errors():
    stream = char_stream("baz")
    tokenizer = one_of(
        tokenize_word(stream, "foo", "foo"), tokenize_word(stream, "ba", "ba")
    )
    assert [t.kind for t in tokenizer()] == ["ba"]

    stream = char_stream("baz")
    tokenizer = one_of(
        tokenize_word(stream, "foo", "foo"), tokenize_word(stream, "bar", "bar")
    )
    with pytest.raises(TokenizationError, match="'foo'.*\n.*'bar'"):
        list(tokenizer())
    assert stream.tell() == 0


def test_bind_yields_in_sequence():
    stream = char_stream("ab")
    tokenizer = bind(tokenize_word(stream, "a", "a"), tokenize_word(stream, "b", "b"))
    assert [(t.kind, t.start, t.end) for t in tokenizer()] == [
        ("a", 0, 1),
        ("b", 1, 2),
    ]


def test_optional_yields_nothing_on_failure():
    stream = char_stream("b")
    assert list(optional(tokenize_word(stream, "a", "a"))()) == []
    assert stream.tell() == 0
    assert [t.kind for t in optional(tokenize_word(stream, "b", "b"))()] == ["b"]
