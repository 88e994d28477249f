import io

import numpy as np
import pytest

from scanio import EndOfInputError, IoError, ParseError, Reader, String


def test_read_mixed_tokens():
    reader = Reader.from_string("  123  hello  3.14\n")
    assert reader.read_int() == 123
    assert reader.read_string() == "hello"
    assert reader.read_double() == 3.14
    assert reader.is_empty()


def test_read_chars_then_string_then_lines():
    reader = Reader.from_string("abc def\nghi")
    assert [reader.read_char() for _ in range(4)] == ["a", "b", "c", " "]
    assert reader.read_string() == "def"
    assert reader.read_line() == ""
    assert reader.read_line() == "ghi"
    assert not reader.has_next_line()


def test_read_booleans():
    reader = Reader.from_string("true 0 False 1 maybe")
    assert [reader.read_boolean() for _ in range(4)] == [True, False, False, True]
    with pytest.raises(ParseError, match="maybe"):
        reader.read_boolean()


def test_lines_of_only_newlines():
    reader = Reader.from_string("\n\n\n")
    assert reader.read_all_lines() == ["", "", ""]
    assert reader.read_all_strings() == []


def test_read_all_ints():
    ints = Reader.from_string("  1 2 3 4  ").read_all_ints()
    assert ints.dtype == np.int32
    assert ints.tolist() == [1, 2, 3, 4]


def test_read_all_ints_fails_on_bad_token():
    reader = Reader.from_string("1 2 x 4")
    with pytest.raises(ParseError, match="token 2 \\('x'\\)") as excinfo:
        reader.read_all_ints()
    assert excinfo.value.index == 2
    assert excinfo.value.token == "x"
    assert reader.is_empty()


def test_read_chars_of_whitespace():
    reader = Reader.from_string("  ")
    assert reader.read_char() == " "
    assert reader.read_char() == " "
    assert not reader.has_next_char()


def test_whitespace_only_is_empty_but_has_line():
    reader = Reader.from_string(" \t\n")
    assert reader.is_empty()
    assert reader.has_next_line()
    assert reader.has_next_char()


def test_has_next_int_after_read_char():
    reader = Reader.from_string("x 12")
    reader.read_char()
    assert reader.has_next_int()
    assert reader.read_int() == 12


@pytest.mark.parametrize(
    "method, token, expected",
    [
        ("read_byte", "-128", -128),
        ("read_short", "32767", 32767),
        ("read_int", "-2147483648", -(2**31)),
        ("read_long", "9223372036854775807", 2**63 - 1),
        ("read_float", "0.5", 0.5),
        ("read_double", "-Infinity", float("-inf")),
    ],
)
def test_scalar_reads(method, token, expected):
    reader = Reader.from_string(f" {token} ")
    has_next = getattr(reader, method.replace("read_", "has_next_"))
    assert has_next()
    assert getattr(reader, method)() == expected
    assert reader.is_empty()


@pytest.mark.parametrize(
    "method, token",
    [
        ("read_byte", "128"),
        ("read_short", "-32769"),
        ("read_int", "2147483648"),
        ("read_long", "9223372036854775808"),
        ("read_int", "1.0"),
        ("read_double", "1,5"),
        ("read_float", "abc"),
    ],
)
def test_failed_scalar_read_leaves_token(method, token):
    reader = Reader.from_string(f"{token} next")
    has_next = getattr(reader, method.replace("read_", "has_next_"))
    assert not has_next()
    with pytest.raises(ParseError):
        getattr(reader, method)()
    assert reader.read_string() == token
    assert reader.read_string() == "next"


@pytest.mark.parametrize(
    "method",
    [
        "read_line",
        "read_char",
        "read_all",
        "read_string",
        "read_int",
        "read_long",
        "read_short",
        "read_byte",
        "read_float",
        "read_double",
        "read_boolean",
    ],
)
def test_reads_at_end_of_input(method):
    reader = Reader.from_string("")
    with pytest.raises(EndOfInputError, match="<string>"):
        getattr(reader, method)()


@pytest.mark.parametrize(
    "method",
    [
        "read_string",
        "read_int",
        "read_long",
        "read_short",
        "read_byte",
        "read_float",
        "read_double",
        "read_boolean",
    ],
)
def test_token_reads_on_whitespace_only(method):
    reader = Reader.from_string(" \n ")
    with pytest.raises(EndOfInputError):
        getattr(reader, method)()
    assert reader.read_all() == " \n "


def test_read_all_returns_remaining():
    reader = Reader.from_string("first rest of\nit ")
    reader.read_string()
    assert reader.read_all() == " rest of\nit "
    assert not reader.has_next_char()
    with pytest.raises(EndOfInputError):
        reader.read_all()


def test_read_all_strings_drops_leading_whitespace():
    reader = Reader.from_string("\n\t a  b　c\n")
    assert reader.read_all_strings() == ["a", "b", "c"]
    assert reader.read_all_strings() == []


def test_information_separators_are_part_of_tokens():
    reader = Reader.from_string("a\x1cb c\x1e 1\x1f")
    assert reader.read_string() == "a\x1cb"
    assert not reader.has_next_int()
    assert reader.read_all_strings() == ["c\x1e", "1\x1f"]


def test_read_all_lines_mixed_terminators():
    reader = Reader.from_string("a\r\nb\rc d\n\ne")
    assert reader.read_all_lines() == ["a", "b", "c d", "", "e"]


def test_read_all_longs_and_doubles():
    reader = Reader.from_string("9223372036854775807 -1")
    assert reader.read_all_longs().tolist() == [2**63 - 1, -1]
    reader = Reader.from_string("1 2.5 -Infinity")
    doubles = reader.read_all_doubles()
    assert doubles.dtype == np.float64
    assert doubles.tolist() == [1.0, 2.5, float("-inf")]


def test_read_all_ints_overflow():
    with pytest.raises(ParseError, match="token 1"):
        Reader.from_string("1 2147483648").read_all_ints()


def test_predicates_do_not_advance():
    reader = Reader.from_string("42 x")
    for _ in range(3):
        assert reader.has_next_int()
        assert reader.has_next_long()
        assert reader.has_next_double()
        assert reader.has_next_char()
        assert reader.has_next_line()
        assert not reader.has_next_boolean()
    assert reader.read_int() == 42
    assert not reader.has_next_int()
    assert reader.read_string() == "x"


def test_read_unicode():
    reader = Reader.from_string("σ€ 𝄞\n")
    assert reader.read_char() == "σ"
    assert reader.read_string() == "€"
    assert reader.read_line() == " 𝄞"


def test_invalid_utf8_raises_io_error():
    reader = Reader(io.BytesIO(b"1 " + b"x" * 10000 + b"\xff"))
    assert reader.read_int() == 1
    with pytest.raises(IoError):
        reader.read_string()
    with pytest.raises(IoError):
        reader.read_all_strings()


def test_close():
    stream = io.BytesIO(b"1 2")
    reader = Reader(stream)
    assert reader.exists()
    reader.close()
    reader.close()
    assert not reader.exists()
    assert stream.closed
    with pytest.raises(IoError, match="closed"):
        reader.read_int()


def test_context_manager_closes():
    stream = io.BytesIO(b"1")
    with Reader(stream) as reader:
        assert reader.read_int() == 1
    assert stream.closed


def test_reader_sharing_a_tokenizer():
    owner = Reader(String("a b c"))
    owner.read_string()
    shared = Reader(owner.tokenizer)
    assert shared.read_string() == "b"
    shared.close()
    assert not shared.exists()
    assert owner.read_string() == "c"
