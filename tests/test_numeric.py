import math

import hypothesis.strategies as st
import numpy as np
import pytest
from hypothesis import given

from _scanio.errors import ParseError
from _scanio.numeric import (
    integer_dtypes,
    parse_array,
    parse_boolean,
    parse_float,
    parse_integer,
)


@pytest.mark.parametrize(
    "token, expected", [("0", 0), ("+7", 7), ("-12", -12), ("007", 7)]
)
def test_parse_integer(token, expected):
    assert parse_integer(token) == expected


@pytest.mark.parametrize(
    "token", ["", "-", "1.0", "1,000", "1_000", "0x10", "١٢", " 1", "1e3"]
)
def test_parse_integer_rejects(token):
    with pytest.raises(ParseError):
        parse_integer(token)


@pytest.mark.parametrize("type_name", list(integer_dtypes))
def test_integer_width_bounds(type_name):
    info = np.iinfo(integer_dtypes[type_name])
    assert parse_integer(str(info.max), type_name) == info.max
    assert parse_integer(str(info.min), type_name) == info.min
    with pytest.raises(ParseError, match="out of range"):
        parse_integer(str(info.max + 1), type_name)
    with pytest.raises(ParseError, match="out of range"):
        parse_integer(str(info.min - 1), type_name)


@given(st.integers(min_value=-(2**31), max_value=2**31 - 1))
def test_parse_int_is_inverse_of_str(value):
    assert parse_integer(str(value), "int") == value


@pytest.mark.parametrize(
    "token, expected",
    [
        ("3.14", 3.14),
        ("-1", -1.0),
        ("1.", 1.0),
        (".5", 0.5),
        ("1e3", 1000.0),
        ("+2.5E-1", 0.25),
        ("Infinity", math.inf),
        ("-Infinity", -math.inf),
        ("1e400", math.inf),
    ],
)
def test_parse_double(token, expected):
    assert parse_float(token) == expected


def test_parse_nan():
    assert math.isnan(parse_float("NaN"))


@pytest.mark.parametrize(
    "token", ["", ".", "e5", "1,5", "inf", "nan", "1_0.0", "0x1p3"]
)
def test_parse_double_rejects(token):
    with pytest.raises(ParseError):
        parse_float(token)


def test_parse_float_rounds_to_single_precision():
    assert parse_float("0.1", "float") == float(np.float32(0.1))
    assert parse_float("0.1", "float") != 0.1
    assert parse_float("1e39", "float") == math.inf


@pytest.mark.parametrize(
    "token, expected",
    [("true", True), ("TRUE", True), ("1", True), ("False", False), ("0", False)],
)
def test_parse_boolean(token, expected):
    assert parse_boolean(token) is expected


@pytest.mark.parametrize("token", ["maybe", "yes", "2", "01", "t"])
def test_parse_boolean_rejects(token):
    with pytest.raises(ParseError, match=token):
        parse_boolean(token)


def test_parse_array_dtypes():
    assert parse_array(["1", "2"], "int").dtype == np.int32
    assert parse_array(["1", "2"], "long").dtype == np.int64
    assert parse_array(["1", "2.5"], "double").dtype == np.float64
    assert parse_array([], "int").shape == (0,)


def test_parse_array_names_index_and_token():
    with pytest.raises(ParseError, match="token 2 \\('x'\\)") as excinfo:
        parse_array(["1", "2", "x", "4"], "int")
    assert excinfo.value.index == 2
    assert excinfo.value.token == "x"
