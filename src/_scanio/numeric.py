"""
Parsing of tokens into numbers with a fixed grammar, independent of the
host locale: the decimal point is '.', digit grouping is not recognized and
only ASCII digits are accepted.
"""

import re

import numpy as np

from _scanio.errors import ParseError

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+", re.ASCII)
FLOAT_PATTERN = re.compile(
    r"[+-]?(?:NaN|Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)",
    re.ASCII,
)

# Map from the name of a numeric width to the numpy dtype
# used for range checking and for arrays of that width.
integer_dtypes = {
    "byte": np.int8,
    "short": np.int16,
    "int": np.int32,
    "long": np.int64,
}
float_dtypes = {
    "float": np.float32,
    "double": np.float64,
}
dtypes = {**integer_dtypes, **float_dtypes}


def parse_integer(token, type_name="int"):
    """
    :param token: A token such as "-12".
    :param type_name: One of the keys of integer_dtypes.
    :returns: The value of the token as an int.
    :raises ParseError: If the token is not a decimal integer or
        does not fit in the width of type_name.
    """
    if not INTEGER_PATTERN.fullmatch(token):
        raise ParseError(f"Could not parse {repr(token)} as {type_name}", token)
    value = int(token)
    info = np.iinfo(integer_dtypes[type_name])
    if not info.min <= value <= info.max:
        raise ParseError(
            f"{token} is out of range for {type_name} ({info.min} to {info.max})",
            token,
        )
    return value


def parse_float(token, type_name="double"):
    """
    :param token: A token such as "1.5e3", "-Infinity" or "NaN".
    :param type_name: "float" for single precision or "double".
    :returns: The value of the token as a float, rounded to the precision
        of type_name. Values too large for the width become infinite.
    :raises ParseError: If the token is not a floating point literal.
    """
    if not FLOAT_PATTERN.fullmatch(token):
        raise ParseError(f"Could not parse {repr(token)} as {type_name}", token)
    value = float(token.replace("Infinity", "inf"))
    with np.errstate(over="ignore"):
        return float(float_dtypes[type_name](value))


def parse_boolean(token):
    """
    true and false are accepted in any case, as are 1 and 0.
    """
    lowered = token.lower()
    if lowered in ("true", "1"):
        return True
    if lowered in ("false", "0"):
        return False
    raise ParseError(f"Could not parse {repr(token)} as boolean", token)


parsers = {
    **{name: parse_integer for name in integer_dtypes},
    **{name: parse_float for name in float_dtypes},
}


def parse_array(tokens, type_name):
    """
    Parse all tokens as type_name.

    :returns: numpy array with the dtype of type_name.
    :raises ParseError: Naming the index and value of the first token that
        could not be parsed.
    """
    parse = parsers[type_name]
    values = []
    for index, token in enumerate(tokens):
        try:
            values.append(parse(token, type_name))
        except ParseError as err:
            raise ParseError(
                f"Could not parse token {index} ({repr(token)}) as {type_name}",
                token,
                index,
            ) from err
    return np.array(values, dtype=dtypes[type_name])
