from _scanio.stdin import (  # noqa: F401
    has_next_boolean,
    has_next_byte,
    has_next_char,
    has_next_double,
    has_next_float,
    has_next_int,
    has_next_line,
    has_next_long,
    has_next_short,
    is_empty,
    read_all,
    read_all_doubles,
    read_all_ints,
    read_all_lines,
    read_all_longs,
    read_all_strings,
    read_boolean,
    read_byte,
    read_char,
    read_double,
    read_float,
    read_int,
    read_line,
    read_long,
    read_short,
    read_string,
    reader,
    resync,
)
