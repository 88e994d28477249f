"""
Functions reading from the standard input of the process, all sharing one
Reader which is created on first use.

>>> from scanio import stdin
>>> total = 0
>>> while not stdin.is_empty():
...     total += stdin.read_int()
"""

from _scanio.reading import Reader
from _scanio.source import StandardInput

_reader = None


def reader():
    """
    :returns: The Reader shared by the functions of this module.
    """
    global _reader
    if _reader is None:
        _reader = Reader(StandardInput())
    return _reader


def resync():
    """
    Wrap sys.stdin anew, ie. after sys.stdin has been replaced. Anything
    read ahead from the previous standard input is lost.
    """
    global _reader
    if _reader is not None:
        _reader.close()
    _reader = Reader(StandardInput())


def is_empty():
    return reader().is_empty()


def has_next_line():
    return reader().has_next_line()


def has_next_char():
    return reader().has_next_char()


def has_next_int():
    return reader().has_next_int()


def has_next_long():
    return reader().has_next_long()


def has_next_short():
    return reader().has_next_short()


def has_next_byte():
    return reader().has_next_byte()


def has_next_float():
    return reader().has_next_float()


def has_next_double():
    return reader().has_next_double()


def has_next_boolean():
    return reader().has_next_boolean()


def read_line():
    return reader().read_line()


def read_char():
    return reader().read_char()


def read_all():
    return reader().read_all()


def read_string():
    return reader().read_string()


def read_int():
    return reader().read_int()


def read_double():
    return reader().read_double()


def read_float():
    return reader().read_float()


def read_long():
    return reader().read_long()


def read_short():
    return reader().read_short()


def read_byte():
    return reader().read_byte()


def read_boolean():
    return reader().read_boolean()


def read_all_strings():
    return reader().read_all_strings()


def read_all_lines():
    return reader().read_all_lines()


def read_all_ints():
    return reader().read_all_ints()


def read_all_longs():
    return reader().read_all_longs()


def read_all_doubles():
    return reader().read_all_doubles()
