"""
Functions writing to the standard output of the process as UTF-8, all
sharing one Writer which is created on first use.
"""

from _scanio.writing import StandardOutput, Writer

_writer = None


def writer():
    global _writer
    if _writer is None:
        _writer = Writer(StandardOutput())
    return _writer


def print(value=None):
    writer().print(value)


def println(value=""):
    writer().println(value)


def printf(format_string, *args, locale=None):
    writer().printf(format_string, *args, locale=locale)


def close():
    """
    Flush standard output. The next call creates a new Writer, which picks
    up sys.stdout if it has been replaced.
    """
    global _writer
    if _writer is not None:
        _writer.close()
        _writer = None
