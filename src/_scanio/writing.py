import io
import locale as locale_module
import logging
import os
import socket
import sys
import warnings
from contextlib import contextmanager
from dataclasses import dataclass

from _scanio.errors import BadSinkError

logger = logging.getLogger(__name__)

ENCODING = "utf-8"


@dataclass(frozen=True)
class StandardOutput:
    """The standard output of the process."""


@contextmanager
def numeric_locale(name):
    """
    Temporarily switch the numeric locale of the process to the given one.
    """
    previous = locale_module.setlocale(locale_module.LC_NUMERIC)
    try:
        locale_module.setlocale(locale_module.LC_NUMERIC, name)
    except locale_module.Error as err:
        raise ValueError(f"Unsupported locale {name}") from err
    try:
        yield
    finally:
        locale_module.setlocale(locale_module.LC_NUMERIC, previous)


def open_sink(sink):
    """
    :returns: Tuple of a writable binary stream for the sink, a name for it
        and whether the stream should be closed with the writer.
    """
    if sink is None:
        raise BadSinkError("Sink is None")
    if isinstance(sink, StandardOutput):
        if sys.stdout is None:
            raise BadSinkError("There is no standard output")
        return getattr(sys.stdout, "buffer", sys.stdout), "<stdout>", False
    if isinstance(sink, (str, bytes, os.PathLike)):
        try:
            stream = open(sink, "wb")
        except OSError as err:
            raise BadSinkError(f"Could not open {sink} for writing: {err}") from err
        logger.debug("Opened %s for writing", sink)
        return stream, os.fsdecode(sink), True
    if isinstance(sink, socket.socket):
        if sink.fileno() < 0:
            raise BadSinkError(f"Could not open {sink}: socket is closed")
        return sink.makefile("wb"), "<socket>", True
    if hasattr(sink, "write"):
        if isinstance(sink, io.TextIOBase) and hasattr(sink, "buffer"):
            sink = sink.buffer
        return sink, getattr(sink, "name", "<stream>"), True
    raise BadSinkError(f"Cannot write to {sink!r}")


def to_text(value):
    """
    Booleans are written as "true" and "false", the words read_boolean()
    reads, other values with str().
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class Writer:
    """
    Writes values as UTF-8 text to a sink, flushing after every call.

    >>> out = Writer(io.BytesIO())
    >>> out.println(17)
    >>> out.printf("%.3f", 1 / 3)
    """

    def __init__(self, sink=StandardOutput()):
        """
        :param sink: StandardOutput() (the default), a file name or
            pathlib.Path, a socket or any writable stream.
        :raises BadSinkError: If the sink could not be opened.
        """
        self.stream, self.name, self._owns_stream = open_sink(sink)
        self._text_stdout = sys.stdout if isinstance(sink, StandardOutput) else None
        self._closed = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def __repr__(self):
        return f"Writer({self.name!r})"

    def _write(self, text):
        if self._text_stdout is not None:
            # text already written through sys.stdout must come first
            self._text_stdout.flush()
        if isinstance(self.stream, io.TextIOBase):
            self.stream.write(text)
        else:
            self.stream.write(text.encode(ENCODING))
        self.stream.flush()

    def print(self, value=None):
        """
        Write the value, or only flush if no value is given.
        """
        if value is None:
            self.stream.flush()
        else:
            self._write(to_text(value))

    def println(self, value=""):
        self._write(to_text(value) + "\n")

    def printf(self, format_string, *args, locale=None):
        """
        Write the args formatted with %-formatting, ie.
        printf("%d: %.2f", 1, 2.5) writes "1: 2.50".

        :param locale: A locale name such as "de_DE.UTF-8", used for the
            decimal point and digit grouping. By default numbers are
            formatted without regard to the locale of the process.
        """
        if locale is None:
            self._write(format_string % args)
        else:
            with numeric_locale(locale):
                self._write(locale_module.format_string(format_string, args))

    def close(self):
        if self._closed:
            return
        self._closed = True
        try:
            self.stream.flush()
            if self._owns_stream:
                self.stream.close()
        except (OSError, ValueError) as err:
            warnings.warn(f"Failed to close {self.name}: {err}", stacklevel=2)
