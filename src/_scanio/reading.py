import warnings

from _scanio.errors import EndOfInputError, IoError, ParseError
from _scanio.numeric import parse_array, parse_boolean, parse_float, parse_integer
from _scanio.source import (
    DEFAULT_BUFFER_SIZE,
    Scanner,
    StandardInput,
    String,
    as_source,
    resolve,
)
from _scanio.tokenizer import CharStream, DelimiterMode, Tokenizer, split_words
from _scanio.tokenizer.errors import TokenizationError


class Reader:
    """
    Reads whitespace separated tokens, characters and lines from a source
    and parses them as numbers, booleans and strings.

    >>> reader = Reader.from_string("  123  hello  3.14\\n")
    >>> reader.read_int()
    123
    >>> reader.read_string()
    'hello'
    >>> reader.read_double()
    3.14
    >>> reader.is_empty()
    True

    Reading a token discards the whitespace before it, reading a line
    discards its line terminator. Every read raises EndOfInputError when
    there is nothing left to read, so a read never returns None. The
    has_next_* methods tell whether the corresponding read would succeed
    without consuming anything.

    A Reader is not safe to use from several threads at once.
    """

    def __init__(
        self,
        source=StandardInput(),
        package=None,
        timeout=None,
        buffer_size=DEFAULT_BUFFER_SIZE,
    ):
        """
        :param source: What to read from. Either a source descriptor (see
            _scanio.source) or a str (name of a file, packaged resource or
            url), a pathlib.Path, a socket, an open stream or a Tokenizer.
            Defaults to standard input.
        :param package: The package to look up resources in when resolving
            a name, defaults to the package of __main__.
        :param timeout: Timeout in seconds when opening urls.
        :param buffer_size: Buffer size for opened files and sockets.
        :raises BadSourceError: If the source could not be opened.
        """
        source = as_source(source)
        if isinstance(source, Scanner):
            self._tokenizer = source.tokenizer
            self.name = "<scanner>"
            self._owns_stream = False
        else:
            opened = resolve(source, package, timeout, buffer_size)
            self._tokenizer = Tokenizer(CharStream(opened.stream))
            self.name = opened.name
            self._owns_stream = opened.owned
        self._closed = False

    @classmethod
    def from_string(cls, text):
        return cls(String(text))

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def __del__(self):
        # __init__ may have failed before the tokenizer was set
        if hasattr(self, "_closed"):
            self.close()

    def __repr__(self):
        return f"Reader({self.name!r})"

    @property
    def tokenizer(self):
        if self._closed:
            raise IoError(f"Reader for {self.name} is closed")
        return self._tokenizer

    def exists(self):
        """
        :returns: True if the reader has a source to read from, ie. it has
            not been closed.
        """
        return not self._closed

    def close(self):
        """
        Release the source. Closing twice does nothing, and a tokenizer
        shared through a Scanner source or the standard input is left open.
        """
        if self._closed:
            return
        self._closed = True
        if self._owns_stream:
            try:
                self._tokenizer.close()
            except OSError as err:
                warnings.warn(f"Failed to close {self.name}: {err}", stacklevel=2)

    def _peek(self, mode=DelimiterMode.WHITESPACE):
        return self.tokenizer.peek_value(mode)

    def _next(self, mode=DelimiterMode.WHITESPACE, what="token"):
        try:
            value = self.tokenizer.next_value(mode)
        except TokenizationError as err:
            raise EndOfInputError(f"No {what} left in {self.name}") from err
        self._tokenizer.commit()
        return value

    def _next_parsed(self, parse, *args):
        token = self._peek()
        if token is None:
            raise EndOfInputError(f"No token left in {self.name}")
        value = parse(token, *args)
        self._next()
        return value

    def _has_next_parsed(self, parse, *args):
        token = self._peek()
        if token is None:
            return False
        try:
            parse(token, *args)
        except ParseError:
            return False
        return True

    def is_empty(self):
        """
        :returns: True if only whitespace is left.
        """
        return self._peek() is None

    def has_next_line(self):
        """
        :returns: True if there is another line, which is the case as long
            as any character is left (even when it is a line terminator).
        """
        return self.tokenizer.has_next_line()

    def has_next_char(self):
        """
        :returns: True if any character, including whitespace, is left.
        """
        return self._peek(DelimiterMode.EMPTY) is not None

    def has_next_int(self):
        return self._has_next_parsed(parse_integer, "int")

    def has_next_long(self):
        return self._has_next_parsed(parse_integer, "long")

    def has_next_short(self):
        return self._has_next_parsed(parse_integer, "short")

    def has_next_byte(self):
        return self._has_next_parsed(parse_integer, "byte")

    def has_next_float(self):
        return self._has_next_parsed(parse_float, "float")

    def has_next_double(self):
        return self._has_next_parsed(parse_float, "double")

    def has_next_boolean(self):
        return self._has_next_parsed(parse_boolean)

    def read_line(self):
        """
        :returns: The rest of the current line without its terminator.
        """
        try:
            line = self.tokenizer.next_line()
        except TokenizationError as err:
            raise EndOfInputError(f"No line left in {self.name}") from err
        self._tokenizer.commit()
        return line

    def read_char(self):
        """
        :returns: The next character, which may be whitespace.
        """
        return self._next(DelimiterMode.EMPTY, "character")

    def read_all(self):
        """
        :returns: Everything that is left, including whitespace.
        :raises EndOfInputError: If no character is left.
        """
        if not self.has_next_char():
            raise EndOfInputError(f"No input left in {self.name}")
        return self._next(DelimiterMode.ALL)

    def read_string(self):
        """
        :returns: The next whitespace delimited token.
        """
        return self._next()

    def read_int(self):
        """
        :returns: The next token as a 32 bit signed integer.
        :raises ParseError: If the next token is not such an integer. The
            token is then left unread.
        """
        return self._next_parsed(parse_integer, "int")

    def read_long(self):
        return self._next_parsed(parse_integer, "long")

    def read_short(self):
        return self._next_parsed(parse_integer, "short")

    def read_byte(self):
        return self._next_parsed(parse_integer, "byte")

    def read_float(self):
        """
        :returns: The next token as a float, rounded to single precision.
        """
        return self._next_parsed(parse_float, "float")

    def read_double(self):
        return self._next_parsed(parse_float, "double")

    def read_boolean(self):
        """
        :returns: True for "true" or "1" and False for "false" or "0", the
            words are case-insensitive.
        :raises ParseError: For any other token.
        """
        return self._next_parsed(parse_boolean)

    def read_all_strings(self):
        """
        :returns: All remaining tokens as a list, empty if only whitespace
            is left.
        """
        remaining = self.tokenizer.next_value(DelimiterMode.ALL)
        self._tokenizer.commit()
        return split_words(remaining)

    def read_all_lines(self):
        lines = []
        while self.has_next_line():
            lines.append(self.read_line())
        return lines

    def read_all_ints(self):
        """
        :returns: All remaining tokens as a numpy array of int32.
        :raises ParseError: If any token is not an int. The input is then
            consumed and no array is returned.
        """
        return parse_array(self.read_all_strings(), "int")

    def read_all_longs(self):
        return parse_array(self.read_all_strings(), "long")

    def read_all_doubles(self):
        return parse_array(self.read_all_strings(), "double")
