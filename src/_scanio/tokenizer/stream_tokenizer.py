import re
from functools import cached_property

from _scanio.errors import IoError
from _scanio.tokenizer.combinators import bind, one_of, optional, repeated
from _scanio.tokenizer.common import tokenize_while, tokenize_word
from _scanio.tokenizer.errors import TokenizationError
from _scanio.tokenizer.token import Token
from _scanio.tokenizer.token_kind import (
    LINE_TERMINATORS,
    WHITESPACE,
    DelimiterMode,
    TokenKind,
)

LINE_TERMINATOR_STARTS = frozenset(t[0] for t in LINE_TERMINATORS)

WHITESPACE_RUN = re.compile("[" + re.escape("".join(sorted(WHITESPACE))) + "]+")


def is_space(char):
    return char in WHITESPACE


def is_not_space(char):
    return char not in WHITESPACE


def split_words(text):
    """
    Split text on runs of whitespace, ie. split_words(" a\\tb ") == ["a", "b"].
    """
    return [word for word in WHITESPACE_RUN.split(text) if word]


class Tokenizer:
    """
    Splits a CharStream into tokens. The delimiter mode is given for each
    token, there is no mode kept between reads:

    >>> tokenizer = Tokenizer(CharStream(io.BytesIO(b" ab c")))
    >>> tokenizer.next_value(DelimiterMode.EMPTY)
    ' '
    >>> tokenizer.next_value()
    'ab'
    >>> tokenizer.next_value(DelimiterMode.ALL)
    ' c'

    """

    def __init__(self, stream):
        """
        :param stream: A CharStream.
        """
        self._stream = stream

    @property
    def stream(self):
        return self._stream

    @cached_property
    def tokenize_space(self):
        return tokenize_while(self.stream, is_space, TokenKind.WHITESPACE)

    def tokenize_delimiter(self):
        """
        Skip a possibly empty run of whitespace.

        Note: does not actually yield a token for the whitespace.
        """
        for _ in repeated(self.tokenize_space)():
            pass
        return iter([])

    @cached_property
    def tokenize_word(self):
        """
        Tokenize the next whitespace delimited word, yields
        Token(TokenKind.WORD, 2, 5) for stream containing "  abc def".
        """
        return bind(
            self.tokenize_delimiter,
            tokenize_while(self.stream, is_not_space, TokenKind.WORD),
        )

    def tokenize_char(self):
        start = self.stream.tell()
        if not self.stream.read(1):
            raise TokenizationError(f"Expected character at {start}")
        yield Token(TokenKind.CHAR, start, start + 1)

    def tokenize_remaining(self):
        """
        Tokenize the rest of the stream, which may be empty.
        """
        start = self.stream.tell()
        self.stream.read()
        yield Token(TokenKind.REMAINING, start, self.stream.tell())

    @cached_property
    def tokenize_line_terminator(self):
        """
        Tokenize one line terminator. The character after the terminator is
        only looked at when the terminator is "\\r", so that a line ending
        in "\\n" is complete without waiting for more input.
        """
        carriage_return = bind(
            tokenize_word(self.stream, "\r", TokenKind.LINE_TERMINATOR),
            optional(tokenize_word(self.stream, "\n", TokenKind.LINE_TERMINATOR)),
        )
        return one_of(
            carriage_return,
            *[
                tokenize_word(self.stream, terminator, TokenKind.LINE_TERMINATOR)
                for terminator in LINE_TERMINATORS
                if len(terminator) == 1 and terminator != "\r"
            ],
        )

    def tokenize_line(self):
        """
        Tokenize a line, yields Token(TokenKind.LINE, 0, 3) for stream
        containing "abc\\r\\ndef". The line terminator is consumed but not part
        of the token. A line is found as long as the stream is not at its
        end, so "\\n" is one empty line.
        """
        start = self.stream.tell()
        end = start
        read_char = self.stream.read(1)
        if not read_char:
            raise TokenizationError(f"Expected line at {start}")
        while read_char and read_char not in LINE_TERMINATOR_STARTS:
            end = self.stream.tell()
            read_char = self.stream.read(1)
        self.stream.seek(end)
        for _ in optional(self.tokenize_line_terminator)():
            pass
        yield Token(TokenKind.LINE, start, end)

    @cached_property
    def tokenize_mode(self):
        return {
            DelimiterMode.WHITESPACE: self.tokenize_word,
            DelimiterMode.EMPTY: self.tokenize_char,
            DelimiterMode.ALL: self.tokenize_remaining,
        }

    def _next(self, tokenizer):
        start = self.stream.tell()
        try:
            return next(tokenizer())
        except (TokenizationError, IoError):
            self.stream.seek(start)
            raise

    def _peek(self, tokenizer):
        start = self.stream.tell()
        try:
            token = self._next(tokenizer)
        except TokenizationError:
            return None
        value = token.get_value(self.stream)
        self.stream.seek(start)
        return value

    def next_value(self, mode=DelimiterMode.WHITESPACE):
        """
        Consume the next token in the given delimiter mode.

        :returns: The token as a string.
        :raises TokenizationError: If there is no such token, in which
            case nothing is consumed.
        """
        return self._next(self.tokenize_mode[mode]).get_value(self.stream)

    def peek_value(self, mode=DelimiterMode.WHITESPACE):
        """
        :returns: The value next_value(mode) would return, or None if it
            would fail. Nothing is consumed.
        """
        return self._peek(self.tokenize_mode[mode])

    def next_line(self):
        return self._next(self.tokenize_line).get_value(self.stream)

    def has_next_line(self):
        return self._peek(self.tokenize_line) is not None

    def commit(self):
        """
        Forget everything consumed so far, no more winding back past this
        point is needed.
        """
        self.stream.discard()

    def close(self):
        self.stream.close()
