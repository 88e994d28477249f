from enum import Enum, auto, unique


@unique
class TokenKind(Enum):
    WORD = auto()
    WHITESPACE = auto()
    CHAR = auto()
    LINE = auto()
    REMAINING = auto()
    LINE_TERMINATOR = auto()


@unique
class DelimiterMode(Enum):
    """
    The rule used to split the stream into tokens for a single read.

    WHITESPACE: runs of whitespace separate tokens (the resting mode).
    EMPTY: every code point is a token.
    ALL: the remaining stream is one token.
    """

    WHITESPACE = auto()
    EMPTY = auto()
    ALL = auto()


# "\r\n" is a single terminator
LINE_TERMINATORS = ("\r\n", "\n", "\r", "\u2028", "\u2029", "\u0085", "\x0b", "\x0c")

# The Unicode White_Space property. Unlike str.isspace() this does not
# include the information separators U+001C to U+001F.
WHITESPACE = frozenset(
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)
