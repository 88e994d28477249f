"""
In this package, a tokenizer is a generator that takes a character stream
and generates tokens. If an error occurs, the tokenizer winds back the stream
to the position where it started generating and raises TokenizationError.

Token combinator is any function which returns a tokenizer.

Which tokens are generated depends on the delimiter mode (see
DelimiterMode). The mode is given for each read, so reading a single
character does not affect how the next word is tokenized.
"""

from .char_stream import DEFAULT_CHUNK_SIZE, CharStream
from .stream_tokenizer import Tokenizer, split_words
from .token_kind import DelimiterMode

__all__ = [
    "CharStream",
    "DEFAULT_CHUNK_SIZE",
    "DelimiterMode",
    "Tokenizer",
    "split_words",
]
