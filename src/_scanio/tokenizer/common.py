from _scanio.tokenizer.errors import TokenizationError
from _scanio.tokenizer.token import Token


def tokenize_word(stream, word, kind):
    """
    Token combinator for fixed words, ie. when the stream contains "\\r\\n",
    tokenize_word(stream, "\\r\\n", TokenKind.LINE_TERMINATOR) will yield
    Token(kind=TokenKind.LINE_TERMINATOR, 0, 2).

    :param stream: The CharStream to tokenize.
    :param word: Any word to be matched by the tokenizer.
    :param kind: The kind of token yielded by the tokenizer.
    :returns: Tokenizer for the given word.
    """
    word_len = len(word)

    def word_tokenizer():
        start = stream.tell()
        read = stream.read(word_len)
        if read != word:
            stream.seek(start)
            raise TokenizationError(
                f"Expected {repr(word)} at {start}, got {repr(read)}"
            )
        yield Token(kind, start, stream.tell())

    return word_tokenizer


def tokenize_while(stream, predicate, kind):
    """
    Token combinator for a non-empty run of characters satisfying predicate.
    The character following the run is left unread.
    """

    def run_tokenizer():
        start = stream.tell()
        end = start
        read_char = stream.read(1)
        while read_char and predicate(read_char):
            end = stream.tell()
            read_char = stream.read(1)
        stream.seek(end)
        if end == start:
            raise TokenizationError(f"Expected {kind.name.lower()} at {start}")
        yield Token(kind, start, end)

    return run_tokenizer
