from dataclasses import dataclass

from _scanio.tokenizer.token_kind import TokenKind


@dataclass
class Token:
    """
    A token in a character stream, spanning the positions start to end.
    """

    kind: TokenKind
    start: int
    end: int

    def get_value(self, stream):
        """
        :returns: The characters spanned by the token. The token must not
            have been discarded from the stream.
        """
        go_back = stream.tell()
        stream.seek(self.start)
        value = stream.read(self.end - self.start)
        stream.seek(go_back)
        return value
