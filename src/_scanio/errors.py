class BadSourceError(Exception):
    """
    Raised when constructing a reader if the source is absent, cannot be
    opened, or (for a name) could not be resolved as a file, a packaged
    resource or a url.
    """

    pass


class BadSinkError(Exception):
    """
    Raised when constructing a writer on a sink that cannot be opened.
    """

    pass


class EndOfInputError(Exception):
    """
    Raised by a read when no more content of the required shape is
    available, ie. read_string() on a stream with only whitespace left.
    """

    pass


class ParseError(Exception):
    """
    Raised when a token could not be interpreted as the requested type.

    :ivar token: The offending token.
    :ivar index: For bulk reads, the index of the offending token,
        otherwise None.
    """

    def __init__(self, message, token=None, index=None):
        super().__init__(message)
        self.token = token
        self.index = index


class IoError(Exception):
    """
    Raised when the underlying byte stream fails mid-read or produces
    invalid UTF-8.
    """

    pass
