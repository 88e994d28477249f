class TokenizationError(Exception):
    """
    A tokenizer will throw a TokenizationError if the expected token is not
    found at the current position of the stream. The stream has then been
    wound back to where the tokenizer started.
    """

    pass
