from _scanio.tokenizer.errors import TokenizationError


def bind(*tokenizers):
    """
    Combinator applying each of the tokenizers in sequence.
    """

    def bound_tokenizer():
        for tok in tokenizers:
            yield from tok()

    return bound_tokenizer


def one_of(*tokenizers):
    """
    :param tokenizers: List of tokenizers.
    :returns: A tokenizer that yields tokens from the first tokenizer in
        tokenizers that succeeds.
    """

    def one_of_tokenizer():
        errors = []
        for tok in tokenizers:
            try:
                tokens = list(tok())
            except TokenizationError as err:
                errors.append(str(err))
            else:
                yield from tokens
                return
        raise TokenizationError(
            "Tokenization failed, due to one of\n*" + ("\n*".join(errors))
        )

    return one_of_tokenizer


def repeated(tokenizer):
    """
    :returns: Tokenizer that applies the tokenizer zero or more times, until it
        fails.
    """

    def repeated_tokenizer():
        try:
            while True:
                yield from list(tokenizer())
        except TokenizationError:
            pass

    return repeated_tokenizer


def optional(tokenizer):
    """
    :returns: Tokenizer that applies the tokenizer at most once, yielding
        nothing if it fails.
    """

    def optional_tokenizer():
        try:
            tokens = list(tokenizer())
        except TokenizationError:
            return
        yield from tokens

    return optional_tokenizer
