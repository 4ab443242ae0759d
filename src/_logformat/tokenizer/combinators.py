from _logformat.tokenizer.errors import ErrorReason, TokenizationError


def most_relevant(errors):
    """
    Pick the failure that explains the input best, ie. the one that
    got furthest into the stream. On ties, a specific reason is
    preferred over running out of input, which is preferred over
    ErrorReason.UNKNOWN_DIRECTIVE.
    """

    def relevance(err):
        position = -1 if err.position is None else err.position
        if err.reason == ErrorReason.UNKNOWN_DIRECTIVE:
            priority = 0
        elif err.reason == ErrorReason.INCOMPLETE_DIRECTIVE:
            priority = 1
        else:
            priority = 2
        return (position, priority)

    return max(errors, key=relevance)


def one_of(*tokenizers):
    """
    Combinator for tokenizers.

    :param tokenizers: List of tokenizers.
    :returns: A tokenizer that yields tokens from the
    first tokenizer in tokenizers that succeeds.
    """

    def one_of_tokenizer():
        did_yield = False
        errors = []
        for tok in tokenizers:
            try:
                yield from tok()
                did_yield = True
                break
            except TokenizationError as err:
                errors.append(err)

        if not did_yield:
            best = most_relevant(errors)
            raise TokenizationError(
                "Tokenization failed, due to one of\n*"
                + ("\n*".join(str(err) for err in errors)),
                position=best.position,
                reason=best.reason,
            )

    return one_of_tokenizer
