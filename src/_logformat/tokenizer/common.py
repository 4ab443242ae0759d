from _logformat.tokenizer.errors import ErrorReason, TokenizationError


def is_binary_stream(stream):
    return isinstance(stream.read(0), bytes)


def as_chars(value):
    """
    Make a read from either a text or a byte stream comparable to
    the ascii directive codes. Every byte is mapped to exactly one
    character, so offsets into the read value stay the same.
    """
    if isinstance(value, bytes):
        return value.decode("latin-1")
    return value


def as_text(value, position=None):
    """
    If a bytelike object, decode it as utf-8, otherwise do nothing.
    :param value: A byte string read from a binary stream, or a string.
    :param position: Stream position of value, used for error reporting.
    """
    if isinstance(value, bytes):
        try:
            return value.decode("utf-8")
        except UnicodeDecodeError as err:
            raise TokenizationError(
                f"Could not decode {value!r} at {position} as utf-8",
                position=position,
                reason=ErrorReason.INVALID_ENCODING,
            ) from err
    return value


def tokenize_word(stream, word):
    """
    Token combinator for fixed words, ie. when the stream contains '^ti'
    tokenize_word(stream, '^ti') consumes those three characters.

    Note: does not yield a token for the word, the caller decides
    what the word means.

    :returns: Tokenizer for the given word.
    :param word: Any ascii word to be matched by the tokenizer.
    """
    word_len = len(word)

    def word_tokenizer():
        start = stream.tell()

        read = as_chars(stream.read(word_len))
        if read == word:
            return iter([])

        stream.seek(start)
        mismatch = next(
            (i for i, (got, expected) in enumerate(zip(read, word)) if got != expected),
            len(read),
        )
        if mismatch == len(read):
            raise TokenizationError(
                f"Reached end of stream while expecting {word!r} at {start}",
                position=start + mismatch,
                reason=ErrorReason.INCOMPLETE_DIRECTIVE,
            )
        raise TokenizationError(
            f"Token {read!r} did not match {word!r} at {start}",
            position=start + mismatch,
        )

    return word_tokenizer


def read_fragment(stream, start, position):
    """
    :returns: The contents of stream from start up to and including the
        character at position, decoded for use in error messages. The
        stream is left at start.
    """
    if position is None or position < start:
        position = start
    stream.seek(start)
    value = stream.read(position - start + 1)
    stream.seek(start)
    if is_binary_stream(stream):
        value = value.decode("utf-8", errors="replace")
    return value
