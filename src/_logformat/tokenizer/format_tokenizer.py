from functools import cached_property

from _logformat.tokenizer.combinators import one_of
from _logformat.tokenizer.common import as_chars, as_text, read_fragment
from _logformat.tokenizer.directive import Directive
from _logformat.tokenizer.directive_kind import DirectiveKind
from _logformat.tokenizer.directive_tokenizer import DirectiveTokenizer
from _logformat.tokenizer.errors import MalformedFormatError, TokenizationError
from _logformat.tokenizer.token import Token


class LogFormatTokenizer:
    """
    The log format tokenizer is an iterable of tokens for a given stream
    containing a log format, ie. for '%h "%r"' it generates

        [
            Token(Directive(DirectiveKind.HOSTNAME), 0, 2),
            Token(Directive(DirectiveKind.LITERAL, ' "'), 2, 4),
            Token(Directive(DirectiveKind.REQ_FIRST_LINE), 4, 6),
            Token(Directive(DirectiveKind.LITERAL, '"'), 6, 7),
        ]

    If a '%' is found which does not start a valid directive, iteration
    stops by raising MalformedFormatError. Tokens generated up to that
    point are valid.
    """

    def __init__(self, stream):
        """
        :param stream: A seekable text or byte stream containing a log format.
        """
        self.stream = stream
        self.directive_tokenizer = DirectiveTokenizer(stream)

    def __iter__(self):
        return self.tokenize_log_format()

    @cached_property
    def tokenize_element(self):
        return one_of(
            self.directive_tokenizer.tokenize_directive, self.tokenize_literal
        )

    def tokenize_log_format(self):
        """
        Tokenize directives and literals until the end of the stream.
        Each token consumes at least one character, so this terminates.
        """
        while not self.at_end_of_format():
            start = self.stream.tell()
            try:
                token = next(self.tokenize_element())
            except TokenizationError as err:
                raise MalformedFormatError(
                    start, err.reason, read_fragment(self.stream, start, err.position)
                ) from err
            yield token

    def tokenize_literal(self):
        """
        Tokenize the longest run of characters not containing '%', yields
        Token(Directive(DirectiveKind.LITERAL, ' "'), 0, 2) for stream
        containing ' "%r'.
        """
        start = self.stream.tell()
        end = start
        read_char = as_chars(self.stream.read(1))
        while read_char and read_char != "%":
            end = self.stream.tell()
            read_char = as_chars(self.stream.read(1))

        self.stream.seek(start)
        if end == start:
            raise TokenizationError(f"Expected literal at {start}", position=start)

        raw = self.stream.read(end - start)
        try:
            text = as_text(raw, start)
        except TokenizationError:
            self.stream.seek(start)
            raise
        yield Token(Directive(DirectiveKind.LITERAL, text), start, end)

    def at_end_of_format(self):
        start = self.stream.tell()
        read_char = self.stream.read(1)
        self.stream.seek(start)
        return not read_char
