from functools import cached_property

from _logformat.tokenizer.combinators import one_of
from _logformat.tokenizer.common import as_chars, as_text, tokenize_word
from _logformat.tokenizer.directive import Directive
from _logformat.tokenizer.directive_kind import DirectiveKind, PIDType, PortType
from _logformat.tokenizer.errors import ErrorReason, TokenizationError
from _logformat.tokenizer.token import Token


class DirectiveTokenizer:
    """
    Tokenizer for a single directive, ie. '%h' or '%{User-Agent}i'.

    The recognizers for directives with a parameter in braces are tried
    in a fixed order before falling back to the single character codes,
    see tokenize_directive_body.
    """

    def __init__(self, stream):
        """
        :param stream: A text or byte stream containing a log format.
        """
        self.stream = stream

    def tokenize_parameter(self):
        """
        Tokenize a parameter in braces, yields "User-Agent" for
        stream containing "{User-Agent}". The parameter is any
        non-empty sequence of characters other than '}'.
        """
        start = self.stream.tell()
        read_char = as_chars(self.stream.read(1))
        if read_char != "{":
            self.stream.seek(start)
            raise TokenizationError(f"Expected parameter at {start}", position=start)

        param_start = self.stream.tell()
        param_end = param_start
        read_char = as_chars(self.stream.read(1))
        while read_char and read_char != "}":
            param_end = self.stream.tell()
            read_char = as_chars(self.stream.read(1))

        if not read_char:
            self.stream.seek(start)
            raise TokenizationError(
                f"Reached end of stream while reading parameter at {start}",
                position=param_end,
                reason=ErrorReason.UNTERMINATED_PARAMETER,
            )
        if param_end == param_start:
            self.stream.seek(start)
            raise TokenizationError(
                f"Empty parameter at {start}",
                position=param_start,
                reason=ErrorReason.EMPTY_PARAMETER,
            )

        end = self.stream.tell()
        self.stream.seek(param_start)
        raw = self.stream.read(param_end - param_start)
        self.stream.seek(end)
        try:
            yield as_text(raw, param_start)
        except TokenizationError:
            self.stream.seek(start)
            raise

    def tokenize_marked_parameter(self, marker):
        """
        Combinator for a parameter in braces followed by the given
        marker, the resulting tokenizer yields the parameter and the
        stream position of the marker.
        """
        tokenize_marker = tokenize_word(self.stream, marker)

        def tokenizer():
            start = self.stream.tell()
            param = next(self.tokenize_parameter())
            marker_start = self.stream.tell()
            try:
                yield from tokenize_marker()
            except TokenizationError:
                self.stream.seek(start)
                raise
            yield param, marker_start

        return tokenizer

    def tokenize_named(self, kind, marker):
        """
        Combinator for directives taking a name, ie.
        tokenize_named(DirectiveKind.COOKIE, "C") yields
        Directive(DirectiveKind.COOKIE, "FOO") for stream containing "{FOO}C".
        """
        tokenize_marked = self.tokenize_marked_parameter(marker)

        def tokenizer():
            param, _ = next(tokenize_marked())
            yield Directive(kind, param)

        return tokenizer

    def tokenize_typed(self, kind, marker, param_type):
        """
        Combinator for directives taking one of a closed set of literals,
        ie. tokenize_typed(DirectiveKind.PORT, "p", PortType) yields
        Directive(DirectiveKind.PORT, PortType.LOCAL) for stream
        containing "{local}p". Any other parameter is an error, there
        is no fallback to an arbitrary name.
        """
        tokenize_marked = self.tokenize_marked_parameter(marker)

        def tokenizer():
            start = self.stream.tell()
            param, marker_start = next(tokenize_marked())
            try:
                typ = param_type(param)
            except ValueError as err:
                self.stream.seek(start)
                raise TokenizationError(
                    f"Expected one of {[t.value for t in param_type]} at {start},"
                    f" got {param!r}",
                    position=marker_start,
                    reason=ErrorReason.LITERAL_SET_MISMATCH,
                ) from err
            yield Directive(kind, typ)

        return tokenizer

    def tokenize_fixed(self, word, directive):
        """
        Combinator for directives spelled with a fixed word,
        such as "{c}a" and ">s".
        """
        tokenize = tokenize_word(self.stream, word)

        def tokenizer():
            yield from tokenize()
            yield directive

        return tokenizer

    def tokenize_single_character(self):
        """
        Tokenize a single character code, yields Directive(DirectiveKind.HOSTNAME)
        for stream containing "h", see Directive.from_char.
        """
        start = self.stream.tell()
        read_char = as_chars(self.stream.read(1))
        if not read_char:
            raise TokenizationError(
                f"Reached end of stream while expecting directive at {start}",
                position=start,
                reason=ErrorReason.INCOMPLETE_DIRECTIVE,
            )
        try:
            directive = Directive.from_char(read_char)
        except ValueError as err:
            self.stream.seek(start)
            raise TokenizationError(
                f"Unknown directive {read_char!r} at {start}", position=start
            ) from err
        yield directive

    @cached_property
    def tokenize_alternatives(self):
        named = {
            kind: self.tokenize_named(kind, marker)
            for kind, marker in DirectiveKind.named_markers().items()
        }
        return one_of(
            self.tokenize_fixed("{c}a", Directive(DirectiveKind.PEER_IP)),
            named[DirectiveKind.COOKIE],
            named[DirectiveKind.ENV_VAR],
            named[DirectiveKind.REQ_HEADER],
            named[DirectiveKind.NOTE],
            named[DirectiveKind.RES_HEADER],
            self.tokenize_typed(DirectiveKind.PORT, "p", PortType),
            self.tokenize_typed(DirectiveKind.PID, "P", PIDType),
            self.tokenize_fixed(">s", Directive(DirectiveKind.FINAL_STATUS)),
            named[DirectiveKind.REQ_TRAILER],
            named[DirectiveKind.RES_TRAILER],
            self.tokenize_single_character,
        )

    def tokenize_directive_body(self):
        """
        Tokenize a directive following the '%', yields
        Token(Directive(DirectiveKind.REQ_HEADER, "Host"), 0, 6) for
        stream containing "{Host}i".
        """
        start = self.stream.tell()
        directive = next(self.tokenize_alternatives())
        yield Token(directive, start, self.stream.tell())

    def tokenize_directive(self):
        """
        Tokenize a directive including the leading '%', yields
        Token(Directive(DirectiveKind.FINAL_STATUS), 0, 3) for stream
        containing "%>s".
        """
        start = self.stream.tell()
        yield from tokenize_word(self.stream, "%")()
        try:
            token = next(self.tokenize_directive_body())
        except TokenizationError:
            self.stream.seek(start)
            raise
        yield Token(token.directive, start, token.end)
