"""
Entry points for turning a log format into a list of directives, see
LogFormatTokenizer for the grammar. The format is parsed once and the
resulting directives are reused when writing every log line.
"""

import io
import logging
from dataclasses import dataclass
from typing import Optional

from _logformat.tokenizer import LogFormatTokenizer
from _logformat.tokenizer.common import read_fragment
from _logformat.tokenizer.directive_tokenizer import DirectiveTokenizer
from _logformat.tokenizer.errors import (
    ErrorReason,
    MalformedFormatError,
    TokenizationError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParseOutcome:
    """
    Whether a log format was consumed in full. If not, offset is the
    position of the '%' where parsing stopped, reason the ErrorReason and
    fragment the offending part of the format.
    """

    offset: Optional[int] = None
    reason: Optional[ErrorReason] = None
    fragment: Optional[str] = None

    @classmethod
    def from_error(cls, err):
        return cls(err.offset, err.reason, err.fragment)

    @property
    def is_complete(self):
        return self.reason is None

    def raise_for_error(self):
        """
        :raises MalformedFormatError: If the format was not consumed in full.
        """
        if not self.is_complete:
            raise MalformedFormatError(self.offset, self.reason, self.fragment)


COMPLETE = ParseOutcome()


def make_stream(log_format):
    """
    :param log_format: A log format given as a string, byte string or
        a stream (text or binary) to read the format from.
    :returns: A seekable stream positioned at the start of the format.
    """
    if isinstance(log_format, str):
        return io.StringIO(log_format)
    if isinstance(log_format, (bytes, bytearray, memoryview)):
        return io.BytesIO(bytes(log_format))
    if hasattr(log_format, "read"):
        contents = log_format.read()
        if isinstance(contents, (str, bytes)):
            return make_stream(contents)
    raise TypeError(
        f"Expected log format as str, bytes or stream, got {type(log_format)}"
    )


def tokenize(log_format):
    """
    Tokenize the log format, ie.

    >>> tokens, outcome = tokenize("%h %>s")
    >>> [(t.start, t.end) for t in tokens]
    [(0, 2), (2, 3), (3, 6)]

    :returns: Tuple of the list of tokens and the ParseOutcome. If the format
        is malformed, the list contains the tokens preceding the error.
    """
    tokens = []
    try:
        for token in LogFormatTokenizer(make_stream(log_format)):
            tokens.append(token)
    except MalformedFormatError as err:
        logger.debug(
            "Log format %r stopped after %d tokens: %s", log_format, len(tokens), err
        )
        return tokens, ParseOutcome.from_error(err)

    logger.debug("Log format %r tokenized into %d tokens", log_format, len(tokens))
    return tokens, COMPLETE


def parse(log_format):
    """
    Parse the log format into directives, ie.

    >>> parse("%h %{Referer}i")
    ([Directive(kind=DirectiveKind.HOSTNAME, param=None),
      Directive(kind=DirectiveKind.LITERAL, param=' '),
      Directive(kind=DirectiveKind.REQ_HEADER, param='Referer')],
     ParseOutcome(offset=None, reason=None, fragment=None))

    A malformed format is not silently truncated, the outcome tells where
    and why parsing stopped:

    >>> directives, outcome = parse("%h %{quuz}p")
    >>> outcome.offset, outcome.reason
    (3, <ErrorReason.LITERAL_SET_MISMATCH: ...>)

    :returns: Tuple of the list of directives and the ParseOutcome.
    """
    tokens, outcome = tokenize(log_format)
    return [token.directive for token in tokens], outcome


def parse_directive(fragment):
    """
    Parse one directive from input starting right after the '%', ie.
    parse_directive("{FOO}C") is
    Token(Directive(DirectiveKind.COOKIE, "FOO"), 0, 6). Input following
    the directive is not consumed, see Token.end.

    :raises MalformedFormatError: If the input does not start with a directive.
    """
    stream = make_stream(fragment)
    try:
        return next(DirectiveTokenizer(stream).tokenize_directive_body())
    except TokenizationError as err:
        raise MalformedFormatError(
            0, err.reason, read_fragment(stream, 0, err.position)
        ) from err


def compile_format(log_format):
    """
    Parse the log format, refusing malformed formats. Use this when
    configuring logging, so that a bad format is rejected up front
    rather than writing truncated log lines.

    :returns: The list of directives.
    :raises MalformedFormatError: If the log format is malformed.
    """
    directives, outcome = parse(log_format)
    outcome.raise_for_error()
    return directives
