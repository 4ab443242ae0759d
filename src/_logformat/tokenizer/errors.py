from enum import Enum, unique


@unique
class ErrorReason(Enum):
    UNKNOWN_DIRECTIVE = "unknown directive"
    UNTERMINATED_PARAMETER = "unterminated parameter"
    EMPTY_PARAMETER = "empty parameter"
    LITERAL_SET_MISMATCH = "parameter not one of the accepted literals"
    INCOMPLETE_DIRECTIVE = "incomplete directive"
    INVALID_ENCODING = "invalid encoding"


class TokenizationError(Exception):
    """
    A tokenizer will throw a TokenizationError if the expected token
    is not found at the start of the stream (however, it could be that
    any other valid token not covered by that tokenizer is at the
    start of the stream).

    :param position: How far into the stream the tokenizer got before
        failing, used by one_of to pick the most relevant failure.
    :param reason: The ErrorReason reported if this failure ends up
        being the reason the whole format is rejected.
    """

    def __init__(self, message, position=None, reason=ErrorReason.UNKNOWN_DIRECTIVE):
        super().__init__(message)
        self.position = position
        self.reason = reason


class MalformedFormatError(ValueError):
    """
    Raised when a log format contains a '%' which cannot be
    completed into a directive.
    """

    def __init__(self, offset, reason, fragment):
        """
        :param offset: Offset of the '%' starting the malformed directive,
            or of text which could not be decoded.
        :param reason: ErrorReason for the failure.
        :param fragment: The offending part of the format, starting at
            the '%'.
        """
        super().__init__(
            f"Malformed log format at {offset}: {reason.value} {fragment!r}"
        )
        self.offset = offset
        self.reason = reason
        self.fragment = fragment
