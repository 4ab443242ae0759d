import io

import pytest

from _logformat.tokenizer.combinators import most_relevant, one_of
from _logformat.tokenizer.common import is_binary_stream, read_fragment, tokenize_word
from _logformat.tokenizer.errors import ErrorReason, TokenizationError


def word(stream, w):
    tokenize = tokenize_word(stream, w)

    def tokenizer():
        yield from tokenize()
        yield w

    return tokenizer


def failing(position, reason):
    def tokenizer():
        raise TokenizationError("failed", position=position, reason=reason)

    return tokenizer


@pytest.mark.parametrize(
    "inp_str, expected", [("foo", "foo"), ("foobar", "foo"), ("bar", "bar")]
)
def test_one_of(inp_str, expected):
    stream = io.StringIO(inp_str)

    test_tokenizer = one_of(word(stream, "foo"), word(stream, "bar"))()

    assert next(test_tokenizer) == expected
    assert stream.tell() == 3


def test_one_of_first_success_wins():
    stream = io.StringIO("foobar")

    test_tokenizer = one_of(word(stream, "foo"), word(stream, "foobar"))()

    assert next(test_tokenizer) == "foo"


def test_one_of_reports_furthest_failure():
    stream = io.StringIO("fob")

    with pytest.raises(TokenizationError) as err:
        next(one_of(word(stream, "bar"), word(stream, "foo"))())

    assert err.value.position == 2
    assert err.value.reason == ErrorReason.UNKNOWN_DIRECTIVE
    assert stream.tell() == 0


def test_one_of_incomplete():
    stream = io.StringIO("fo")

    with pytest.raises(TokenizationError) as err:
        next(one_of(word(stream, "bar"), word(stream, "foo"))())

    assert err.value.position == 2
    assert err.value.reason == ErrorReason.INCOMPLETE_DIRECTIVE


@pytest.mark.parametrize(
    "reasons, expected",
    [
        (
            [ErrorReason.UNKNOWN_DIRECTIVE, ErrorReason.INCOMPLETE_DIRECTIVE],
            ErrorReason.INCOMPLETE_DIRECTIVE,
        ),
        (
            [ErrorReason.INCOMPLETE_DIRECTIVE, ErrorReason.UNTERMINATED_PARAMETER],
            ErrorReason.UNTERMINATED_PARAMETER,
        ),
        (
            [ErrorReason.EMPTY_PARAMETER, ErrorReason.UNKNOWN_DIRECTIVE],
            ErrorReason.EMPTY_PARAMETER,
        ),
    ],
)
def test_most_relevant_on_tie(reasons, expected):
    errors = [TokenizationError("failed", position=3, reason=r) for r in reasons]
    assert most_relevant(errors).reason == expected


def test_most_relevant_prefers_position():
    errors = [
        TokenizationError("failed", position=5),
        TokenizationError(
            "failed", position=3, reason=ErrorReason.LITERAL_SET_MISMATCH
        ),
    ]
    assert most_relevant(errors).position == 5


def test_one_of_all_failing():
    with pytest.raises(TokenizationError, match="Tokenization failed") as err:
        next(
            one_of(
                failing(1, ErrorReason.UNKNOWN_DIRECTIVE),
                failing(4, ErrorReason.EMPTY_PARAMETER),
            )()
        )
    assert err.value.position == 4
    assert err.value.reason == ErrorReason.EMPTY_PARAMETER


def test_tokenize_word_binary():
    stream = io.BytesIO(b"^ti")
    assert list(tokenize_word(stream, "^ti")()) == []
    assert stream.tell() == 3


def test_tokenize_word_mismatch_rewinds():
    stream = io.BytesIO(b"^tx")
    with pytest.raises(TokenizationError, match="did not match") as err:
        tokenize_word(stream, "^ti")()
    assert err.value.position == 2
    assert stream.tell() == 0


def test_is_binary_stream():
    assert is_binary_stream(io.BytesIO(b"%h"))
    assert not is_binary_stream(io.StringIO("%h"))


def test_read_fragment_decodes_bytes():
    stream = io.BytesIO("%{Ü".encode("utf-8"))
    assert read_fragment(stream, 0, 10) == "%{Ü"
    assert stream.tell() == 0


def test_read_fragment_text():
    stream = io.StringIO("ab %{x")
    assert read_fragment(stream, 3, 4) == "%{"
    assert stream.tell() == 3
