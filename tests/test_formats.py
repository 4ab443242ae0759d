import pytest
from hypothesis import given

import logformat
from logformat import CLF, FORMATS, Directive, DirectiveKind, PortType

from .generators.log_formats import log_formats


def test_clf_is_common():
    assert FORMATS["common"] == CLF == '%h %l %u %t "%r" %>s %b'


@pytest.mark.parametrize("name", FORMATS)
def test_predefined_formats_parse(name):
    _, outcome = logformat.parse(FORMATS[name])
    assert outcome.is_complete


def test_combined_format():
    directives = logformat.compile_format(FORMATS["combined"])
    assert directives[len(logformat.compile_format(CLF)) :] == [
        Directive(DirectiveKind.LITERAL, ' "'),
        Directive(DirectiveKind.REQ_HEADER, "Referer"),
        Directive(DirectiveKind.LITERAL, '" "'),
        Directive(DirectiveKind.REQ_HEADER, "User-Agent"),
        Directive(DirectiveKind.LITERAL, '"'),
    ]


def test_format_directives():
    directives = [
        Directive(DirectiveKind.SERVER_NAME),
        Directive(DirectiveKind.LITERAL, ":"),
        Directive(DirectiveKind.PORT, PortType.LOCAL),
        Directive(DirectiveKind.LITERAL, " 100"),
        Directive(DirectiveKind.LITERAL, "%"),
    ]
    assert logformat.format_directives(directives) == "%v:%{local}p 100%%"


def test_format_directives_clf():
    assert logformat.format_directives(logformat.compile_format(CLF)) == CLF


@given(log_formats)
def test_format_directives_inverse(format_str):
    directives = logformat.compile_format(format_str)
    written = logformat.format_directives(directives)
    assert logformat.compile_format(written) == directives


def test_format_directives_splits_percent_in_literal():
    written = logformat.format_directives([Directive(DirectiveKind.LITERAL, "a%b")])
    assert written == "a%%b"
    assert logformat.compile_format(written) == [
        Directive(DirectiveKind.LITERAL, "a"),
        Directive(DirectiveKind.LITERAL, "%"),
        Directive(DirectiveKind.LITERAL, "b"),
    ]


def test_format_directives_merges_adjacent_literals():
    directives = [
        Directive(DirectiveKind.LITERAL, "a"),
        Directive(DirectiveKind.LITERAL, "b"),
    ]
    assert logformat.compile_format(logformat.format_directives(directives)) == [
        Directive(DirectiveKind.LITERAL, "ab")
    ]
