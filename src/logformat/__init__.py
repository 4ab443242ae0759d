import logformat.version
from _logformat.formats import CLF, FORMATS, format_directives
from _logformat.parsing import (
    ParseOutcome,
    compile_format,
    parse,
    parse_directive,
    tokenize,
)
from _logformat.tokenizer import Directive, DirectiveKind, PIDType, PortType, Token
from _logformat.tokenizer.errors import ErrorReason, MalformedFormatError

__author__ = """LogFormat developers"""

__version__ = logformat.version.version

__all__ = [
    "CLF",
    "FORMATS",
    "Directive",
    "DirectiveKind",
    "ErrorReason",
    "MalformedFormatError",
    "PIDType",
    "ParseOutcome",
    "PortType",
    "Token",
    "compile_format",
    "format_directives",
    "parse",
    "parse_directive",
    "tokenize",
]
