"""
In this module, a tokenizer is a generator that takes a stream and generates
tokens. If an error occurs, the function winds back the stream to the position
to where it started generating and raises an Error.

Token combinator is any function which returns a tokenizer.

A log format is a sequence of literal text and directives. Each directive
starts with '%' followed by either a single character code ('%h'), a
parameter in braces followed by a marker ('%{User-Agent}i', '%{local}p',
'%{name}^ti') or the final status '%>s'. As every directive is decided by a
bounded number of characters after the '%', backtracking only happens within
one directive, and there is no bookkeeping of backtracking points.

The tokenizers accept both text and byte streams. For text streams, offsets
are in characters and for byte streams in bytes, where parameters and
literals are decoded as utf-8.
"""

from .directive import Directive
from .directive_kind import DirectiveKind, PIDType, PortType
from .format_tokenizer import LogFormatTokenizer
from .token import Token

__all__ = [
    "Directive",
    "DirectiveKind",
    "LogFormatTokenizer",
    "PIDType",
    "PortType",
    "Token",
]
