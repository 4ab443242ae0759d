from dataclasses import dataclass
from typing import Optional, Union

from _logformat.tokenizer.directive_kind import DirectiveKind, PIDType, PortType


@dataclass(frozen=True)
class Directive:
    """
    One field of a log line, either literal text or a log attribute
    such as the client ip or a request header.

    >>> Directive(DirectiveKind.REQ_HEADER, "User-Agent").to_format()
    '%{User-Agent}i'

    The param is the text of a LITERAL, the name of a cookie, header,
    environment variable, note or trailer, the PortType of a PORT and
    the PIDType of a PID. All other kinds take no param.
    """

    kind: DirectiveKind
    param: Optional[Union[str, PortType, PIDType]] = None

    def __post_init__(self):
        if self.kind in DirectiveKind.text_parameterized():
            if not isinstance(self.param, str) or not self.param:
                raise ValueError(
                    f"{self.kind} requires a non-empty string, got {self.param!r}"
                )
        elif self.kind == DirectiveKind.PORT:
            if not isinstance(self.param, PortType):
                raise ValueError(f"{self.kind} requires a PortType, got {self.param!r}")
        elif self.kind == DirectiveKind.PID:
            if not isinstance(self.param, PIDType):
                raise ValueError(f"{self.kind} requires a PIDType, got {self.param!r}")
        elif self.param is not None:
            raise ValueError(
                f"{self.kind} does not take a parameter, got {self.param!r}"
            )

    @classmethod
    def from_char(cls, char):
        """
        Look up the directive for a single character code, ie.
        Directive.from_char("h") == Directive(DirectiveKind.HOSTNAME).

        :raises ValueError: If char is not a single character code.
        """
        try:
            return SINGLE_CHARACTER_DIRECTIVES[char]
        except KeyError as err:
            raise ValueError(f"Invalid directive character {char!r}") from err

    def to_format(self):
        """
        :returns: The format string spelling of the directive. Port and
            pid directives with the default type are spelled '%p' and '%P'.
        """
        if self.kind == DirectiveKind.LITERAL:
            return self.param.replace("%", "%%")
        if self.kind in DirectiveKind.named_markers():
            return f"%{{{self.param}}}{DirectiveKind.named_markers()[self.kind]}"
        if self.kind == DirectiveKind.PEER_IP:
            return "%{c}a"
        if self.kind == DirectiveKind.FINAL_STATUS:
            return "%>s"
        if self.kind == DirectiveKind.PORT and self.param != PortType.CANONICAL:
            return f"%{{{self.param.value}}}p"
        if self.kind == DirectiveKind.PID and self.param != PIDType.PID:
            return f"%{{{self.param.value}}}P"
        return "%" + SINGLE_CHARACTER_CODES[self]


SINGLE_CHARACTER_DIRECTIVES = {
    "a": Directive(DirectiveKind.CLIENT_IP),
    "A": Directive(DirectiveKind.LOCAL_IP),
    "B": Directive(DirectiveKind.RES_SIZE_EXCLUDING_HEADERS),
    "b": Directive(DirectiveKind.RES_SIZE),
    "D": Directive(DirectiveKind.REQ_TIME),
    "f": Directive(DirectiveKind.FILENAME),
    "h": Directive(DirectiveKind.HOSTNAME),
    "H": Directive(DirectiveKind.PROTOCOL),
    "k": Directive(DirectiveKind.KEEP_ALIVE),
    "l": Directive(DirectiveKind.LOGNAME),
    "L": Directive(DirectiveKind.ERR_ID),
    "m": Directive(DirectiveKind.METHOD),
    "p": Directive(DirectiveKind.PORT, PortType.CANONICAL),
    "P": Directive(DirectiveKind.PID, PIDType.PID),
    "q": Directive(DirectiveKind.QUERY),
    "r": Directive(DirectiveKind.REQ_FIRST_LINE),
    "R": Directive(DirectiveKind.RES_HANDLER),
    "s": Directive(DirectiveKind.STATUS),
    "t": Directive(DirectiveKind.REQ_RECV_TIME),
    "T": Directive(DirectiveKind.REQ_SERVE_TIME),
    "u": Directive(DirectiveKind.USER),
    "U": Directive(DirectiveKind.PATH),
    "v": Directive(DirectiveKind.SERVER_NAME),
    "V": Directive(DirectiveKind.CANONICAL_SERVER_NAME),
    "X": Directive(DirectiveKind.RES_STATUS),
    "I": Directive(DirectiveKind.SIZE_RECEIVED),
    "O": Directive(DirectiveKind.SIZE_SENT),
    "S": Directive(DirectiveKind.SIZE),
    "%": Directive(DirectiveKind.LITERAL, "%"),
}

# Inverse of the table above, used when writing directives back out.
SINGLE_CHARACTER_CODES = {
    directive: char for char, directive in SINGLE_CHARACTER_DIRECTIVES.items()
}
