from dataclasses import dataclass

from _logformat.tokenizer.directive import Directive


@dataclass
class Token:
    """
    A directive together with the span of the format it was
    tokenized from.
    """

    directive: Directive
    start: int
    end: int

    def get_value(self, stream):
        """
        :returns: The part of the format (either as a string or byte string)
            the directive was tokenized from. For
            Directive(DirectiveKind.PORT, PortType.LOCAL) that could be
            "%{local}p", for a literal it is the literal text.
        """
        go_back = stream.tell()
        stream.seek(self.start)
        value = stream.read(self.end - self.start)
        stream.seek(go_back)
        return value
