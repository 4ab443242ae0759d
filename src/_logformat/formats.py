# Common Log Format
CLF = '%h %l %u %t "%r" %>s %b'

# The nicknames httpd ships LogFormat definitions for
FORMATS = {
    "common": CLF,
    "combined": CLF + ' "%{Referer}i" "%{User-Agent}i"',
    "vhost_common": "%v " + CLF,
    "vhost_combined": '%v:%p %h %l %u %t "%r" %>s %O "%{Referer}i" "%{User-Agent}i"',
    "referer": "%{Referer}i -> %U",
    "agent": "%{User-Agent}i",
}


def format_directives(directives):
    """
    Write directives back out as a log format, the inverse of parse:

    >>> hostname = Directive(DirectiveKind.HOSTNAME)
    >>> format_directives([hostname, Directive(DirectiveKind.LITERAL, " - ")])
    '%h - '

    For directives returned by parse, parsing the result gives back the
    same directives. Other directives come back with adjacent literal runs
    merged, and literal text containing '%' split around a separate
    Literal("%"), ie. Directive(DirectiveKind.LITERAL, "a%b") is written
    as "a%%b", which parses to three literals.
    """
    return "".join(directive.to_format() for directive in directives)
