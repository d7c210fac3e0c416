from __future__ import annotations

_CHAR_ESCAPES = {
    "'": "\\'",
    "\\": "\\\\",
    "\t": "\\t",
    "\n": "\\n",
    "\r": "\\r",
    "\f": "\\f",
    "\v": "\\v",
    "\0": "\\0",
    "\x1b": "\\e",
}


def inspect_char(char: str) -> str:
    """Render one character in single quotes, escaped: '#', '\\'', '\\t'."""
    body = _CHAR_ESCAPES.get(char)
    if body is None:
        if char.isprintable():
            body = char
        elif ord(char) <= 0xFFFF:
            body = f"\\u{ord(char):04X}"
        else:
            body = f"\\u{{{ord(char):X}}}"
    return f"'{body}'"


class LineRuleError(ValueError):
    """A syntactic rule of the .env format violated by one assignment line."""

    def __init__(self, message: str, char: str | None = None) -> None:
        super().__init__(message)
        self.char = char


class InvalidKeyError(LineRuleError):
    def __init__(self, char: str | None) -> None:
        if char is None:
            message = "A variable key cannot be empty"
        else:
            message = f"A variable key cannot contain {inspect_char(char)}"
        super().__init__(message, char)


class LeadingWhitespaceError(LineRuleError):
    def __init__(self, char: str) -> None:
        super().__init__(f"A value cannot start with a whitespace: {inspect_char(char)}", char)


class UnquotedWhitespaceError(LineRuleError):
    def __init__(self, char: str) -> None:
        super().__init__(f"An unquoted value cannot contain a whitespace: {inspect_char(char)}", char)


class ParseError(Exception):
    """
    Raised when an assignment line breaks a key or value rule.

    The message quotes the original line verbatim; the violated rule is
    available as ``rule`` and as the chained ``__cause__``.
    """

    def __init__(self, line: str, rule: LineRuleError) -> None:
        super().__init__(f"Parse error on line: `{line}`")
        self.line = line
        self.rule = rule


class RemoteSourceError(OSError):
    def __init__(self, url: str, message: str, status_code: int | None = None) -> None:
        super().__init__(f"{message}. url={url}; status={status_code}")
        self.url = url
        self.status_code = status_code
