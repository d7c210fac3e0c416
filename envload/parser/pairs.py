from __future__ import annotations

from envload.domain.models import Pair
from envload.errors import (
    InvalidKeyError,
    LeadingWhitespaceError,
    LineRuleError,
    ParseError,
    UnquotedWhitespaceError,
)

SEPARATOR = "="
QUOTES = ('"', "'")
FORBIDDEN_KEY_CHARS = frozenset({"#", '"', "'"})


def parse_pair(text: str, source_line: str | None = None) -> Pair | None:
    """
    Parse one candidate line into a Pair.

    Returns None when the line has no ``=`` at all: such a line is not an
    assignment and the caller skips it. Any rule violated by a line that does
    have a separator raises ParseError quoting ``source_line`` (the untrimmed
    original) or ``text`` when no source line is given.
    """
    separator = text.find(SEPARATOR)
    if separator < 0:
        return None

    try:
        key = _scan_key(text, separator)
        value = _scan_value(text, separator + 1)
    except LineRuleError as rule:
        line = text if source_line is None else source_line
        raise ParseError(line, rule) from rule

    return Pair(key, value)


def _scan_key(text: str, end: int) -> str:
    if end == 0:
        raise InvalidKeyError(None)

    index = 0
    while index < end:
        char = text[index]
        if char in FORBIDDEN_KEY_CHARS or char.isspace():
            raise InvalidKeyError(char)
        index += 1

    return text[:end]


def _scan_value(text: str, start: int) -> str:
    end = len(text)
    if start >= end:
        return ""

    first = text[start]
    if first in QUOTES:
        return _scan_quoted(text, start, first)

    if first.isspace():
        raise LeadingWhitespaceError(first)

    index = start + 1
    while index < end:
        char = text[index]
        if char.isspace():
            raise UnquotedWhitespaceError(char)
        index += 1

    return text[start:]


def _scan_quoted(text: str, start: int, quote: str) -> str:
    # The opening quote pairs with the last character of the line, so inner
    # quotes of either kind are kept as they are: 'va'lue' -> va'lue.
    last = len(text) - 1
    if last > start and text[last] == quote:
        return text[start + 1:last]
    # Unterminated: the value runs to end of line.
    return text[start + 1:]
