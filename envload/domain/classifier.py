from __future__ import annotations

from envload.domain.models import Blank, Candidate, Comment, LineKind

# Only ASCII whitespace is insignificant at the line boundaries.
LINE_WHITESPACE = " \t\n\r\f\v"

COMMENT_MARKER = "#"


def classify_line(line: str) -> LineKind:
    text = line.strip(LINE_WHITESPACE)
    if not text:
        return Blank()
    if text.startswith(COMMENT_MARKER):
        return Comment(text)
    return Candidate(text)
