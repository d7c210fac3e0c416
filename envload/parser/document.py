from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import IO, Iterator

from envload.domain.classifier import classify_line
from envload.domain.models import Candidate, Pair
from envload.errors import ParseError
from envload.parser.pairs import parse_pair

logger = logging.getLogger(__name__)

# Only CR, LF and CRLF end a line; other Unicode breaks belong to values.
LINE_BREAK = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True)
class LineResult:
    """Outcome of one assignment-shaped line, as reported by scan_document."""

    lineno: int
    line: str
    pair: Pair | None = None
    error: ParseError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _candidates(text: str) -> Iterator[tuple[int, str, str]]:
    for lineno, line in enumerate(LINE_BREAK.split(text), start=1):
        kind = classify_line(line)
        if isinstance(kind, Candidate):
            yield lineno, line, kind.text


def parse_document(text: str) -> dict[str, str]:
    """
    Parse a whole document into an ordered mapping.

    The first invalid assignment raises ParseError and nothing is returned
    for the document. Blank lines, comments and lines without ``=`` are
    skipped. A key assigned twice keeps its last value.
    """
    result: dict[str, str] = {}
    skipped = 0

    for lineno, line, candidate in _candidates(text):
        pair = parse_pair(candidate, line)
        if pair is None:
            logger.debug("skip non-assignment line | lineno=%d", lineno)
            skipped += 1
            continue
        result[pair.key] = pair.value

    logger.debug("document parsed | keys=%d skipped=%d", len(result), skipped)
    return result


def scan_document(text: str) -> Iterator[LineResult]:
    """Yield a LineResult for every assignment line without stopping at errors."""
    for lineno, line, candidate in _candidates(text):
        try:
            pair = parse_pair(candidate, line)
        except ParseError as exc:
            yield LineResult(lineno, line, error=exc)
            continue
        if pair is not None:
            yield LineResult(lineno, line, pair=pair)


def read_stream(stream: IO) -> str:
    data = stream.read()
    if isinstance(data, bytes):
        return data.decode("utf-8")
    return data


def parse(source: str | IO) -> dict[str, str]:
    """Parse text or a readable stream. Has no effect on any environment."""
    if isinstance(source, str):
        return parse_document(source)
    return parse_document(read_stream(source))
