from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Pair:
    key: str
    value: str


@dataclass(frozen=True)
class Blank:
    pass


@dataclass(frozen=True)
class Comment:
    text: str


@dataclass(frozen=True)
class Candidate:
    """A line that is neither blank nor a comment, trimmed at both ends."""

    text: str


LineKind = Blank | Comment | Candidate
