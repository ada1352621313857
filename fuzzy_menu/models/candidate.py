"""Candidate and result models for Fuzzy Menu."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable


def lowercase(text: str) -> str:
    """Lowercase text without changing its length.

    Characters whose lowercase form is more than one code point
    (such as "\u0130") are kept as they are, so an index into the
    result is also an index into text.
    """
    lowered = text.lower()
    if len(lowered) == len(text):
        return lowered
    return "".join(c if len(c.lower()) != 1 else c.lower() for c in text)


@dataclass(frozen=True)
class Candidate:
    """One selectable line of input.

    The lowercase form is computed once here so repeated searches
    never normalize the same line again.
    """

    original: str
    # Position in the original (pre-filter) input ordering
    index: int = 0
    normalized: str = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "normalized", lowercase(self.original))

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> list[Candidate]:
        """Build candidates from raw lines, skipping empty ones."""
        candidates: list[Candidate] = []
        for line in lines:
            if not line:
                continue
            candidates.append(cls(line, index=len(candidates)))
        return candidates


@dataclass(frozen=True)
class MatchOutcome:
    """Result of testing one candidate against one pattern."""

    matched: bool
    score: int = 0
    # May be shorter than the pattern when the alignment skips a character
    positions: tuple[int, ...] = ()

    @classmethod
    def no_match(cls) -> MatchOutcome:
        return cls(matched=False)


@dataclass(frozen=True)
class SearchResult:
    """One ranked entry in a search response."""

    candidate: Candidate
    score: int = 0
    positions: tuple[int, ...] = ()

    @property
    def text(self) -> str:
        """The exact string to render and emit."""
        return self.candidate.original
