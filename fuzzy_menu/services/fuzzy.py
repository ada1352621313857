"""Fuzzy matching for the line selector.

fzf-style scoring over an order-preserving subsequence alignment:
- Every matched character earns a base bonus
- Matches at the start of the line or after a space earn a boundary bonus
- Matches that continue a run earn a consecutive bonus
- Skipped characters cost a gap penalty
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

from ..models.candidate import MatchOutcome, lowercase


@dataclass(frozen=True)
class ScoreConfig:
    """Constants used to calculate fuzzy match scores."""

    bonus_match: int = 16
    bonus_boundary: int = 16
    bonus_consecutive: int = 16
    penalty_gap_start: int = -3
    penalty_gap_extension: int = -1
    # Not used by the default recurrence; see strict_runs
    penalty_non_contiguous: int = -5
    # Apply penalty_non_contiguous to matches that break a run
    strict_runs: bool = False


DEFAULT_SCORING = ScoreConfig()


class _Cell(NamedTuple):
    score: int
    positions: tuple[int, ...]


_EMPTY = _Cell(0, ())


def is_subsequence(pattern: str, text: str) -> bool:
    """Check that all pattern chars appear in text in order."""
    pattern_idx = 0
    for char in text:
        if pattern_idx < len(pattern) and char == pattern[pattern_idx]:
            pattern_idx += 1
    return pattern_idx == len(pattern)


def match(
    pattern: str,
    candidate: str,
    candidate_normalized: str | None = None,
    scoring: ScoreConfig = DEFAULT_SCORING,
) -> MatchOutcome:
    """Match pattern against candidate and score the alignment.

    Args:
        pattern: Query, ideally already lowercased by the caller
        candidate: Original candidate string
        candidate_normalized: Precomputed lowercase form of candidate
        scoring: Score constants

    Returns:
        MatchOutcome - positions index both candidate and its
        normalized form. Matched only when the pattern is an in-order
        subsequence of the candidate and the final score is positive.
        Positions can still be fewer than the pattern characters: the
        table may take a -3 skip over a pattern character when that
        scores higher than matching it.
    """
    if not pattern:
        return MatchOutcome(matched=True, score=0, positions=())

    pattern = lowercase(pattern)
    text = candidate_normalized if candidate_normalized is not None else lowercase(candidate)

    pattern_len = len(pattern)
    text_len = len(text)

    if pattern_len > text_len:
        return MatchOutcome.no_match()

    if not is_subsequence(pattern, text):
        return MatchOutcome.no_match()

    final = _score_table(pattern, text, scoring)
    if final.score > 0:
        return MatchOutcome(matched=True, score=final.score, positions=final.positions)
    return MatchOutcome.no_match()


def _score_table(pattern: str, text: str, scoring: ScoreConfig) -> _Cell:
    """Fill the (P+1) x (C+1) table and return its last cell.

    Cell (i, j) holds the best score for the first i pattern chars
    within the first j text chars, together with the matched positions.
    """
    gap_start = scoring.penalty_gap_start
    gap_extension = scoring.penalty_gap_extension

    prev_row = [_EMPTY] * (len(text) + 1)
    for i in range(1, len(pattern) + 1):
        row = [_EMPTY] * (len(text) + 1)
        pattern_char = pattern[i - 1]

        for j in range(1, len(text) + 1):
            up = prev_row[j]

            if pattern_char == text[j - 1]:
                bonus = scoring.bonus_match

                if j == 1 or text[j - 2] == " ":
                    bonus += scoring.bonus_boundary

                if i > 1 and j > 1 and pattern[i - 2] == text[j - 2]:
                    bonus += scoring.bonus_consecutive
                elif scoring.strict_runs and i > 1:
                    bonus += scoring.penalty_non_contiguous

                diag = prev_row[j - 1]
                new_score = diag.score + bonus
                if new_score > up.score + gap_start:
                    row[j] = _Cell(new_score, diag.positions + (j - 1,))
                else:
                    row[j] = _Cell(up.score + gap_start, up.positions)
            else:
                left = row[j - 1]
                # Left wins ties
                if left.score + gap_extension >= up.score + gap_start:
                    row[j] = _Cell(left.score + gap_extension, left.positions)
                else:
                    row[j] = _Cell(up.score + gap_start, up.positions)

        prev_row = row

    return prev_row[len(text)]
