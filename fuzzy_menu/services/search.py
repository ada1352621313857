"""Search engine: runs the fuzzy matcher across a candidate list."""

from __future__ import annotations

import logging
from typing import Sequence

from ..models.candidate import Candidate, SearchResult, lowercase
from .fuzzy import DEFAULT_SCORING, ScoreConfig, match


logger = logging.getLogger(__name__)


class SearchEngine:
    """Filters and ranks candidates for a single query.

    Holds no state between calls besides its scoring constants, so one
    engine can serve back-to-back queries over different candidate lists.
    """

    def __init__(self, scoring: ScoreConfig | None = None) -> None:
        self._scoring = scoring or DEFAULT_SCORING

    @property
    def scoring(self) -> ScoreConfig:
        return self._scoring

    def search(self, query: str, candidates: Sequence[Candidate]) -> list[SearchResult]:
        """Rank candidates by fuzzy match quality.

        Args:
            query: Search string as typed
            candidates: Candidates in original input order

        Returns:
            Matching results sorted by score descending. Equal scores keep
            input order. An empty query returns every candidate unscored.
        """
        if not query:
            # No query = return all in input order with neutral score
            return [SearchResult(candidate) for candidate in candidates]

        query_lower = lowercase(query)

        results: list[SearchResult] = []
        for candidate in candidates:
            outcome = match(
                query_lower,
                candidate.original,
                candidate.normalized,
                scoring=self._scoring,
            )
            if outcome.matched:
                results.append(SearchResult(candidate, outcome.score, outcome.positions))

        # list.sort is stable: ties stay in input order
        results.sort(key=lambda r: r.score, reverse=True)
        logger.debug(f"Query {query!r} matched {len(results)}/{len(candidates)} candidates")
        return results
