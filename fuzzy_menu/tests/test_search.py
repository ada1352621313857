"""Tests for the search engine."""

from fuzzy_menu.models.candidate import Candidate
from fuzzy_menu.services.fuzzy import ScoreConfig
from fuzzy_menu.services.search import SearchEngine


def texts(results) -> list[str]:
    return [r.candidate.original for r in results]


class TestEmptyQuery:
    """Empty query returns everything unscored in input order."""

    def test_returns_all_candidates(self, engine, fruits):
        results = engine.search("", fruits)
        assert texts(results) == ["Apple", "Banana", "Apricot"]
        assert all(r.score == 0 for r in results)
        assert all(r.positions == () for r in results)

    def test_results_share_candidates(self, engine, fruits):
        results = engine.search("", fruits)
        assert all(r.candidate is c for r, c in zip(results, fruits))

    def test_empty_candidate_list(self, engine):
        assert engine.search("", []) == []
        assert engine.search("abc", []) == []


class TestFiltering:
    """Tests for match filtering."""

    def test_no_match_returns_empty(self, engine):
        candidates = Candidate.from_lines(["Hello", "World"])
        assert engine.search("xyz", candidates) == []

    def test_only_firefox_matches_fire(self, engine, browsers):
        results = engine.search("fire", browsers)
        assert texts(results) == ["Firefox"]
        assert results[0].score > 0

    def test_case_insensitive_query(self, engine):
        candidates = Candidate.from_lines(["MacMenu"])
        assert len(engine.search("macmenu", candidates)) == 1
        assert len(engine.search("MACMENU", candidates)) == 1

    def test_prefix_query(self, engine, fruits):
        results = engine.search("ap", fruits)
        assert len(results) >= 2
        assert set(texts(results[:2])) == {"Apple", "Apricot"}

    def test_positions_index_candidate(self, engine, browsers):
        results = engine.search("fire", browsers)
        assert results[0].positions == (0, 1, 2, 3)


class TestRanking:
    """Tests for result ordering."""

    def test_exact_match_ranks_first(self, engine):
        candidates = Candidate.from_lines(["application", "apple", "app"])
        results = engine.search("app", candidates)
        assert texts(results) == ["app", "apple", "application"]

    def test_sorted_by_score_descending(self, engine):
        candidates = Candidate.from_lines(["a x b", "ab", "a long way to b", "xab"])
        scores = [r.score for r in engine.search("ab", candidates)]
        assert scores == sorted(scores, reverse=True)

    def test_ties_keep_input_order(self, engine):
        forward = Candidate.from_lines(["xa", "ya"])
        backward = Candidate.from_lines(["ya", "xa"])
        assert texts(engine.search("a", forward)) == ["xa", "ya"]
        assert texts(engine.search("a", backward)) == ["ya", "xa"]

    def test_search_is_idempotent(self, engine, fruits):
        first = engine.search("ap", fruits)
        second = engine.search("ap", fruits)
        assert first == second

    def test_back_to_back_queries_do_not_interfere(self, engine, browsers, fruits):
        engine.search("fire", browsers)
        results = engine.search("ban", fruits)
        assert texts(results) == ["Banana"]


class TestScoringVariant:
    """Engine forwards its scoring constants to the matcher."""

    def test_default_scoring(self, engine):
        assert not engine.scoring.strict_runs

    def test_strict_runs_lowers_gapped_scores(self):
        relaxed = SearchEngine().search("ac", Candidate.from_lines(["abc"]))
        strict = SearchEngine(ScoreConfig(strict_runs=True)).search(
            "ac", Candidate.from_lines(["abc"])
        )
        assert strict[0].score < relaxed[0].score
