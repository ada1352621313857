"""Shared test fixtures for Fuzzy Menu."""

import pytest

from fuzzy_menu.models.candidate import Candidate, SearchResult
from fuzzy_menu.models.exceptions import MenuError
from fuzzy_menu.services.search import SearchEngine


class FakeLoader:
    """Input source returning canned lines or raising a canned error."""

    def __init__(self, lines: list[str] | None = None, error: MenuError | None = None):
        self._lines = lines or []
        self._error = error
        self.calls = 0

    def load(self) -> list[str]:
        self.calls += 1
        if self._error is not None:
            raise self._error
        return list(self._lines)


class RecordingWriter:
    """Output sink remembering everything written."""

    def __init__(self):
        self.written: list[SearchResult] = []

    def write(self, result: SearchResult) -> None:
        self.written.append(result)


@pytest.fixture
def engine() -> SearchEngine:
    """Create a SearchEngine with default scoring."""
    return SearchEngine()


@pytest.fixture
def browsers() -> list[Candidate]:
    return Candidate.from_lines(["Firefox", "Safari", "Chrome"])


@pytest.fixture
def fruits() -> list[Candidate]:
    return Candidate.from_lines(["Apple", "Banana", "Apricot"])


@pytest.fixture
def fake_loader() -> FakeLoader:
    return FakeLoader(["Firefox", "Safari", "Chrome"])


@pytest.fixture
def recording_writer() -> RecordingWriter:
    return RecordingWriter()


@pytest.fixture
def loader_factory():
    """Build FakeLoaders with custom lines or errors."""
    return FakeLoader


@pytest.fixture
def make_app(recording_writer):
    """Build a FuzzyMenuApp around a loader with the given config values."""
    from fuzzy_menu.app import FuzzyMenuApp, Services
    from fuzzy_menu.services.config import MenuConfig

    def _make(loader, **config):
        services = Services(loader=loader, engine=SearchEngine(), writer=recording_writer)
        return FuzzyMenuApp(services=services, config=MenuConfig(**config))

    return _make
