"""Protocol definitions for the collaborators around the search core.

The application receives these by constructor injection, so tests can
swap in fakes for any of the three roles.
"""

from typing import Protocol, Sequence

from ..models.candidate import Candidate, SearchResult


class InputLoaderProtocol(Protocol):
    """Protocol defining the input source interface."""

    def load(self) -> list[str]:
        """Read every non-empty input line.

        Raises:
            NoInputError: Nothing usable was provided
            InputReadError: The source could not be read or decoded
        """
        ...


class SearchEngineProtocol(Protocol):
    """Protocol defining the search engine interface."""

    def search(self, query: str, candidates: Sequence[Candidate]) -> list[SearchResult]:
        """Filter and rank candidates for query."""
        ...


class OutputWriterProtocol(Protocol):
    """Protocol defining the output sink interface."""

    def write(self, result: SearchResult) -> None:
        """Emit the selected result."""
        ...
