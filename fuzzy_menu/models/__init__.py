"""Data models for Fuzzy Menu."""

from .candidate import Candidate, MatchOutcome, SearchResult
from .exceptions import (
    MenuError,
    InputError,
    NoInputError,
    TerminalInputError,
    InputReadError,
    ConfigError,
    ConfigValidationError,
)

__all__ = [
    # Candidate models
    "Candidate",
    "MatchOutcome",
    "SearchResult",
    # Exceptions
    "MenuError",
    "InputError",
    "NoInputError",
    "TerminalInputError",
    "InputReadError",
    "ConfigError",
    "ConfigValidationError",
]
