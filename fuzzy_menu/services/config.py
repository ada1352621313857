"""Configuration for Fuzzy Menu.

No configuration file is involved. Settings resolve in this order:
command-line flags > environment variables > defaults
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Mapping

from ..models.exceptions import ConfigValidationError


ENV_PREFIX = "FUZZY_MENU_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass
class MenuConfig:
    """Runtime settings for the selector."""

    # Append the original input index to the emitted line
    include_index: bool = False
    # Quiet period after the last keystroke before searching
    debounce_ms: int = 30
    prompt: str = "search"
    # Rows rendered at once; matching itself is never truncated
    max_results: int = 500
    log_file: Path | None = None
    # Score with the non-contiguous run penalty
    strict_runs: bool = False

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Raise ConfigValidationError for out-of-range values."""
        if self.debounce_ms < 0:
            raise ConfigValidationError(
                f"debounce_ms must be >= 0, got {self.debounce_ms}"
            )
        if self.max_results < 1:
            raise ConfigValidationError(
                f"max_results must be >= 1, got {self.max_results}"
            )

    @property
    def debounce_seconds(self) -> float:
        return self.debounce_ms / 1000

    def to_dict(self) -> dict:
        result: dict = {
            "include_index": self.include_index,
            "debounce_ms": self.debounce_ms,
            "prompt": self.prompt,
            "max_results": self.max_results,
        }
        if self.log_file is not None:
            result["log_file"] = str(self.log_file)
        if self.strict_runs:
            result["strict_runs"] = True
        return result

    @classmethod
    def from_dict(cls, data: dict) -> MenuConfig:
        log_file = Path(data["log_file"]) if data.get("log_file") else None
        return cls(
            include_index=bool(data.get("include_index", False)),
            debounce_ms=_to_int("debounce_ms", data.get("debounce_ms", 30)),
            prompt=data.get("prompt", "search"),
            max_results=_to_int("max_results", data.get("max_results", 500)),
            log_file=log_file,
            strict_runs=bool(data.get("strict_runs", False)),
        )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> MenuConfig:
        """Build config from FUZZY_MENU_* environment variables."""
        environ = os.environ if environ is None else environ
        data: dict = {}

        if f"{ENV_PREFIX}DEBOUNCE_MS" in environ:
            data["debounce_ms"] = environ[f"{ENV_PREFIX}DEBOUNCE_MS"]
        if f"{ENV_PREFIX}MAX_RESULTS" in environ:
            data["max_results"] = environ[f"{ENV_PREFIX}MAX_RESULTS"]
        if environ.get(f"{ENV_PREFIX}PROMPT"):
            data["prompt"] = environ[f"{ENV_PREFIX}PROMPT"]
        if environ.get(f"{ENV_PREFIX}LOG_FILE"):
            data["log_file"] = environ[f"{ENV_PREFIX}LOG_FILE"]
        if f"{ENV_PREFIX}STRICT_RUNS" in environ:
            data["strict_runs"] = _to_bool(
                "strict_runs", environ[f"{ENV_PREFIX}STRICT_RUNS"]
            )

        return cls.from_dict(data)

    def merge_with(self, **overrides) -> MenuConfig:
        """Return new config with non-None overrides taking precedence."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)


def _to_int(name: str, value) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ConfigValidationError(
            f"{name} must be an integer, got {value!r}"
        ) from None


def _to_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigValidationError(
        f"{name} must be a boolean, got {value!r}",
        suggestion="use 1/0, true/false, yes/no or on/off",
    )
