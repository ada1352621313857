"""Output writing: emit the selected line."""

from __future__ import annotations

import sys
from typing import TextIO

from ..models.candidate import SearchResult


class StandardOutputWriter:
    """Writes the selected candidate as a single line.

    With include_index, the candidate's zero-based position in the
    original input is appended after a space.
    """

    def __init__(self, stream: TextIO | None = None, include_index: bool = False):
        self._stream = stream
        self._include_index = include_index

    @property
    def include_index(self) -> bool:
        return self._include_index

    def format(self, result: SearchResult) -> str:
        if self._include_index:
            return f"{result.text} {result.candidate.index}"
        return result.text

    def write(self, result: SearchResult) -> None:
        # Resolve lazily so a redirected sys.stdout is honoured
        stream = self._stream or sys.stdout
        stream.write(self.format(result) + "\n")
        stream.flush()
