"""Input loading: read candidate lines from a piped stream."""

from __future__ import annotations

import logging
import os
import sys
from typing import BinaryIO

from ..models.exceptions import (
    InputReadError,
    MenuError,
    NoInputError,
    TerminalInputError,
)


logger = logging.getLogger(__name__)

TTY_PATH = "/dev/tty"


class StreamInputLoader:
    """Reads every non-empty line from a binary stream."""

    def __init__(self, stream: BinaryIO, encoding: str = "utf-8"):
        self._stream = stream
        self._encoding = encoding

    @classmethod
    def from_stdin(cls, reattach: bool = True) -> StreamInputLoader:
        """Create a loader over standard input.

        When stdin is a pipe and reattach is set, the pipe is moved to a
        private descriptor and stdin is pointed at the controlling terminal,
        so the UI can read keys while the pipe is still being consumed.
        """
        stdin = sys.stdin.buffer
        if not reattach or stdin.isatty():
            return cls(stdin)

        try:
            piped = os.fdopen(os.dup(stdin.fileno()), "rb")
        except OSError:
            # No real descriptor behind stdin (e.g. an in-memory stream)
            return cls(stdin)
        reattach_terminal()
        return cls(piped)

    def load(self) -> list[str]:
        """Read the stream to the end and split it into lines.

        Raises:
            TerminalInputError: Stream is an interactive terminal
            NoInputError: Stream yielded no non-empty lines
            InputReadError: Stream could not be read or decoded
        """
        if self._is_terminal():
            raise TerminalInputError(
                "no input provided",
                suggestion="pipe lines in, e.g. ls | fuzzy-menu",
            )

        try:
            data = self._stream.read()
        except OSError as e:
            logger.error(f"Failed to read input: {e}")
            raise InputReadError(f"failed to read input: {e}") from e

        try:
            text = data.decode(self._encoding)
        except UnicodeDecodeError as e:
            logger.error(f"Failed to decode input as {self._encoding}: {e}")
            raise InputReadError(f"input is not valid {self._encoding}") from e

        lines = [line for line in text.splitlines() if line]
        if not lines:
            raise NoInputError(
                "no input provided",
                suggestion="pipe lines in, e.g. ls | fuzzy-menu",
            )

        logger.info(f"Loaded {len(lines)} lines")
        return lines

    def _is_terminal(self) -> bool:
        try:
            return self._stream.isatty()
        except (AttributeError, ValueError):
            return False


def reattach_terminal(tty_path: str = TTY_PATH) -> None:
    """Point file descriptor 0 at the controlling terminal."""
    try:
        fd = os.open(tty_path, os.O_RDONLY)
    except OSError as e:
        raise MenuError(
            "no terminal available for interactive selection",
            suggestion=str(e),
        ) from e
    try:
        os.dup2(fd, 0)
    finally:
        os.close(fd)
    logger.debug(f"Reattached stdin to {tty_path}")
