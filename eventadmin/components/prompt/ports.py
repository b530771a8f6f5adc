"""
Prompt component port definitions.

Protocol interfaces for terminal access, so the prompt engine can be driven
by a real TTY or by a scripted fake in tests.
"""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Protocol


class TerminalPort(Protocol):
    """Line- and character-oriented terminal I/O."""

    def write(self, text: str) -> None:
        """Write text to the operator (stdout) and flush."""
        ...

    def write_error(self, text: str) -> None:
        """Write text to the operator's error stream and flush."""
        ...

    def read_line(self) -> str:
        """Read one line including its terminator; empty string at end of input."""
        ...

    def read_char(self) -> str:
        """Read a single character; empty string at end of input."""
        ...

    def raw_mode(self) -> AbstractContextManager[None]:
        """Disable echo and line buffering for the duration of the block."""
        ...

    def close(self) -> None:
        """Release the input stream."""
        ...
