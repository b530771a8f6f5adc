"""
Stdio terminal adapter.

Implements the prompt TerminalPort over sys.stdin/sys.stdout. Raw mode uses
termios/tty and is only engaged when stdin is a TTY; piped input is read
as-is so the tool stays scriptable.
"""

from __future__ import annotations

import sys
import termios
import tty
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TextIO


class StdioTerminal:
    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr
        self.closed = False
        # Set after a piped "\r"; the "\n" of a CRLF pair is then dropped.
        self._after_cr = False

    def write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def write_error(self, text: str) -> None:
        self.stderr.write(text)
        self.stderr.flush()

    def read_line(self) -> str:
        line = self.stdin.readline()
        if self._after_cr and line == "\n":
            line = self.stdin.readline()
        self._after_cr = False
        return line

    def read_char(self) -> str:
        char = self.stdin.read(1)
        if self._after_cr and char == "\n":
            char = self.stdin.read(1)
        self._after_cr = char == "\r" and not self._is_tty()
        return char

    def _is_tty(self) -> bool:
        try:
            return self.stdin.isatty()
        except ValueError:
            return False

    @contextmanager
    def raw_mode(self) -> Iterator[None]:
        if not self._is_tty():
            yield
            return

        fd = self.stdin.fileno()
        saved = termios.tcgetattr(fd)
        try:
            tty.setraw(fd)
            yield
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, saved)

    def close(self) -> None:
        # The process owns sys.stdin; releasing it means no further reads from us.
        if not self.closed:
            self.stdout.flush()
            self.closed = True
