"""
Prompt engine.

Obtains one line of text from the operator at a time, either echoed
normally or masked with `*`. Only one prompt is ever outstanding.
"""

from __future__ import annotations

from .models import (
    BACKSPACE_CHARS,
    ERASE_SEQUENCE,
    INTERRUPT_CHAR,
    LINE_TERMINATORS,
    MASK_CHAR,
    MaskedReadState,
)
from .ports import TerminalPort


class MaskedReader:
    """
    Character-at-a-time state machine behind a masked read.

    `feed()` consumes one character and returns what should be echoed.
    Masking is a side effect of the READING state; once a line terminator
    is seen the reader moves to DONE and accepts no further input.
    """

    def __init__(self) -> None:
        self.state = MaskedReadState.READING
        self._buffer: list[str] = []

    @property
    def value(self) -> str:
        return "".join(self._buffer)

    def feed(self, char: str) -> str:
        if self.state is MaskedReadState.DONE:
            raise RuntimeError("Masked read already completed")

        if char == "":
            raise EOFError("Input closed during masked read")
        if char == INTERRUPT_CHAR:
            raise KeyboardInterrupt
        if char in LINE_TERMINATORS:
            self.state = MaskedReadState.DONE
            return ""
        if char in BACKSPACE_CHARS:
            if not self._buffer:
                return ""
            self._buffer.pop()
            return ERASE_SEQUENCE

        self._buffer.append(char)
        return MASK_CHAR


class PromptEngine:
    def __init__(self, terminal: TerminalPort) -> None:
        self.terminal = terminal

    def say(self, text: str = "") -> None:
        self.terminal.write(f"{text}\n")

    def warn(self, text: str) -> None:
        self.terminal.write_error(f"{text}\n")

    def read_line(self, prompt: str) -> str:
        """Write the prompt and return the next line, trimmed."""
        self.terminal.write(prompt)
        line = self.terminal.read_line()
        if line == "":
            raise EOFError("Input closed while waiting for a line")
        return line.strip()

    def read_secret(self, prompt: str) -> str:
        """
        Write the prompt and read a line without echoing it.

        Each character is echoed as `*`. The terminal is returned to normal
        echo mode before this returns or raises. The value is not trimmed.
        """
        self.terminal.write(prompt)
        reader = MaskedReader()
        with self.terminal.raw_mode():
            while reader.state is MaskedReadState.READING:
                echo = reader.feed(self.terminal.read_char())
                if echo:
                    self.terminal.write(echo)
        self.terminal.write("\n")
        return reader.value
