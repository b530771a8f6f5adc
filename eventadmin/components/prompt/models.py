"""Prompt component data models."""

from __future__ import annotations

from enum import Enum

MASK_CHAR = "*"
LINE_TERMINATORS = frozenset({"\n", "\r"})
BACKSPACE_CHARS = frozenset({"\x7f", "\x08"})
INTERRUPT_CHAR = "\x03"
# Moves the cursor back over one mask character and blanks it.
ERASE_SEQUENCE = "\b \b"


class MaskedReadState(str, Enum):
    """States of a masked (password) read."""

    READING = "reading"
    DONE = "done"
