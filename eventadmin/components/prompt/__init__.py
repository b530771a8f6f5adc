"""Prompt component: visible and masked terminal reads."""

from .component import MaskedReader, PromptEngine
from .models import MASK_CHAR, MaskedReadState
from .ports import TerminalPort

__all__ = [
    "PromptEngine",
    "MaskedReader",
    "MaskedReadState",
    "MASK_CHAR",
    "TerminalPort",
]
