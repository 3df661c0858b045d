"""Spell-check pass driven by a word index."""

from .checker import spell_check
from .models import SpellerConfig, SpellReport
from .tokenize import extract_words

__all__ = [
    "spell_check",
    "SpellerConfig",
    "SpellReport",
    "extract_words",
]
