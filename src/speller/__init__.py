"""Speller — converts integers to English words.

Pipeline of three stages (see src.speller.stages) behind a single entry
point, to_words().
"""

from src.core.domain.digits import InvalidInput
from .converter import SpellingConverter, SpellingResult, to_words
from .stages.stage_02_assembler import AssemblerConfig

__all__ = [
    "to_words",
    "SpellingConverter",
    "SpellingResult",
    "AssemblerConfig",
    "InvalidInput",
]
