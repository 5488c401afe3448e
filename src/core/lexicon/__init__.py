"""
Lexicon — English word tables for the integer speller.
"""

from src.core.lexicon.english import (
    DEFER_TO_TEENS,
    HUNDRED_SUFFIX,
    MAX_SCALE_GROUP,
    NEGATIVE_PREFIX,
    ONES_NAMES,
    SCALE_NAMES,
    TEENS_NAMES,
    TENS_PREFIXES,
    ZERO_WORD,
    TensKind,
    TensPrefix,
    ones_name,
    scale_name,
    scale_suffix,
    teens_name,
    tens_prefix,
)

__all__ = [
    # Tables
    "ONES_NAMES",
    "TENS_PREFIXES",
    "TEENS_NAMES",
    "SCALE_NAMES",
    # Words
    "HUNDRED_SUFFIX",
    "ZERO_WORD",
    "NEGATIVE_PREFIX",
    "MAX_SCALE_GROUP",
    # Types
    "TensKind",
    "TensPrefix",
    "DEFER_TO_TEENS",
    # Functions
    "ones_name",
    "tens_prefix",
    "teens_name",
    "scale_name",
    "scale_suffix",
]
