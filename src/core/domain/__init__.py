"""
Domain models and value objects.

Contains the digit model shared by every speller stage: tagged inputs,
canonical digit sequence, sign marker and the InvalidInput error.
"""

from src.core.domain.digits import (
    DIGIT_MAX,
    DIGIT_MIN,
    DIGITS_PER_GROUP,
    MAX_DIGITS,
    CanonicalDigits,
    DigitsInput,
    InvalidInput,
    ScalarInput,
    SignMarker,
    SpellingInput,
    parse_digit,
    parse_first_element,
)

__all__ = [
    # Constants
    "DIGIT_MIN",
    "DIGIT_MAX",
    "DIGITS_PER_GROUP",
    "MAX_DIGITS",
    # Exceptions
    "InvalidInput",
    # Types
    "SignMarker",
    "ScalarInput",
    "DigitsInput",
    "SpellingInput",
    "CanonicalDigits",
    # Functions
    "parse_digit",
    "parse_first_element",
]
