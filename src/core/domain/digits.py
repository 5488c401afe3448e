"""
Digits — Domain model for the integer speller input

Canonical representation that every later stage works on:
- Digit: int in [0, 9]
- SignMarker: explicit minus token, valid only as the first sequence element
- CanonicalDigits: big-endian digits (1..30), sign and zero flags extracted

Input shapes are tagged once (ScalarInput | DigitsInput); nothing downstream
inspects raw Python types again.

INVARIANTS:
1. len(CanonicalDigits.digits) in [1, MAX_DIGITS]
2. every digit in [DIGIT_MIN, DIGIT_MAX]
3. ordinal = len(digits) - 1 - index, so the last element has ordinal 0
"""

from enum import Enum
from typing import Annotated, Any, Final, Iterator, Literal, Union

from pydantic import BaseModel, Field, StrictInt, field_validator


# =============================================================================
# CONSTANTS
# =============================================================================

DIGIT_MIN: Final[int] = 0
DIGIT_MAX: Final[int] = 9

# 10 scale groups (units .. octillion) x 3 places
MAX_DIGITS: Final[int] = 30

DIGITS_PER_GROUP: Final[int] = 3


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidInput(ValueError):
    """
    Input cannot be spelled.

    Raised for:
    - a value that is neither an integer nor a digit sequence
    - an element that is not a digit in [0, 9] (or a misplaced sign marker)
    - an empty sequence
    - more than MAX_DIGITS digits once the sign is stripped
    - a scale group outside the lexicon
    """
    pass


# =============================================================================
# ENUMS
# =============================================================================


class SignMarker(str, Enum):
    """Explicit sign token for digit sequences"""

    MINUS = "-"


# =============================================================================
# TAGGED INPUT
# =============================================================================


class ScalarInput(BaseModel):
    """Native signed integer input."""

    kind: Literal["scalar"] = "scalar"
    value: StrictInt = Field(..., description="Signed integer to spell")

    model_config = {"frozen": True}


class DigitsInput(BaseModel):
    """
    Pre-split big-endian digit sequence.

    Elements are integers or the sign marker. Range and position checks are
    left to the normalizer, so that every failure surfaces as InvalidInput
    with the offending index.
    """

    kind: Literal["digits"] = "digits"
    elements: tuple[Union[SignMarker, StrictInt], ...] = Field(
        ..., description="Digits, most-significant first"
    )

    model_config = {"frozen": True}


SpellingInput = Annotated[Union[ScalarInput, DigitsInput], Field(discriminator="kind")]


# =============================================================================
# CANONICAL DIGITS
# =============================================================================


class CanonicalDigits(BaseModel):
    """
    Validated big-endian digits with sign and zero extracted.

    Produced by the normalizer, consumed by the assembler.
    """

    digits: tuple[StrictInt, ...] = Field(
        ..., min_length=1, max_length=MAX_DIGITS, description="Digits, most-significant first"
    )
    is_negative: bool = Field(False, description="Magnitude carries a minus sign")
    is_zero: bool = Field(False, description="Input was exactly zero")

    model_config = {"frozen": True}

    @field_validator("digits")
    @classmethod
    def validate_digit_range(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Каждая цифра в [0, 9]"""
        for index, digit in enumerate(v):
            if not DIGIT_MIN <= digit <= DIGIT_MAX:
                raise ValueError(f"digit {digit} at index {index} is outside [0, 9]")
        return v

    def ordinal_of(self, index: int) -> int:
        """Ordinal (position from the least-significant digit) of an array index."""
        return len(self.digits) - 1 - index

    @staticmethod
    def place_of(ordinal: int) -> int:
        """0 = ones, 1 = tens, 2 = hundreds"""
        return ordinal % DIGITS_PER_GROUP

    @staticmethod
    def group_of(ordinal: int) -> int:
        """0 = units, 1 = thousands, 2 = millions, ..."""
        return ordinal // DIGITS_PER_GROUP

    def positions(self) -> Iterator[tuple[int, int]]:
        """
        Iterate (ordinal, digit) pairs, most-significant digit first.

        Examples:
            >>> list(CanonicalDigits(digits=(5, 0, 7)).positions())
            [(2, 5), (1, 0), (0, 7)]
        """
        for index, digit in enumerate(self.digits):
            yield self.ordinal_of(index), digit

    def group_digits(self, group: int) -> tuple[int, ...]:
        """Digits belonging to one scale group (most-significant first)."""
        return tuple(
            digit for ordinal, digit in self.positions() if self.group_of(ordinal) == group
        )


# =============================================================================
# ELEMENT PARSING
# =============================================================================


def _is_native_int(value: Any) -> bool:
    # bool is an int subclass but never a digit
    return isinstance(value, int) and not isinstance(value, bool)


def parse_digit(element: Any, index: int = 0) -> int:
    """
    Проверка одного элемента последовательности.

    Args:
        element: Raw sequence element
        index: Position in the original sequence (for the error message)

    Returns:
        The digit as int

    Raises:
        InvalidInput: If element is not an int in [0, 9]
    """
    if not _is_native_int(element):
        raise InvalidInput(
            f"Element {element!r} at index {index} is not a decimal digit"
        )
    if not DIGIT_MIN <= element <= DIGIT_MAX:
        raise InvalidInput(
            f"Element {element} at index {index} is outside [{DIGIT_MIN}, {DIGIT_MAX}]"
        )
    return element


def parse_first_element(element: Any) -> Union[SignMarker, int]:
    """
    Parse the first element of a digit sequence.

    The first position is the only one allowed to hold a sign marker.

    Args:
        element: Raw first element

    Returns:
        SignMarker.MINUS for the minus token, otherwise the digit

    Raises:
        InvalidInput: If element is neither the sign marker nor a digit

    Examples:
        >>> parse_first_element("-")
        <SignMarker.MINUS: '-'>
        >>> parse_first_element(7)
        7
    """
    if isinstance(element, SignMarker):
        return element
    if isinstance(element, str) and element == SignMarker.MINUS.value:
        return SignMarker.MINUS
    return parse_digit(element, index=0)
