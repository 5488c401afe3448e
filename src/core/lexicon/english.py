"""
English Lexicon — static word tables for the integer speller

Lookup by index only, no behaviour beyond that:
- ones_name(d):    0 → "", 1 → "one", ..., 9 → "nine"
- tens_prefix(d):  0 → "", 1 → DEFER_TO_TEENS, 2 → "twenty-", ..., 9 → "ninety-"
- teens_name(d):   0 → "ten", ..., 9 → "nineteen"
- scale_name(g):   0 → "", 1 → "thousand", ..., 9 → "octillion"

A tens digit of 1 has no word of its own: the following ones digit is read
from the teens table instead. tens_prefix() reports this as an explicit
TensKind.DEFER_TO_TEENS value, never as text.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Final

from src.core.domain.digits import DIGIT_MAX, DIGIT_MIN, InvalidInput


# =============================================================================
# TABLES
# =============================================================================

ONES_NAMES: Final[tuple[str, ...]] = (
    "",
    "one",
    "two",
    "three",
    "four",
    "five",
    "six",
    "seven",
    "eight",
    "nine",
)

# Index 1 is never read: tens digit 1 defers to TEENS_NAMES
TENS_PREFIXES: Final[tuple[str, ...]] = (
    "",
    "",
    "twenty-",
    "thirty-",
    "forty-",
    "fifty-",
    "sixty-",
    "seventy-",
    "eighty-",
    "ninety-",
)

TEENS_NAMES: Final[tuple[str, ...]] = (
    "ten",
    "eleven",
    "twelve",
    "thirteen",
    "fourteen",
    "fifteen",
    "sixteen",
    "seventeen",
    "eighteen",
    "nineteen",
)

SCALE_NAMES: Final[tuple[str, ...]] = (
    "",
    "thousand",
    "million",
    "billion",
    "trillion",
    "quadrillion",
    "quintillion",
    "sextillion",
    "septillion",
    "octillion",
)

HUNDRED_SUFFIX: Final[str] = " hundred "

ZERO_WORD: Final[str] = "zero"

NEGATIVE_PREFIX: Final[str] = "negative "

MAX_SCALE_GROUP: Final[int] = len(SCALE_NAMES) - 1


# =============================================================================
# TENS PREFIX
# =============================================================================


class TensKind(str, Enum):
    """Результат lookup для разряда десятков"""

    LITERAL = "literal"
    DEFER_TO_TEENS = "defer_to_teens"


@dataclass(frozen=True)
class TensPrefix:
    """Tens-position lookup result: literal text, or a deferral to the teens table."""

    kind: TensKind
    text: str = ""

    @property
    def defers_to_teens(self) -> bool:
        return self.kind == TensKind.DEFER_TO_TEENS


DEFER_TO_TEENS: Final[TensPrefix] = TensPrefix(kind=TensKind.DEFER_TO_TEENS)


# =============================================================================
# LOOKUPS
# =============================================================================


def _check_digit(digit: int) -> int:
    if isinstance(digit, bool) or not isinstance(digit, int):
        raise InvalidInput(f"Expected an integer digit, got {digit!r}")
    if not DIGIT_MIN <= digit <= DIGIT_MAX:
        raise InvalidInput(f"Invalid digit {digit} (must be {DIGIT_MIN}-{DIGIT_MAX})")
    return digit


def ones_name(digit: int) -> str:
    """
    Word for a digit in the ones (or hundreds) place.

    Examples:
        >>> ones_name(7)
        'seven'
        >>> ones_name(0)
        ''
    """
    return ONES_NAMES[_check_digit(digit)]


def tens_prefix(digit: int) -> TensPrefix:
    """
    Hyphenated prefix for a digit in the tens place.

    Args:
        digit: Tens digit

    Returns:
        DEFER_TO_TEENS for 1, otherwise a LITERAL prefix ("" for 0)

    Raises:
        InvalidInput: If digit is outside [0, 9]

    Examples:
        >>> tens_prefix(4).text
        'forty-'
        >>> tens_prefix(1).defers_to_teens
        True
    """
    if _check_digit(digit) == 1:
        return DEFER_TO_TEENS
    return TensPrefix(kind=TensKind.LITERAL, text=TENS_PREFIXES[digit])


def teens_name(digit: int) -> str:
    """Word for 10 + digit."""
    return TEENS_NAMES[_check_digit(digit)]


def scale_name(group: int) -> str:
    """
    Scale word for a group of three digits.

    Args:
        group: ordinal // 3 (0 = units, 1 = thousands, ...)

    Returns:
        Bare scale word, "" for the units group

    Raises:
        InvalidInput: If group is outside [0, MAX_SCALE_GROUP] (unsupported magnitude)
    """
    if not 0 <= group <= MAX_SCALE_GROUP:
        raise InvalidInput(
            f"Unsupported scale group: {group} (must be 0-{MAX_SCALE_GROUP} inclusive)"
        )
    return SCALE_NAMES[group]


def scale_suffix(group: int) -> str:
    """
    Scale word as emitted after a group's ones digit: " thousand ", "" for units.

    Examples:
        >>> scale_suffix(2)
        ' million '
        >>> scale_suffix(0)
        ''
    """
    name = scale_name(group)
    return f" {name} " if name else ""
