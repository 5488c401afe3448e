"""STAGE 1: Input Normalizer — raw input → CanonicalDigits

Accepted shapes:
- native int (bool excluded): digits of abs(value), sign from the value,
  exactly 0 → is_zero
- sequence of digits (list/tuple, not str/bytes):
  1. [0] → zero
  2. first element "-" OR 0 → negative, first element dropped
     (a leading zero on a multi-digit sequence reads as a minus sign)
  3. remainder: 1..MAX_DIGITS digits in [0, 9]; a remainder of [0] → is_zero

Anything else → InvalidInput before any digit logic runs.
"""

from collections.abc import Sequence
from typing import Any, Union

from pydantic import ValidationError

from src.core.domain.digits import (
    MAX_DIGITS,
    CanonicalDigits,
    DigitsInput,
    InvalidInput,
    ScalarInput,
    SignMarker,
    parse_digit,
    parse_first_element,
)


def classify_input(raw: Any) -> Union[ScalarInput, DigitsInput]:
    """Tag a raw value as ScalarInput or DigitsInput.

    This is the only place that inspects the Python type of the input.

    Raises:
        InvalidInput: If raw is neither an int nor a digit sequence
    """
    if isinstance(raw, (ScalarInput, DigitsInput)):
        return raw

    if isinstance(raw, int) and not isinstance(raw, bool):
        return ScalarInput(value=raw)

    if isinstance(raw, Sequence) and not isinstance(raw, (str, bytes, bytearray)):
        try:
            return DigitsInput(elements=tuple(raw))
        except ValidationError as exc:
            raise InvalidInput(f"Digit sequence contains non-digit elements: {exc}") from exc

    raise InvalidInput(
        f"Only integers or digit sequences can be spelled, got {type(raw).__name__}"
    )


class InputNormalizer:
    """STAGE 1: tagged input → CanonicalDigits.

    Stateless; one instance can be shared.
    """

    def normalize(self, raw: Any) -> CanonicalDigits:
        """Нормализация входа.

        Args:
            raw: int, digit sequence, or an already tagged ScalarInput/DigitsInput

        Returns:
            CanonicalDigits (digits, is_negative, is_zero)

        Raises:
            InvalidInput: on any shape, element or length violation
        """
        tagged = classify_input(raw)
        if isinstance(tagged, ScalarInput):
            return self._normalize_scalar(tagged)
        return self._normalize_digits(tagged)

    def _normalize_scalar(self, scalar: ScalarInput) -> CanonicalDigits:
        value = scalar.value
        if value == 0:
            return CanonicalDigits(digits=(0,), is_negative=False, is_zero=True)

        digits = tuple(int(ch) for ch in str(abs(value)))
        return self._build(digits, is_negative=value < 0)

    def _normalize_digits(self, sequence: DigitsInput) -> CanonicalDigits:
        elements = sequence.elements
        if not elements:
            raise InvalidInput("Digit sequence is empty")

        # 1. Single zero
        if len(elements) == 1 and elements[0] == 0:
            return CanonicalDigits(digits=(0,), is_negative=False, is_zero=True)

        # 2. Sign detection on the first element only
        first = parse_first_element(elements[0])
        is_negative = isinstance(first, SignMarker) or first == 0
        remainder = elements[1:] if is_negative else elements
        offset = 1 if is_negative else 0

        # 3. Remaining digits
        if not remainder:
            raise InvalidInput("Digit sequence has a sign but no digits")

        digits = tuple(
            parse_digit(element, index=index + offset)
            for index, element in enumerate(remainder)
        )
        # a lone 0 after the sign reads as "negative zero"; longer zero runs are walked
        if digits == (0,):
            return CanonicalDigits(digits=digits, is_negative=is_negative, is_zero=True)
        return self._build(digits, is_negative=is_negative)

    def _build(self, digits: tuple[int, ...], is_negative: bool) -> CanonicalDigits:
        if len(digits) > MAX_DIGITS:
            raise InvalidInput(
                f"Unsupported magnitude: {len(digits)} digits (maximum is {MAX_DIGITS})"
            )
        try:
            return CanonicalDigits(digits=digits, is_negative=is_negative, is_zero=False)
        except ValidationError as exc:
            raise InvalidInput(str(exc)) from exc


def normalize(raw: Any) -> CanonicalDigits:
    """Convenience wrapper around InputNormalizer().normalize()."""
    return InputNormalizer().normalize(raw)
