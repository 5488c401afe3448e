"""
Tests for the English lexicon

Checks:
1. Table contents (ones, tens, teens, scales)
2. tens_prefix deferral for digit 1
3. Out-of-range digits and scale groups → InvalidInput
"""

import pytest

from src.core.domain.digits import InvalidInput
from src.core.lexicon import (
    DEFER_TO_TEENS,
    MAX_SCALE_GROUP,
    SCALE_NAMES,
    TensKind,
    ones_name,
    scale_name,
    scale_suffix,
    teens_name,
    tens_prefix,
)


class TestOnesName:
    """Тесты для ones_name"""

    def test_zero_is_empty(self) -> None:
        assert ones_name(0) == ""

    @pytest.mark.parametrize(
        "digit,expected",
        [(1, "one"), (2, "two"), (3, "three"), (4, "four"), (5, "five"),
         (6, "six"), (7, "seven"), (8, "eight"), (9, "nine")],
    )
    def test_digits(self, digit: int, expected: str) -> None:
        assert ones_name(digit) == expected

    @pytest.mark.parametrize("digit", [-1, 10, 42])
    def test_out_of_range_rejected(self, digit: int) -> None:
        with pytest.raises(InvalidInput, match="Invalid digit"):
            ones_name(digit)

    def test_non_integer_rejected(self) -> None:
        with pytest.raises(InvalidInput, match="Expected an integer digit"):
            ones_name("5")  # type: ignore[arg-type]


class TestTensPrefix:
    """Тесты для tens_prefix"""

    def test_zero_is_empty_literal(self) -> None:
        prefix = tens_prefix(0)
        assert prefix.kind == TensKind.LITERAL
        assert prefix.text == ""
        assert not prefix.defers_to_teens

    def test_one_defers_to_teens(self) -> None:
        prefix = tens_prefix(1)
        assert prefix is DEFER_TO_TEENS
        assert prefix.defers_to_teens
        assert prefix.text == ""

    @pytest.mark.parametrize(
        "digit,expected",
        [(2, "twenty-"), (3, "thirty-"), (4, "forty-"), (5, "fifty-"),
         (6, "sixty-"), (7, "seventy-"), (8, "eighty-"), (9, "ninety-")],
    )
    def test_literal_prefixes_end_with_hyphen(self, digit: int, expected: str) -> None:
        prefix = tens_prefix(digit)
        assert prefix.kind == TensKind.LITERAL
        assert prefix.text == expected

    def test_never_returns_ten_dash(self) -> None:
        for digit in range(10):
            assert tens_prefix(digit).text != "ten-"

    def test_out_of_range_rejected(self) -> None:
        with pytest.raises(InvalidInput):
            tens_prefix(10)


class TestTeensName:
    """Тесты для teens_name"""

    def test_full_table(self) -> None:
        assert [teens_name(d) for d in range(10)] == [
            "ten", "eleven", "twelve", "thirteen", "fourteen",
            "fifteen", "sixteen", "seventeen", "eighteen", "nineteen",
        ]

    def test_out_of_range_rejected(self) -> None:
        with pytest.raises(InvalidInput):
            teens_name(-1)


class TestScaleName:
    """Тесты для scale_name / scale_suffix"""

    def test_full_table(self) -> None:
        assert [scale_name(g) for g in range(10)] == [
            "", "thousand", "million", "billion", "trillion",
            "quadrillion", "quintillion", "sextillion", "septillion", "octillion",
        ]

    def test_max_group_matches_table(self) -> None:
        assert MAX_SCALE_GROUP == 9
        assert len(SCALE_NAMES) == 10

    def test_group_beyond_octillion_rejected(self) -> None:
        with pytest.raises(InvalidInput, match="Unsupported scale group: 10"):
            scale_name(10)

    def test_negative_group_rejected(self) -> None:
        with pytest.raises(InvalidInput):
            scale_name(-1)

    def test_suffix_carries_surrounding_spaces(self) -> None:
        assert scale_suffix(1) == " thousand "
        assert scale_suffix(9) == " octillion "

    def test_units_suffix_is_empty(self) -> None:
        assert scale_suffix(0) == ""
