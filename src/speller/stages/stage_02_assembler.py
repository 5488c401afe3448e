"""STAGE 2: Grouped Assembler — CanonicalDigits → word fragments

Walks ordinals from n-1 down to 0 (most-significant digit first) with one
piece of state, teen_pending:

- place 2 (hundreds): ones_name(d) + " hundred ", or "" for 0
- place 1 (tens):     d == 1 → empty fragment, teen_pending = True
                      otherwise tens_prefix(d).text
- place 0 (ones):     teens_name(d) if teen_pending else ones_name(d),
                      followed by scale_suffix(group)

The scale suffix is emitted at every group's ones position, even when the
whole group is zero (1000000 → "one million  thousand"). AssemblerConfig
.skip_empty_groups suppresses it for all-zero groups.

Fragments come out in final output order; one fragment per digit, plus a
leading "negative " for negative input.
"""

from dataclasses import dataclass

from src.core.domain.digits import CanonicalDigits
from src.core.lexicon.english import (
    HUNDRED_SUFFIX,
    NEGATIVE_PREFIX,
    ZERO_WORD,
    ones_name,
    scale_suffix,
    teens_name,
    tens_prefix,
)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class AssemblerConfig:
    """Конфигурация STAGE 2.

    skip_empty_groups=False keeps the scale word for all-zero groups, which
    is the established output of the speller.
    """

    skip_empty_groups: bool = False


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class AssemblyResult:
    """Результат STAGE 2."""

    fragments: tuple[str, ...]

    # Scale groups whose suffix was dropped (skip_empty_groups only)
    skipped_groups: tuple[int, ...]

    details: str


# =============================================================================
# STAGE 2
# =============================================================================


class GroupedAssembler:
    """STAGE 2: emits one fragment per digit position."""

    def __init__(self, config: AssemblerConfig | None = None):
        self.config = config or AssemblerConfig()

    def assemble(self, canonical: CanonicalDigits) -> AssemblyResult:
        """Build the fragment sequence for a canonical digit sequence.

        Args:
            canonical: output of STAGE 1

        Returns:
            AssemblyResult with fragments in output order

        Raises:
            InvalidInput: if a digit falls in a scale group beyond the lexicon
        """
        fragments: list[str] = []
        if canonical.is_negative:
            fragments.append(NEGATIVE_PREFIX)

        if canonical.is_zero:
            fragments.append(ZERO_WORD)
            return AssemblyResult(
                fragments=tuple(fragments),
                skipped_groups=(),
                details="zero magnitude",
            )

        skipped_groups: list[int] = []
        teen_pending = False

        for ordinal, digit in canonical.positions():
            place = canonical.place_of(ordinal)
            group = canonical.group_of(ordinal)

            if place == 2:
                name = ones_name(digit)
                fragments.append(name + HUNDRED_SUFFIX if name else "")
                teen_pending = False

            elif place == 1:
                prefix = tens_prefix(digit)
                # tens digit 1 is rendered by the next (ones) position
                fragments.append(prefix.text)
                teen_pending = prefix.defers_to_teens

            else:
                name = teens_name(digit) if teen_pending else ones_name(digit)
                suffix = scale_suffix(group)
                if self.config.skip_empty_groups and suffix and not any(
                    canonical.group_digits(group)
                ):
                    suffix = ""
                    skipped_groups.append(group)
                fragments.append(name + suffix)
                teen_pending = False

        return AssemblyResult(
            fragments=tuple(fragments),
            skipped_groups=tuple(skipped_groups),
            details=f"digits={len(canonical.digits)}, negative={canonical.is_negative}",
        )
