"""Spelling Converter — integer or digit sequence → English words

Pipeline:
    raw input → STAGE 1 (normalize) → STAGE 2 (assemble) → STAGE 3 (format)

Pure and stateless: no I/O, no logging, no shared mutable state. Any number
of callers may share one SpellingConverter.

Examples:
    >>> to_words(5555)
    'five thousand five hundred fifty-five'
    >>> to_words([0, 4, 2])
    'negative forty-two'
"""

from dataclasses import dataclass
from typing import Any, Optional

from src.speller.stages.stage_01_normalizer import InputNormalizer
from src.speller.stages.stage_02_assembler import AssemblerConfig, GroupedAssembler
from src.speller.stages.stage_03_formatter import Formatter


@dataclass(frozen=True)
class SpellingResult:
    """Результат конверсии с промежуточными данными пайплайна."""

    words: str

    # STAGE 1
    digits: tuple[int, ...]
    is_negative: bool
    is_zero: bool

    # STAGE 2
    fragments: tuple[str, ...]
    skipped_groups: tuple[int, ...]

    details: str

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly form (matches the spelling_result contract schema)."""
        return {
            "words": self.words,
            "digits": list(self.digits),
            "is_negative": self.is_negative,
            "is_zero": self.is_zero,
            "fragments": list(self.fragments),
            "skipped_groups": list(self.skipped_groups),
            "details": self.details,
        }


class SpellingConverter:
    """Runs the three speller stages in order."""

    def __init__(self, assembler_config: Optional[AssemblerConfig] = None):
        """
        Args:
            assembler_config: STAGE 2 configuration (default: AssemblerConfig())
        """
        self.assembler_config = assembler_config or AssemblerConfig()
        self._normalizer = InputNormalizer()
        self._assembler = GroupedAssembler(self.assembler_config)
        self._formatter = Formatter()

    def explain(self, value: Any) -> SpellingResult:
        """Spell value and keep every intermediate result.

        Args:
            value: int, digit sequence, ScalarInput or DigitsInput

        Returns:
            SpellingResult

        Raises:
            InvalidInput: if value cannot be spelled
        """
        canonical = self._normalizer.normalize(value)
        assembly = self._assembler.assemble(canonical)
        words = self._formatter.format(assembly.fragments)

        return SpellingResult(
            words=words,
            digits=canonical.digits,
            is_negative=canonical.is_negative,
            is_zero=canonical.is_zero,
            fragments=assembly.fragments,
            skipped_groups=assembly.skipped_groups,
            details=assembly.details,
        )

    def to_words(self, value: Any) -> str:
        return self.explain(value).words


def to_words(value: Any, config: Optional[AssemblerConfig] = None) -> str:
    """
    Spell an integer in English.

    Args:
        value: native int, or a sequence of digits 0-9 (most-significant
            first) optionally led by "-" or 0 as a sign marker
        config: STAGE 2 configuration

    Returns:
        Lower-case words, e.g. "negative fifty-five"

    Raises:
        InvalidInput: for any other shape, non-digit elements, empty
            sequences or more than 30 digits
    """
    return SpellingConverter(config).to_words(value)
