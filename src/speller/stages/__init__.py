"""Stages — individual steps of the integer speller pipeline.

- STAGE 1: Input Normalizer (raw input → CanonicalDigits)
- STAGE 2: Grouped Assembler (CanonicalDigits → word fragments)
- STAGE 3: Formatter (fragments → text)
"""

from .stage_01_normalizer import InputNormalizer, classify_input, normalize
from .stage_02_assembler import AssemblerConfig, AssemblyResult, GroupedAssembler
from .stage_03_formatter import Formatter, format_fragments

__all__ = [
    "InputNormalizer",
    "classify_input",
    "normalize",
    "GroupedAssembler",
    "AssemblerConfig",
    "AssemblyResult",
    "Formatter",
    "format_fragments",
]
