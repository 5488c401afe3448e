"""STAGE 3: Formatter — fragments → final string

Fragments already carry their own separators (tens prefixes end in "-",
hundreds and scale words carry surrounding spaces), so formatting is a plain
concatenation followed by trimming of leading/trailing whitespace. No casing
or punctuation changes: a dangling hyphen ("twenty-") is kept as emitted.
"""

from typing import Iterable


class Formatter:
    """STAGE 3: joins fragments in emission order."""

    def format(self, fragments: Iterable[str]) -> str:
        """
        Args:
            fragments: STAGE 2 fragments, output order

        Returns:
            Concatenated, whitespace-trimmed text
        """
        return "".join(fragments).strip()


def format_fragments(fragments: Iterable[str]) -> str:
    return Formatter().format(fragments)
