"""Command-line wrapper around the integer speller.

How to run:
  integer-words 5555
  integer-words -42
  integer-words --digits 099999999
  integer-words --json '{"kind": "digits", "elements": ["-", 1, 2]}'

The speller itself never logs or prints; this module owns all console output.
"""

import argparse
import json
import logging
import re
import sys
from typing import Any, Optional, Sequence

from jsonschema import ValidationError
from pydantic import TypeAdapter
from pydantic import ValidationError as ModelValidationError

from src.core.contracts import validate_spelling_request, validate_spelling_result
from src.core.domain.digits import InvalidInput, SignMarker, SpellingInput
from src.speller.converter import SpellingConverter
from src.speller.stages.stage_02_assembler import AssemblerConfig

logger = logging.getLogger(__name__)

_INTEGER_RE = re.compile(r"^-?[0-9]+$")

_SPELLING_INPUT_ADAPTER: TypeAdapter = TypeAdapter(SpellingInput)


def parse_number_argument(text: str) -> int:
    """Plain optionally-signed decimal integer; nothing else is accepted."""
    text = text.strip()
    if not _INTEGER_RE.match(text):
        raise InvalidInput(f"Not an integer: {text!r}")
    return int(text)


def parse_digits_argument(text: str) -> list[Any]:
    """One element per character: '-' is the sign marker, 0-9 are digits."""
    elements: list[Any] = []
    for index, ch in enumerate(text.strip()):
        if ch == SignMarker.MINUS.value:
            elements.append(SignMarker.MINUS)
        elif ch.isdigit() and ch.isascii():
            elements.append(int(ch))
        else:
            raise InvalidInput(f"Invalid character {ch!r} at position {index}")
    return elements


def parse_json_request(text: str) -> Any:
    """
    Parse and validate a spelling_request JSON payload.

    Raises:
        json.JSONDecodeError: malformed JSON
        ValidationError: payload does not match spelling_request.json
        InvalidInput: payload cannot be turned into a tagged input
    """
    payload = json.loads(text)
    validate_spelling_request(payload)
    try:
        return _SPELLING_INPUT_ADAPTER.validate_python(payload)
    except ModelValidationError as exc:
        raise InvalidInput(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="integer-words",
        description="Spell an integer (up to 30 digits) in English words.",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "number",
        nargs="?",
        help="Integer to spell (e.g. 5555, -42).",
    )
    source.add_argument(
        "--digits",
        help="Digit sequence, one character per element (leading '-' or '0' means negative).",
    )
    source.add_argument(
        "--json",
        dest="json_request",
        help="spelling_request JSON payload; prints a spelling_result JSON payload.",
    )
    parser.add_argument(
        "--skip-empty-groups",
        action="store_true",
        help="Omit scale words for groups whose digits are all zero.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    converter = SpellingConverter(AssemblerConfig(skip_empty_groups=args.skip_empty_groups))

    try:
        if args.json_request is not None:
            value = parse_json_request(args.json_request)
        elif args.digits is not None:
            value = parse_digits_argument(args.digits)
        else:
            value = parse_number_argument(args.number)

        logger.debug("Input: %r", value)
        result = converter.explain(value)
        logger.debug("Fragments: %r (%s)", result.fragments, result.details)

        if args.json_request is not None:
            payload = result.to_dict()
            validate_spelling_result(payload)
            print(json.dumps(payload))
        else:
            print(result.words)
        return 0
    except (InvalidInput, ValidationError, json.JSONDecodeError) as exc:
        message = exc.message if isinstance(exc, ValidationError) else str(exc)
        logger.debug("Conversion failed", exc_info=True)
        print(f"Error: {message}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
