"""
Contract Validation Module

JSON Schema contracts for the integer speller payloads.
"""

from .validators import (
    ContractValidator,
    SchemaLoader,
    SpellingRequestValidator,
    SpellingResultValidator,
    get_schema_loader,
    validate_spelling_request,
    validate_spelling_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "SpellingRequestValidator",
    "SpellingResultValidator",
    # Functions
    "get_schema_loader",
    "validate_spelling_request",
    "validate_spelling_result",
]
