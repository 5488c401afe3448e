"""
Test suite for integer-words

Contains:
- tests/unit/          : Unit tests for the lexicon, domain model, stages, contracts and CLI
"""
