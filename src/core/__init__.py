"""
Core domain models, lexicon tables and contracts.

This module contains the building blocks that are independent of any
surface (CLI, JSON payloads): the digit model, the English lexicon and
the JSON Schema contracts.
"""
