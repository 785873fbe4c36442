"""
Utilities package for Transparence Politique.

This package contains reusable helpers for:
- Text normalisation and tokenisation
- Judicial keyword lists used by press tiering
"""

from .text import normalize_text, strip_accents, tokenize, join_text
from .press_keywords import (
    JUDICIAL_KEYWORDS,
    PROCEDURAL_KEYWORDS,
    OFFENSE_KEYWORDS,
    JURISDICTION_KEYWORDS,
)

__all__ = [
    "normalize_text",
    "strip_accents",
    "tokenize",
    "join_text",
    "JUDICIAL_KEYWORDS",
    "PROCEDURAL_KEYWORDS",
    "OFFENSE_KEYWORDS",
    "JURISDICTION_KEYWORDS",
]
