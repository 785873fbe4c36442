"""Text normalisation helpers shared by the press and affair services."""

from __future__ import annotations

import re
import unicodedata
from typing import Iterable, List, Optional

_WHITESPACE_RE = re.compile(r"\s+")

# Typographic apostrophes folded to the ASCII one used in keywords
_APOSTROPHES = str.maketrans({"\u2019": "'", "\u2018": "'", "\u02bc": "'"})
_NON_ALNUM_RE = re.compile(r"[^a-z0-9\s]")


def strip_accents(text: str) -> str:
    """Remove diacritics via NFD decomposition and combining-mark removal."""
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def normalize_text(text: Optional[str]) -> str:
    """Lowercase, strip accents, fold apostrophes and collapse whitespace."""
    if not text:
        return ""
    folded = strip_accents(text.lower()).translate(_APOSTROPHES)
    return _WHITESPACE_RE.sub(" ", folded).strip()


def join_text(parts: Iterable[Optional[str]]) -> str:
    """Join the non-empty parts with a single space."""
    return " ".join(part for part in parts if part)


def tokenize(text: Optional[str], stopwords: frozenset[str] = frozenset()) -> List[str]:
    """
    Split text into comparable ASCII tokens.

    Punctuation becomes a separator, single-character tokens and
    ``stopwords`` are dropped.
    """
    cleaned = _NON_ALNUM_RE.sub(" ", normalize_text(text))
    return [
        word for word in cleaned.split()
        if len(word) > 1 and word not in stopwords
    ]
