"""
Models package for Transparence Politique.

This package contains the Pydantic models for:
- Judicial affairs and duplicate detection results
- Press articles and analysis tiers
"""

from .affair import (
    AffairStatus,
    AffairCategory,
    Involvement,
    PublicationStatus,
    AffairSource,
    AffairRecord,
    DuplicateAffair,
    DuplicateGroup,
    MergeResult,
)
from .press import ArticleTier, PressArticle, ClassifiedArticle

__all__ = [
    "AffairStatus",
    "AffairCategory",
    "Involvement",
    "PublicationStatus",
    "AffairSource",
    "AffairRecord",
    "DuplicateAffair",
    "DuplicateGroup",
    "MergeResult",
    "ArticleTier",
    "PressArticle",
    "ClassifiedArticle",
]
