"""
Press article domain models.

Responsibility: Press article entities and tier routing labels
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ArticleTier(str, Enum):
    """
    Downstream analysis tier for a press article.

    High precision articles mention judicial vocabulary and go through the
    costlier analysis model.
    """
    HIGH_PRECISION = "high-precision"
    LOW_PRECISION = "low-precision"


class PressArticle(BaseModel):
    """Article collected from a press RSS feed."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    feed_source: str = Field(description="Feed identifier (e.g., 'lemonde', 'mediapart')")
    url: str
    title: str
    description: Optional[str] = None
    published_at: datetime


class ClassifiedArticle(BaseModel):
    """Press article with its computed analysis tier."""

    article: PressArticle
    tier: ArticleTier
    matched_keyword: Optional[str] = None
