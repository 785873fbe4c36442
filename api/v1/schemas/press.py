"""
Press API request/response schemas.

Responsibility: API v1 press tier classification schemas
"""

from typing import Optional
from pydantic import BaseModel, Field

from transparence.models.press import ArticleTier


class ClassifyRequest(BaseModel):
    """Article text to route."""

    title: str = Field(default="", max_length=2000)
    description: Optional[str] = Field(default=None, max_length=20000)


class ClassifyResponse(BaseModel):
    """Computed analysis tier."""

    tier: ArticleTier
    matched_keyword: Optional[str] = None
    analysis_model: str
