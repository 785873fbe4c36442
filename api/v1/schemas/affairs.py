"""
Affair admin API request/response schemas.

Pydantic models for the duplicate review and merge endpoints.

Responsibility: API v1 affair admin schemas
"""

from typing import List
from pydantic import BaseModel, Field

from transparence.models.affair import DuplicateGroup


class DuplicateDetectionResponse(BaseModel):
    """Candidate duplicate pairs for one politician."""

    politician_id: int
    groups: List[DuplicateGroup]
    total: int = Field(description="Number of affairs compared")


class MergeRequest(BaseModel):
    """Merge ``secondary_id`` into ``primary_id``."""

    primary_id: int = Field(ge=1)
    secondary_id: int = Field(ge=1)


class MergeResponse(BaseModel):
    """Merge outcome."""

    success: bool = True
    primary_id: int
    deleted_id: int
    sources_moved: int
    events_moved: int
    press_links_moved: int
    identifiers_merged: List[str]


class DeleteResponse(BaseModel):
    success: bool = True
    deleted_id: int
