"""API v1 response schemas."""

from api.v1.schemas.affairs import (
    DuplicateDetectionResponse,
    MergeRequest,
    MergeResponse,
    DeleteResponse,
)
from api.v1.schemas.press import ClassifyRequest, ClassifyResponse

__all__ = [
    "DuplicateDetectionResponse",
    "MergeRequest",
    "MergeResponse",
    "DeleteResponse",
    "ClassifyRequest",
    "ClassifyResponse",
]
