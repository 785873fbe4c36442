"""
Press API endpoints.

Responsibility: Press tier classification preview for API v1
"""

from fastapi import APIRouter

from transparence.services.press_tiering import analysis_model_for, find_judicial_keyword
from transparence.models.press import ArticleTier
from api.v1.schemas.press import ClassifyRequest, ClassifyResponse

router = APIRouter()


@router.post("/press/classify", response_model=ClassifyResponse)
async def classify_press_article(request: ClassifyRequest):
    """
    Compute the analysis tier of an article from its title and description.

    Args:
        request: Article title and optional description

    Returns:
        ClassifyResponse with tier, matched keyword and analysis model
    """
    keyword = find_judicial_keyword(request.title, request.description)
    tier = ArticleTier.HIGH_PRECISION if keyword else ArticleTier.LOW_PRECISION
    return ClassifyResponse(
        tier=tier,
        matched_keyword=keyword,
        analysis_model=analysis_model_for(tier),
    )
