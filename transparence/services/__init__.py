"""Services package for affair review and press routing logic"""

from .affair_admin_service import (
    AffairAdminService,
    AffairNotFoundError,
    InvalidMergeError,
    PoliticianNotFoundError,
    plan_identifier_merge,
)
from .duplicate_detector import detect_duplicate_affairs, score_pair, title_similarity
from .press_tiering import (
    classify_article_tier,
    classify_article,
    find_judicial_keyword,
    prioritize_articles,
    analysis_model_for,
)

__all__ = [
    "AffairAdminService",
    "AffairNotFoundError",
    "InvalidMergeError",
    "PoliticianNotFoundError",
    "plan_identifier_merge",
    "detect_duplicate_affairs",
    "score_pair",
    "title_similarity",
    "classify_article_tier",
    "classify_article",
    "find_judicial_keyword",
    "prioritize_articles",
    "analysis_model_for",
]
