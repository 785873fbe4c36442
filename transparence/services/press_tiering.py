"""
Press article tier classification.

Routes incoming press articles to the high-precision (costlier) or
low-precision (cheaper) analysis pipeline depending on whether the title or
description mentions judicial vocabulary.

Responsibility: Deterministic keyword-based tier routing for press articles
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Iterable, List, Optional, Tuple

from ..config import settings
from ..models.press import ArticleTier, ClassifiedArticle, PressArticle
from ..utils.press_keywords import JUDICIAL_KEYWORDS
from ..utils.text import join_text, normalize_text

logger = logging.getLogger(__name__)

Matcher = Callable[[str], bool]


def _build_matcher(keyword: str) -> Matcher:
    """Phrases match as substrings, single words on alphanumeric boundaries."""
    if " " in keyword:
        return lambda text: keyword in text
    pattern = re.compile(rf"(?<![^\W_]){re.escape(keyword)}(?![^\W_])")
    return lambda text: pattern.search(text) is not None


_MATCHERS: Tuple[Tuple[str, Matcher], ...] = tuple(
    (keyword, _build_matcher(keyword)) for keyword in JUDICIAL_KEYWORDS
)


def find_judicial_keyword(title: Optional[str], description: Optional[str] = None) -> Optional[str]:
    """
    Return the first judicial keyword found in the article text.

    Args:
        title: Article title
        description: Article description/lede, may be absent

    Returns:
        The matching keyword (normalised form), or None
    """
    text = normalize_text(join_text((title, description)))
    if not text:
        return None

    for keyword, matches in _MATCHERS:
        if matches(text):
            return keyword
    return None


def classify_article_tier(title: Optional[str], description: Optional[str] = None) -> ArticleTier:
    """
    Decide which analysis tier processes an article.

    Example:
        >>> classify_article_tier("Politicien X mis en examen", None)
        <ArticleTier.HIGH_PRECISION: 'high-precision'>
        >>> classify_article_tier("Le processus législatif continue", None)
        <ArticleTier.LOW_PRECISION: 'low-precision'>
    """
    if find_judicial_keyword(title, description) is not None:
        return ArticleTier.HIGH_PRECISION
    return ArticleTier.LOW_PRECISION


def classify_article(article: PressArticle) -> ClassifiedArticle:
    """Attach tier and matched keyword to an article."""
    keyword = find_judicial_keyword(article.title, article.description)
    tier = ArticleTier.HIGH_PRECISION if keyword else ArticleTier.LOW_PRECISION
    return ClassifiedArticle(article=article, tier=tier, matched_keyword=keyword)


def prioritize_articles(articles: Iterable[PressArticle]) -> List[ClassifiedArticle]:
    """
    Classify a batch and order it for analysis.

    High-precision articles come first; within a tier, most recent first.
    """
    classified = [classify_article(article) for article in articles]
    classified.sort(
        key=lambda item: (
            item.tier != ArticleTier.HIGH_PRECISION,
            -item.article.published_at.timestamp(),
        )
    )

    high_count = sum(1 for item in classified if item.tier == ArticleTier.HIGH_PRECISION)
    logger.info(
        "Classified %s articles: %s high-precision, %s low-precision",
        len(classified),
        high_count,
        len(classified) - high_count,
    )
    return classified


def analysis_model_for(tier: ArticleTier) -> str:
    """Analysis model configured for the given tier."""
    if tier == ArticleTier.HIGH_PRECISION:
        return settings.press.high_precision_model
    return settings.press.low_precision_model
