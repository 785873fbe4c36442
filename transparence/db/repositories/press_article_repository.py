"""
Repository for press article database operations.

Responsibility: Data access layer for the ``press_articles`` table.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from transparence.db.models import PressArticleModel
from transparence.models.press import ArticleTier

logger = logging.getLogger(__name__)


class PressArticleRepository:
    """Repository encapsulating persistence for ``PressArticleModel`` records."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def list_pending_analysis(
        self,
        limit: int = 200,
        feed_source: Optional[str] = None,
        reclassify: bool = False,
    ) -> List[PressArticleModel]:
        """
        Return articles not yet analysed, most recent first.

        Args:
            limit: Maximum number of articles
            feed_source: Restrict to one feed
            reclassify: Include articles that already carry a tier
        """
        stmt = select(PressArticleModel).where(PressArticleModel.ai_analyzed_at.is_(None))
        if not reclassify:
            stmt = stmt.where(PressArticleModel.tier.is_(None))
        if feed_source:
            stmt = stmt.where(PressArticleModel.feed_source == feed_source)
        stmt = stmt.order_by(PressArticleModel.published_at.desc()).limit(limit)

        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def set_tier(
        self,
        article_id: int,
        tier: ArticleTier,
        matched_keyword: Optional[str] = None,
    ) -> None:
        await self.session.execute(
            update(PressArticleModel)
            .where(PressArticleModel.id == article_id)
            .values(tier=tier.value, matched_keyword=matched_keyword)
        )
