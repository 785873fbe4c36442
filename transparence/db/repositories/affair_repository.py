"""
Repository for affair database operations.

Loads a politician's affairs with their sources for duplicate detection and
performs the row moves behind the admin merge action.

Responsibility: Data access layer for the ``affairs`` table and its children
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.orm import selectinload
from sqlalchemy.ext.asyncio import AsyncSession

from transparence.db.models import (
    AffairEventModel,
    AffairModel,
    PressArticleAffairModel,
    SourceModel,
)

logger = logging.getLogger(__name__)


class AffairRepository:
    """Repository encapsulating persistence for ``AffairModel`` records."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_by_id(self, affair_id: int, with_sources: bool = False) -> Optional[AffairModel]:
        """Fetch a single affair by primary key."""
        stmt = select(AffairModel).where(AffairModel.id == affair_id)
        if with_sources:
            stmt = stmt.options(selectinload(AffairModel.sources))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_for_politician(self, politician_id: int) -> List[AffairModel]:
        """Return every affair of a politician with sources, newest first."""
        stmt = (
            select(AffairModel)
            .where(AffairModel.politician_id == politician_id)
            .options(selectinload(AffairModel.sources))
            .order_by(AffairModel.created_at.desc(), AffairModel.id.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def move_sources(self, source_ids: Iterable[int], to_affair_id: int) -> int:
        """Reattach the given sources to another affair."""
        ids = list(source_ids)
        if not ids:
            return 0
        result = await self.session.execute(
            update(SourceModel)
            .where(SourceModel.id.in_(ids))
            .values(affair_id=to_affair_id)
        )
        return result.rowcount or 0

    async def move_events(self, from_affair_id: int, to_affair_id: int) -> int:
        result = await self.session.execute(
            update(AffairEventModel)
            .where(AffairEventModel.affair_id == from_affair_id)
            .values(affair_id=to_affair_id)
        )
        return result.rowcount or 0

    async def move_press_links(self, from_affair_id: int, to_affair_id: int) -> int:
        """
        Move press article links between affairs.

        Links to articles already attached to the target are dropped, the
        (article, affair) pair being the primary key.
        """
        already_linked = select(PressArticleAffairModel.article_id).where(
            PressArticleAffairModel.affair_id == to_affair_id
        )
        await self.session.execute(
            delete(PressArticleAffairModel).where(
                PressArticleAffairModel.affair_id == from_affair_id,
                PressArticleAffairModel.article_id.in_(already_linked),
            )
        )
        result = await self.session.execute(
            update(PressArticleAffairModel)
            .where(PressArticleAffairModel.affair_id == from_affair_id)
            .values(affair_id=to_affair_id)
        )
        return result.rowcount or 0

    async def apply_updates(self, affair: AffairModel, updates: Dict[str, Any]) -> AffairModel:
        for key, value in updates.items():
            setattr(affair, key, value)
        await self.session.flush()
        return affair

    async def delete(self, affair: AffairModel) -> None:
        """Delete an affair; sources, events and press links cascade."""
        # Sources may have been moved by a bulk update; let the database cascade
        self.session.expire(affair, ["sources"])
        await self.session.delete(affair)
        await self.session.flush()
        logger.debug("Deleted affair %s", affair.id)
