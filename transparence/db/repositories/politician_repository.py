"""
Repository for politician database operations.

Responsibility: Data access layer for the ``politicians`` table.
"""

from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from transparence.db.models import PoliticianModel

logger = logging.getLogger(__name__)


class PoliticianRepository:
    """Repository encapsulating persistence for ``PoliticianModel`` records."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_by_id(self, politician_id: int) -> Optional[PoliticianModel]:
        """Fetch a single politician by primary key."""
        stmt = select(PoliticianModel).where(PoliticianModel.id == politician_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_slug(self, slug: str) -> Optional[PoliticianModel]:
        """Fetch a single politician by URL slug."""
        stmt = select(PoliticianModel).where(PoliticianModel.slug == slug)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
