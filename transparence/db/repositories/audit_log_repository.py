"""
Repository for the administrator audit trail.

Responsibility: Data access layer for the ``audit_logs`` table.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from transparence.db.models import AuditLogModel

logger = logging.getLogger(__name__)


class AuditLogRepository:
    """Append-only access to ``AuditLogModel`` records."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def record(
        self,
        action: str,
        entity_type: str,
        entity_id: int,
        changes: Optional[Dict[str, Any]] = None,
    ) -> AuditLogModel:
        entry = AuditLogModel(
            action=action,
            entity_type=entity_type,
            entity_id=entity_id,
            changes=changes,
        )
        self.session.add(entry)
        await self.session.flush()
        logger.info("Audit %s %s %s", action, entity_type, entity_id)
        return entry
