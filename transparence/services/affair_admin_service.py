"""
Admin service for affair duplicate review.

Coordinates the duplicate detector with the affair repository and performs
the administrator actions that follow a review: merging two affairs or
deleting one, each recorded in the audit log.

Responsibility: Affair duplicate review, merge and delete workflows
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from ..db.models import AffairModel
from ..db.repositories import AffairRepository, AuditLogRepository, PoliticianRepository
from ..models.affair import AffairRecord, DuplicateGroup, MergeResult
from .duplicate_detector import detect_duplicate_affairs

logger = logging.getLogger(__name__)

# Scalar identifiers copied from the secondary when the primary lacks them.
_MERGEABLE_IDENTIFIERS = ("ecli", "pourvoi_number", "court", "chamber", "case_number")


class AffairNotFoundError(LookupError):
    """Raised when an affair referenced by an admin action does not exist."""

    def __init__(self, affair_ids: List[int]):
        self.affair_ids = affair_ids
        super().__init__(f"Affair(s) not found: {', '.join(str(i) for i in affair_ids)}")


class PoliticianNotFoundError(LookupError):
    """Raised when duplicate detection targets an unknown politician."""


class InvalidMergeError(ValueError):
    """Raised when a merge request cannot be honoured."""


def plan_identifier_merge(primary: AffairModel, secondary: AffairModel) -> Dict[str, Any]:
    """
    Judicial identifiers to copy from ``secondary`` onto ``primary``.

    Only fields empty on the primary are filled.
    """
    updates: Dict[str, Any] = {}
    for field_name in _MERGEABLE_IDENTIFIERS:
        if not getattr(primary, field_name) and getattr(secondary, field_name):
            updates[field_name] = getattr(secondary, field_name)
    if not primary.case_numbers and secondary.case_numbers:
        updates["case_numbers"] = list(secondary.case_numbers)
    return updates


class AffairAdminService:
    """
    Affair review workflows for the admin back-office.

    Example:
        async with db.session() as session:
            service = AffairAdminService(session)
            groups, total = await service.detect_duplicates(politician_id=42)
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self.affairs = AffairRepository(session)
        self.audit = AuditLogRepository(session)
        self.politicians = PoliticianRepository(session)

    async def detect_duplicates(self, politician_id: int) -> Tuple[List[DuplicateGroup], int]:
        """
        Run the duplicate detector over a politician's affairs.

        Returns:
            Tuple of (duplicate groups, number of affairs compared)
        """
        if await self.politicians.get_by_id(politician_id) is None:
            raise PoliticianNotFoundError(f"Politician {politician_id} not found")

        models = await self.affairs.list_for_politician(politician_id)
        records = [AffairRecord.model_validate(model) for model in models]
        groups = detect_duplicate_affairs(records)

        logger.info(
            f"Duplicate detection for politician {politician_id}: "
            f"{len(records)} affairs, {len(groups)} candidate pair(s)"
        )
        return groups, len(records)

    async def merge(self, primary_id: int, secondary_id: int) -> MergeResult:
        """
        Merge ``secondary_id`` into ``primary_id`` and delete the secondary.

        Sources whose URL the primary already cites are dropped with the
        secondary; events and press links move over.

        Raises:
            InvalidMergeError: both ids are the same
            AffairNotFoundError: either affair does not exist
        """
        if primary_id == secondary_id:
            raise InvalidMergeError("Cannot merge an affair into itself")

        primary = await self.affairs.get_by_id(primary_id, with_sources=True)
        secondary = await self.affairs.get_by_id(secondary_id, with_sources=True)

        missing = [
            affair_id for affair_id, affair in ((primary_id, primary), (secondary_id, secondary))
            if affair is None
        ]
        if missing:
            raise AffairNotFoundError(missing)

        existing_urls = {source.url for source in primary.sources}
        sources_to_move = [s.id for s in secondary.sources if s.url not in existing_urls]

        sources_moved = await self.affairs.move_sources(sources_to_move, primary_id)
        events_moved = await self.affairs.move_events(secondary_id, primary_id)
        press_links_moved = await self.affairs.move_press_links(secondary_id, primary_id)

        updates = plan_identifier_merge(primary, secondary)
        if updates:
            await self.affairs.apply_updates(primary, updates)

        secondary_title = secondary.title
        await self.affairs.delete(secondary)

        await self.audit.record(
            action="UPDATE",
            entity_type="Affair",
            entity_id=primary_id,
            changes={
                "merged": True,
                "deleted_affair_id": secondary_id,
                "deleted_affair_title": secondary_title,
                "sources_moved": sources_moved,
                "events_moved": events_moved,
                "press_links_moved": press_links_moved,
                "identifiers_merged": sorted(updates),
            },
        )

        logger.info(
            f"Merged affair {secondary_id} into {primary_id}: "
            f"{sources_moved} source(s), {events_moved} event(s) moved"
        )

        return MergeResult(
            primary_id=primary_id,
            deleted_id=secondary_id,
            sources_moved=sources_moved,
            events_moved=events_moved,
            press_links_moved=press_links_moved,
            identifiers_merged=sorted(updates),
        )

    async def delete(self, affair_id: int) -> None:
        """
        Delete an affair and its sources.

        Raises:
            AffairNotFoundError: the affair does not exist
        """
        affair = await self.affairs.get_by_id(affair_id)
        if affair is None:
            raise AffairNotFoundError([affair_id])

        title = affair.title
        await self.affairs.delete(affair)
        await self.audit.record(
            action="DELETE",
            entity_type="Affair",
            entity_id=affair_id,
            changes={"title": title},
        )
        logger.info(f"Deleted affair {affair_id}")
