import asyncio
from datetime import date, datetime

import pytest
from sqlalchemy import event, select
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from transparence.db.models import (
    AffairEventModel,
    AffairModel,
    AuditLogModel,
    Base,
    PoliticianModel,
    PressArticleAffairModel,
    PressArticleModel,
    SourceModel,
)
from transparence.models.affair import AffairCategory, AffairStatus
from transparence.services import (
    AffairAdminService,
    AffairNotFoundError,
    InvalidMergeError,
    PoliticianNotFoundError,
)


def _enable_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _make_affair(affair_id: int, title: str, **overrides) -> AffairModel:
    data = {
        "id": affair_id,
        "politician_id": 1,
        "title": title,
        "status": AffairStatus.INSTRUCTION.value,
        "category": AffairCategory.EMPLOI_FICTIF.value,
    }
    data.update(overrides)
    return AffairModel(**data)


def _make_article(article_id: int) -> PressArticleModel:
    return PressArticleModel(
        id=article_id,
        feed_source="lemonde",
        url=f"https://www.lemonde.fr/article-{article_id}",
        title=f"Article {article_id}",
        published_at=datetime(2024, 5, article_id),
    )


async def _seed(session) -> None:
    session.add(PoliticianModel(id=1, slug="jean-dupont", full_name="Jean Dupont"))
    session.add_all([
        _make_affair(
            1,
            "Emplois fictifs à la mairie",
            court="Tribunal correctionnel de Paris",
            facts_date=date(2016, 4, 1),
        ),
        _make_affair(
            2,
            "Emplois fictifs à la mairie de Paris",
            ecli="ECLI:FR:CCASS:2021:CR00042",
            court="Cour d'appel de Paris",
            case_numbers=["17/001"],
            facts_date=date(2016, 4, 3),
        ),
    ])
    await session.flush()
    session.add_all([
        SourceModel(id=1, affair_id=1, url="https://example.org/u1"),
        SourceModel(id=2, affair_id=2, url="https://example.org/u1"),
        SourceModel(id=3, affair_id=2, url="https://example.org/u2"),
        AffairEventModel(
            affair_id=2,
            event_date=date(2019, 6, 1),
            event_type="MISE_EN_EXAMEN",
            title="Mise en examen",
        ),
        _make_article(1),
        _make_article(2),
    ])
    await session.flush()
    session.add_all([
        PressArticleAffairModel(article_id=1, affair_id=1),
        PressArticleAffairModel(article_id=1, affair_id=2),
        PressArticleAffairModel(article_id=2, affair_id=2),
    ])
    await session.commit()


def _run(scenario):
    """Run ``scenario(session_factory)`` against a seeded in-memory SQLite database."""

    async def main():
        engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
        event.listen(engine.sync_engine, "connect", _enable_foreign_keys)
        try:
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            factory = async_sessionmaker(engine, expire_on_commit=False)
            async with factory() as session:
                await _seed(session)
            return await scenario(factory)
        finally:
            await engine.dispose()

    return asyncio.run(main())


def test_merge_moves_children_and_deletes_secondary() -> None:
    async def scenario(factory):
        async with factory() as session:
            result = await AffairAdminService(session).merge(1, 2)
            await session.commit()

        async with factory() as session:
            sources = (await session.execute(
                select(SourceModel.affair_id, SourceModel.url).order_by(SourceModel.url)
            )).all()
            events = (await session.execute(select(AffairEventModel.affair_id))).scalars().all()
            links = (await session.execute(
                select(PressArticleAffairModel.article_id, PressArticleAffairModel.affair_id)
                .order_by(PressArticleAffairModel.article_id)
            )).all()
            affairs = (await session.execute(select(AffairModel))).scalars().all()
            audit = (await session.execute(select(AuditLogModel))).scalars().all()
        return result, sources, events, links, affairs, audit

    result, sources, events, links, affairs, audit = _run(scenario)

    assert result.primary_id == 1
    assert result.deleted_id == 2
    assert result.sources_moved == 1
    assert result.events_moved == 1
    assert result.press_links_moved == 1
    assert result.identifiers_merged == ["case_numbers", "ecli"]

    # Duplicate URL dropped with the secondary, the other one kept on the primary
    assert [tuple(row) for row in sources] == [
        (1, "https://example.org/u1"),
        (1, "https://example.org/u2"),
    ]
    assert list(events) == [1]
    assert [tuple(row) for row in links] == [(1, 1), (2, 1)]

    assert [affair.id for affair in affairs] == [1]
    primary = affairs[0]
    assert primary.ecli == "ECLI:FR:CCASS:2021:CR00042"
    assert primary.case_numbers == ["17/001"]
    assert primary.court == "Tribunal correctionnel de Paris"

    assert len(audit) == 1
    assert audit[0].action == "UPDATE"
    assert audit[0].entity_id == 1
    assert audit[0].changes["deleted_affair_id"] == 2
    assert audit[0].changes["merged"] is True


def test_merge_rejects_same_affair_and_missing_ids() -> None:
    async def scenario(factory):
        async with factory() as session:
            service = AffairAdminService(session)
            with pytest.raises(InvalidMergeError):
                await service.merge(1, 1)
            with pytest.raises(AffairNotFoundError) as excinfo:
                await service.merge(1, 99)
        return excinfo.value.affair_ids

    assert _run(scenario) == [99]


def test_delete_cascades_sources_and_links() -> None:
    async def scenario(factory):
        async with factory() as session:
            await AffairAdminService(session).delete(2)
            await session.commit()

        async with factory() as session:
            source_owners = (await session.execute(select(SourceModel.affair_id))).scalars().all()
            link_owners = (await session.execute(
                select(PressArticleAffairModel.affair_id)
            )).scalars().all()
            audit = (await session.execute(select(AuditLogModel))).scalars().all()

            with pytest.raises(AffairNotFoundError):
                await AffairAdminService(session).delete(2)
        return source_owners, link_owners, audit

    source_owners, link_owners, audit = _run(scenario)

    assert list(source_owners) == [1]
    assert list(link_owners) == [1]
    assert [(entry.action, entry.entity_id) for entry in audit] == [("DELETE", 2)]
    assert audit[0].changes == {"title": "Emplois fictifs à la mairie de Paris"}


def test_detect_duplicates_reads_politician_affairs() -> None:
    async def scenario(factory):
        async with factory() as session:
            service = AffairAdminService(session)
            groups, total = await service.detect_duplicates(1)
            with pytest.raises(PoliticianNotFoundError):
                await service.detect_duplicates(42)
        return groups, total

    groups, total = _run(scenario)

    assert total == 2
    assert len(groups) == 1
    assert {affair.id for affair in groups[0].affairs} == {1, 2}
    assert "same category" in groups[0].reasons
    assert "very close dates (< 7 days)" in groups[0].reasons
