"""
SQLAlchemy database models for Transparence Politique.

ORM models that map to database tables with proper indexing,
constraints, and relationships.

Responsibility: Define database schema and ORM mappings
"""

from datetime import date, datetime
from typing import Optional, List, Dict, Any
from sqlalchemy import (
    String, Integer, Date, DateTime, Text, JSON,
    ForeignKey, Index, PrimaryKeyConstraint
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    """Base class for all ORM models"""
    pass


class PoliticianModel(Base):
    """
    Database model for political figures.

    Maps to the 'politicians' table; affairs reference it.
    """

    __tablename__ = "politicians"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    slug: Mapped[str] = mapped_column(String(200), nullable=False, unique=True, index=True)
    full_name: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    first_name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    last_name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True, index=True)

    current_party: Mapped[Optional[str]] = mapped_column(String(100), nullable=True, index=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        default=datetime.utcnow
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        default=datetime.utcnow,
        onupdate=datetime.utcnow
    )

    affairs: Mapped[List["AffairModel"]] = relationship(
        back_populates="politician",
        cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<PoliticianModel(id={self.id}, slug={self.slug})>"


class AffairModel(Base):
    """
    Database model for judicial affairs.

    Enumerated columns (status, category, involvement, publication_status)
    store the values of the enums in ``transparence.models.affair``.
    """

    __tablename__ = "affairs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    politician_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("politicians.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")

    status: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    category: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    involvement: Mapped[str] = mapped_column(String(30), nullable=False, default="DIRECT")
    publication_status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="DRAFT",
        index=True
    )

    # Judicial identifiers
    ecli: Mapped[Optional[str]] = mapped_column(String(100), nullable=True, index=True)
    pourvoi_number: Mapped[Optional[str]] = mapped_column(String(50), nullable=True, index=True)
    case_numbers: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    court: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    chamber: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    case_number: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    # Key dates
    facts_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    start_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    verdict_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        default=datetime.utcnow,
        index=True
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        default=datetime.utcnow,
        onupdate=datetime.utcnow
    )

    politician: Mapped[PoliticianModel] = relationship(back_populates="affairs")
    sources: Mapped[List["SourceModel"]] = relationship(
        back_populates="affair",
        cascade="all, delete-orphan",
        passive_deletes=True
    )

    __table_args__ = (
        Index('idx_affair_politician_created', 'politician_id', 'created_at'),
    )

    def __repr__(self) -> str:
        return f"<AffairModel(id={self.id}, politician_id={self.politician_id}, title={self.title[:40]!r})>"


class SourceModel(Base):
    """Citation (press article, court decision) attached to an affair."""

    __tablename__ = "sources"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    affair_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("affairs.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    url: Mapped[str] = mapped_column(String(1000), nullable=False)
    title: Mapped[str] = mapped_column(Text, nullable=False, default="")
    publisher: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    source_type: Mapped[str] = mapped_column(String(30), nullable=False, default="PRESSE")
    published_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        default=datetime.utcnow
    )

    affair: Mapped[AffairModel] = relationship(back_populates="sources")

    __table_args__ = (
        Index('idx_source_affair_url', 'affair_id', 'url'),
    )


class AffairEventModel(Base):
    """Dated procedural step of an affair (indictment, hearing, verdict...)."""

    __tablename__ = "affair_events"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    affair_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("affairs.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    event_date: Mapped[date] = mapped_column(Date, nullable=False)
    event_type: Mapped[str] = mapped_column(String(50), nullable=False)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        default=datetime.utcnow
    )


class PressArticleModel(Base):
    """
    Database model for press articles collected from RSS feeds.

    ``tier`` is filled by the tier classification pass and stays NULL until
    then.
    """

    __tablename__ = "press_articles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    feed_source: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    url: Mapped[str] = mapped_column(String(1000), nullable=False, unique=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    published_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, index=True)

    tier: Mapped[Optional[str]] = mapped_column(String(20), nullable=True, index=True)
    matched_keyword: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    ai_analyzed_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True, index=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        default=datetime.utcnow
    )

    __table_args__ = (
        Index('idx_press_tier_published', 'tier', 'published_at'),
    )


class PressArticleAffairModel(Base):
    """Link between a press article and an affair it reports on."""

    __tablename__ = "press_article_affairs"

    article_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("press_articles.id", ondelete="CASCADE"),
        nullable=False
    )
    affair_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("affairs.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    __table_args__ = (
        PrimaryKeyConstraint('article_id', 'affair_id', name='pk_press_article_affairs'),
    )


class AuditLogModel(Base):
    """Record of an administrator action on an entity."""

    __tablename__ = "audit_logs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    action: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    entity_type: Mapped[str] = mapped_column(String(50), nullable=False)
    entity_id: Mapped[int] = mapped_column(Integer, nullable=False)
    changes: Mapped[Optional[Dict[str, Any]]] = mapped_column(JSON, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        default=datetime.utcnow,
        index=True
    )

    __table_args__ = (
        Index('idx_audit_entity', 'entity_type', 'entity_id'),
    )
