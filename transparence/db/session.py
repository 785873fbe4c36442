"""
Database session and engine management.

Provides async database connections with proper connection pooling,
transaction management, and context managers.

Responsibility: Manage database connections and sessions
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator
from sqlalchemy.ext.asyncio import (
    create_async_engine,
    AsyncEngine,
    AsyncSession,
    async_sessionmaker
)
import logging

from ..config import settings

logger = logging.getLogger(__name__)


class Database:
    """
    Database connection manager.

    Handles engine creation, connection pooling, and session management.

    Example:
        db = Database()
        await db.initialize()

        async with db.session() as session:
            result = await session.execute(query)

        await db.close()
    """

    def __init__(self):
        """Initialize database manager"""
        self.engine: AsyncEngine | None = None
        self.session_factory: async_sessionmaker[AsyncSession] | None = None
        self._initialized = False

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    async def initialize(self) -> None:
        """
        Initialize database engine and session factory.

        Creates an async engine with the pool settings from configuration.
        """
        if self._initialized:
            logger.warning("Database already initialized")
            return

        connection_string = settings.db.connection_string

        logger.info(f"Initializing database: {connection_string.split('://')[0]}")
        logger.info(
            f"Using connection pool "
            f"(size={settings.db.pool_size}, "
            f"max_overflow={settings.db.max_overflow})"
        )

        self.engine = create_async_engine(
            connection_string,
            echo=settings.db.echo,
            pool_size=settings.db.pool_size,
            max_overflow=settings.db.max_overflow,
            pool_timeout=settings.db.pool_timeout,
            pool_recycle=settings.db.pool_recycle,
            pool_pre_ping=True,
        )

        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

        self._initialized = True
        logger.info("Database initialized successfully")

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Create a new database session with automatic cleanup.

        Commits on success, rolls back and re-raises on error.

        Yields:
            AsyncSession for database operations
        """
        if not self._initialized or not self.session_factory:
            raise RuntimeError("Database not initialized. Call initialize() first.")

        session = self.session_factory()

        try:
            yield session
            if session.in_transaction():
                await session.commit()
        except Exception as e:
            logger.error(f"Session error, rolling back: {e}")
            await session.rollback()
            raise
        finally:
            await session.close()

    async def create_tables(self) -> None:
        """
        Create all database tables.

        For production, use Alembic migrations instead.
        """
        if not self._initialized or not self.engine:
            raise RuntimeError("Database not initialized")

        from .models import Base

        logger.info("Creating database tables...")

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        logger.info("Database tables created successfully")

    async def close(self) -> None:
        """
        Close database engine and cleanup connections.

        Should be called during application shutdown.
        """
        if not self._initialized:
            return

        if self.engine:
            logger.info("Closing database connections...")
            await self.engine.dispose()
            self.engine = None

        self.session_factory = None
        self._initialized = False

        logger.info("Database closed")


# Global database instance
db = Database()


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency yielding a request-scoped session."""
    if not db.is_initialized:
        await db.initialize()
    async with db.session() as session:
        yield session
