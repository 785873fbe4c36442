"""
Database package for Transparence Politique.

Provides ORM models, session management, and repository pattern
for data persistence.
"""

from .models import (
    Base,
    PoliticianModel,
    AffairModel,
    SourceModel,
    AffairEventModel,
    PressArticleModel,
    PressArticleAffairModel,
    AuditLogModel,
)
from .session import Database, db, get_db

__all__ = [
    "Base",
    "PoliticianModel",
    "AffairModel",
    "SourceModel",
    "AffairEventModel",
    "PressArticleModel",
    "PressArticleAffairModel",
    "AuditLogModel",
    "Database",
    "db",
    "get_db",
]
