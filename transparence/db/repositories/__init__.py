"""
Repository package for data access operations.

Implements repository pattern for abstracting database operations.
"""

from .affair_repository import AffairRepository
from .audit_log_repository import AuditLogRepository
from .politician_repository import PoliticianRepository
from .press_article_repository import PressArticleRepository

__all__ = [
    "AffairRepository",
    "AuditLogRepository",
    "PoliticianRepository",
    "PressArticleRepository",
]
