"""
API Middleware Package
======================
Middleware components for FastAPI application.
"""

from .admin_auth import AdminKeyMiddleware

__all__ = ["AdminKeyMiddleware"]
