"""
Admin key authentication middleware.

Validates the shared admin secret in the X-Admin-Key header for back-office
routes.

Responsibility: Admin request authentication
"""

import hmac
import logging
from typing import Optional

from fastapi import Request, status
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from transparence.config import settings

logger = logging.getLogger(__name__)


class AdminKeyMiddleware(BaseHTTPMiddleware):
    """Middleware guarding admin routes with a shared secret."""

    def __init__(self, app, protected_paths: Optional[list[str]] = None):
        """
        Initialize admin key middleware.

        Args:
            app: FastAPI application
            protected_paths: Path prefixes requiring the admin key
        """
        super().__init__(app)
        self.protected_paths = protected_paths or ["/api/v1/admin/"]

    async def dispatch(self, request: Request, call_next):
        """
        Check the admin key on protected paths.

        Args:
            request: HTTP request
            call_next: Next middleware handler

        Returns:
            Response
        """
        if not settings.app.require_admin_key or not self._should_protect(request.url.path):
            return await call_next(request)

        expected = settings.app.admin_api_key
        if not expected:
            logger.error("Admin route requested but APP_ADMIN_API_KEY is not configured")
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content={"detail": "Admin access is not configured"}
            )

        provided = request.headers.get("X-Admin-Key")
        if not provided:
            logger.warning(f"Missing admin key for {request.method} {request.url.path}")
            return JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content={"detail": "Missing X-Admin-Key header"}
            )

        if not hmac.compare_digest(provided.encode("utf-8"), expected.encode("utf-8")):
            logger.warning(f"Invalid admin key for {request.method} {request.url.path}")
            return JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content={"detail": "Invalid admin key"}
            )

        return await call_next(request)

    def _should_protect(self, path: str) -> bool:
        return any(path.startswith(prefix) for prefix in self.protected_paths)
