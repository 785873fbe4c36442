"""
FastAPI application for Transparence Politique API.

Provides the admin back-office endpoints (duplicate affair review, merge,
delete) and the press tier classification endpoint.

Responsibility: Main API application setup and configuration
"""

# Load .env BEFORE importing settings (critical for pydantic-settings)
from dotenv import load_dotenv
load_dotenv('.env')

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging

from transparence.config import settings
from transparence.db.session import db
from api.middleware import AdminKeyMiddleware

# Configure logging
logging.basicConfig(
    level=settings.app.log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Transparence Politique API",
    description="Back-office API for French political transparency data",
    version=settings.app.app_version,
    docs_url="/docs",
    redoc_url="/redoc"
)

app.add_middleware(
    AdminKeyMiddleware,
    protected_paths=["/api/v1/admin/"]
)
if not settings.app.require_admin_key:
    logger.warning("Admin key check disabled; admin routes are open")

# Added last so it wraps the admin check: preflights and 401s carry CORS headers
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.app.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "X-Admin-Key"],
    max_age=3600,
)


@app.on_event("startup")
async def startup_event():
    """Log configuration on startup"""
    logger.info("Starting Transparence Politique API...")
    logger.info(f"Environment: {settings.app.environment}")
    logger.info(f"Debug mode: {settings.app.debug}")
    logger.info(f"CORS Origins: {settings.app.cors_origins}")
    logger.info(f"Admin Key Required: {settings.app.require_admin_key}")


@app.on_event("shutdown")
async def shutdown_event():
    """Cleanup on shutdown"""
    logger.info("Shutting down Transparence Politique API...")
    await db.close()


@app.get("/")
async def root():
    """Root endpoint - API information."""
    return {
        "name": "Transparence Politique API",
        "version": settings.app.app_version,
        "status": "operational",
        "endpoints": {
            "duplicates": "/api/v1/admin/politicians/{politician_id}/duplicates",
            "merge": "/api/v1/admin/affairs/merge",
            "delete": "/api/v1/admin/affairs/{affair_id}",
            "press_classify": "/api/v1/press/classify",
            "docs": "/docs"
        }
    }


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {
        "status": "healthy",
        "service": "transparence-api"
    }


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Global exception handler."""
    logger.error(f"Unhandled exception: {str(exc)}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "detail": str(exc) if settings.app.debug else "An unexpected error occurred"
        }
    )


# Import and include routers
from api.v1.endpoints import admin_affairs, press

app.include_router(
    admin_affairs.router,
    prefix="/api/v1/admin",
    tags=["admin"]
)

app.include_router(
    press.router,
    prefix="/api/v1",
    tags=["press"]
)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "api.main:app",
        host=settings.app.api_host,
        port=settings.app.api_port,
        reload=settings.app.debug
    )
