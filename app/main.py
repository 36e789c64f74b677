# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Content Hub API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   poetry run uvicorn app.main:app --reload
#   python -m app.main   (binds API_HOST:API_PORT)
# =============================================================================

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.exceptions import (
    ContentHubException,
    content_hub_exception_handler,
    validation_exception_handler,
)
from app.routers import health, podcasts, videos, contact, messages, debug

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    The database connection is opened lazily by the first request that
    needs it, so startup only logs the configuration.
    """
    logger.info(f"Starting Content Hub API in {settings.ENVIRONMENT} mode")
    logger.info(f"Database: {settings.DB_NAME}")
    logger.info(f"CORS origins: {settings.cors_origins_list}")

    if not settings.MONGODB_URI:
        logger.warning("MONGODB_URI is not set; database endpoints will fail until it is configured")

    yield

    logger.info("Shutting down Content Hub API")


# Create FastAPI application
app = FastAPI(
    title="Content Hub API",
    description="""
## Podcasts, Videos and Contact Messages

A thin REST layer over a MongoDB database.

| Endpoint | Purpose |
|----------|---------|
| `GET /api/podcasts`, `GET /api/videos` | Newest-first content listings |
| `GET /api/podcasts/{id}`, `GET /api/videos/{id}` | Single content document |
| `POST /api/contact` | Submit the contact form |
| `GET /api/messages`, `GET /api/messages/{id}` | Read stored messages |
| `PUT /api/messages/{id}/read` | Mark a message as read |
| `GET /api/health`, `GET /api/debug` | Status and diagnostics |

Ids are matched as MongoDB ObjectIds when they parse as one, otherwise
as plain string keys.
""",
    version=API_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Content",
            "description": "Read-only podcast and video documents",
        },
        {
            "name": "Contact",
            "description": "Contact form submission",
        },
        {
            "name": "Messages",
            "description": "Stored contact messages",
        },
        {
            "name": "Health",
            "description": "API health and diagnostics",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

# CORS middleware - allows cross-origin requests from the site frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials="*" not in settings.cors_origins_list,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(ContentHubException)
async def handle_content_hub_exception(request: Request, exc: ContentHubException):
    """Handle custom Content Hub exceptions."""
    return await content_hub_exception_handler(request, exc)


@app.exception_handler(RequestValidationError)
async def handle_validation_exception(request: Request, exc: RequestValidationError):
    """Handle malformed request bodies."""
    return await validation_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "code": "INTERNAL_ERROR",
        }
    )


# =============================================================================
# Routers
# =============================================================================

# Health check endpoint
app.include_router(
    health.router,
    prefix="/api",
    tags=["Health"]
)

# Content endpoints
app.include_router(
    podcasts.router,
    prefix="/api/podcasts",
    tags=["Content"]
)

app.include_router(
    videos.router,
    prefix="/api/videos",
    tags=["Content"]
)

# Contact form
app.include_router(
    contact.router,
    prefix="/api/contact",
    tags=["Contact"]
)

# Message inbox
app.include_router(
    messages.router,
    prefix="/api/messages",
    tags=["Messages"]
)

# Diagnostics
app.include_router(
    debug.router,
    prefix="/api",
    tags=["Health"]
)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": "Content Hub API",
        "version": API_VERSION,
        "docs": "/docs",
        "health": "/api/health",
    }


# =============================================================================
# Local Runner
# =============================================================================

def run():
    """Serve the API with uvicorn on the configured host and port."""
    uvicorn.run(app, host=settings.API_HOST, port=settings.API_PORT)


if __name__ == "__main__":
    run()
