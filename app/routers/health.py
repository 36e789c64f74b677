# =============================================================================
# app/routers/health.py - Health Check Endpoint
# =============================================================================
# Provides a health check endpoint for monitoring and load balancers.
# It never touches the database, so it answers 200 even when MongoDB is down.
# =============================================================================

from datetime import datetime, timezone
from typing import Literal

from fastapi import APIRouter
from pydantic import BaseModel

from app.dependencies import ConnectionDep

router = APIRouter()


# =============================================================================
# Response Models
# =============================================================================

class HealthResponse(BaseModel):
    """Basic health check response."""
    status: str
    timestamp: str
    database: Literal["connected", "disconnected"]


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/health", response_model=HealthResponse)
def health_check(connection: ConnectionDep):
    """
    Health check endpoint.

    Reports process status and whether a database handle has been
    established yet. Does not attempt to connect.
    """
    return HealthResponse(
        status="ok",
        timestamp=datetime.now(timezone.utc).isoformat(),
        database="connected" if connection.is_connected else "disconnected",
    )
