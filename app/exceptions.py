# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
#
# Three kinds of failure reach clients:
# - client errors (400): malformed or missing input
# - not found (404): well-formed request, target doesn't exist
# - service errors (500/503): the store is unreachable or a query failed
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse


class ContentHubException(Exception):
    """
    Base exception for the Content Hub API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "CONTENT_HUB_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "error": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Client Errors
# =============================================================================

class InvalidContactError(ContentHubException):
    """Raised when a contact submission is missing fields or has a bad email."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(
            message=message,
            code="INVALID_CONTACT",
            status_code=400,
            suggestion="Provide non-empty name, email and message; email must look like name@domain.tld",
            details={"field": field} if field else None,
        )


class RecordNotFoundError(ContentHubException):
    """Raised when a lookup by id matches no document."""

    def __init__(self, kind: str, record_id: str):
        super().__init__(
            message=f"{kind} not found",
            code=f"{kind.upper()}_NOT_FOUND",
            status_code=404,
            suggestion="Check that the id is correct",
            details={"id": record_id},
        )


# =============================================================================
# Service Errors
# =============================================================================

class ServiceUnavailableError(ContentHubException):
    """Raised when a listing or debug query can't reach the store."""

    def __init__(self, error: str, message: str = "Service unavailable"):
        super().__init__(
            message=message,
            code="SERVICE_UNAVAILABLE",
            status_code=503,
            suggestion="Try again later; the database may be unreachable",
            details={"error": error},
        )


class StoreOperationError(ContentHubException):
    """Raised when a single-record operation fails inside the store."""

    def __init__(self, operation: str, error: str):
        super().__init__(
            message="Internal server error",
            code="STORE_OPERATION_FAILED",
            status_code=500,
            suggestion="Try again later or contact support if the issue persists",
            details={"operation": operation, "error": error},
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def content_hub_exception_handler(
    request: Request,
    exc: ContentHubException
) -> JSONResponse:
    """
    Convert ContentHubException to JSON response.

    Returns structured error with:
    - error: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle request body validation errors.

    Malformed bodies are client errors and map to 400, not 422.
    """
    return JSONResponse(
        status_code=400,
        content={
            "error": "Invalid request body",
            "code": "VALIDATION_ERROR",
            "details": {"errors": str(exc)},
        }
    )
