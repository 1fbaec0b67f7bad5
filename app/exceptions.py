# =============================================================================
# app/exceptions.py - Custom Exceptions and Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every failure leaves the API as a JSON body of the form {"error": <message>}.
# Validation failures are reported as 500, the same as infrastructure failures.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from lib.catalog_store import StoreError

logger = logging.getLogger(__name__)


class CatalogException(Exception):
    """
    Base exception for the catalog API.

    All custom exceptions inherit from this class and carry the HTTP status
    they should be reported with.
    """

    def __init__(
        self,
        message: str,
        code: str = "CATALOG_ERROR",
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "error": self.message,
            "code": self.code,
        }
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Not Found
# =============================================================================

class AppNotFoundError(CatalogException):
    """Raised when an app ID doesn't resolve to a record."""

    def __init__(self, app_id: str):
        super().__init__(
            message="App not found",
            code="APP_NOT_FOUND",
            status_code=404,
            details={"app_id": app_id},
        )


class ReviewNotFoundError(CatalogException):
    """Raised when a review ID doesn't resolve to a record."""

    def __init__(self, review_id: str):
        super().__init__(
            message="Review not found",
            code="REVIEW_NOT_FOUND",
            status_code=404,
            details={"review_id": review_id},
        )


class PageNotFoundError(CatalogException):
    """Raised when a frontend entry point is missing from FRONTEND_DIR."""

    def __init__(self, filename: str):
        super().__init__(
            message="Page not found",
            code="PAGE_NOT_FOUND",
            status_code=404,
            details={"file": filename},
        )


# =============================================================================
# Auth
# =============================================================================

class InvalidPasswordError(CatalogException):
    """Raised when the admin password header is missing or wrong."""

    def __init__(self):
        super().__init__(
            message="Invalid admin password",
            code="INVALID_PASSWORD",
            status_code=401,
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def catalog_exception_handler(
    request: Request,
    exc: CatalogException
) -> JSONResponse:
    """Convert CatalogException to JSON response."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def store_exception_handler(
    request: Request,
    exc: StoreError
) -> JSONResponse:
    """Report database failures as 500 with the underlying message."""
    logger.error(f"Store error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={"error": exc.message, "code": exc.code}
    )


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException
) -> JSONResponse:
    """
    Render framework errors (unknown path, wrong method) in the API's shape.

    Any headers set on the exception are passed through.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail), "code": f"HTTP_{exc.status_code}"},
        headers=getattr(exc, "headers", None),
    )


def _validation_message(exc: RequestValidationError | ValidationError) -> str:
    """Flatten pydantic errors into one readable line."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(loc) for loc in error.get("loc", ()) if loc != "body")
        parts.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return "; ".join(parts) or "Validation failed"


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError | ValidationError
) -> JSONResponse:
    """
    Handle request and model validation errors.

    Missing required fields and out-of-range values are not distinguished
    from infrastructure failures: both surface as 500.
    """
    message = _validation_message(exc)
    logger.warning(f"Validation failed on {request.method} {request.url.path}: {message}")
    return JSONResponse(
        status_code=500,
        content={
            "error": message,
            "code": "VALIDATION_ERROR",
        }
    )


async def unexpected_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Handle anything else the services let through."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "error": str(exc) or "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )
