# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Errors carry a machine-readable code and, where possible, how to fix them.
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse


class NesteraException(Exception):
    """
    Base exception for the Nestera API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "NESTERA_ERROR",
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
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Startup Exceptions
# =============================================================================

class ConfigurationError(NesteraException):
    """Raised when environment configuration fails validation at startup."""

    def __init__(self, keys: list[str], error: str):
        super().__init__(
            message=f"Invalid configuration: {', '.join(keys)}",
            code="CONFIGURATION_ERROR",
            status_code=500,
            suggestion="Set the listed environment variables (or add them to .env) and restart",
            details={"keys": keys, "error": error}
        )
        self.keys = keys


class ModuleCompositionError(NesteraException):
    """Raised when feature modules cannot be composed into one application."""

    def __init__(self, reason: str, modules: list[str]):
        super().__init__(
            message=f"Cannot compose modules: {reason}",
            code="MODULE_COMPOSITION_ERROR",
            status_code=500,
            suggestion="Give each module a unique name and non-overlapping routes",
            details={"modules": modules}
        )


# =============================================================================
# FAQ Exceptions
# =============================================================================

class FAQItemNotFoundError(NesteraException):
    """Raised when a request references an FAQ index outside the list."""

    def __init__(self, index: int, count: int):
        super().__init__(
            message=f"FAQ item not found: {index}",
            code="FAQ_ITEM_NOT_FOUND",
            status_code=404,
            suggestion=f"Use an index between 0 and {count - 1}",
            details={"index": index, "count": count}
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def nestera_exception_handler(
    request: Request,
    exc: NesteraException
) -> JSONResponse:
    """
    Convert NesteraException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )
