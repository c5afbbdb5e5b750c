# =============================================================================
# app/exceptions.py - Custom Exceptions and Handlers
# =============================================================================
# Centralized exception handling for the web app.
# Errors render the HTML error page; the code and suggestion go to the logs.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.responses import HTMLResponse

from app.templating import templates

logger = logging.getLogger(__name__)


class HaikugramException(Exception):
    """
    Base exception for the Haikugram app.

    All custom exceptions inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: str = "HAIKUGRAM_ERROR",
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
        """Convert exception to a dict for logging and templates."""
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
# Pangram Exceptions
# =============================================================================

class PangramValidationError(HaikugramException):
    """Raised when a submission breaks one or more pangram rules."""

    def __init__(self, errors: list[str]):
        super().__init__(
            message=" ".join(errors),
            code="PANGRAM_INVALID",
            status_code=400,
            suggestion="Fix the listed lines and submit again",
            details={"errors": errors},
        )
        self.errors = errors


# =============================================================================
# Database Exceptions
# =============================================================================

class DatabaseUnavailableError(HaikugramException):
    """Raised when the pangram store can't be read or written."""

    def __init__(self, reason: str, suggestion: str | None = None):
        super().__init__(
            message="The pangram database is unavailable right now.",
            code="DATABASE_UNAVAILABLE",
            status_code=503,
            suggestion=suggestion or "Check SUPABASE_URL and that the pangrams table exists",
            details={"reason": reason},
        )


# =============================================================================
# Exception Handlers
# =============================================================================

def render_error_page(
    request: Request,
    status_code: int,
    message: str,
) -> HTMLResponse:
    """Render the HTML error page."""
    return templates.TemplateResponse(
        request,
        "error.html",
        {"status_code": status_code, "message": message},
        status_code=status_code,
    )


async def haikugram_exception_handler(
    request: Request,
    exc: HaikugramException,
) -> HTMLResponse:
    """Handle HaikugramException and render the error page."""
    logger.warning(f"{exc.code} on {request.url.path}: {exc.to_dict()}")
    return render_error_page(request, exc.status_code, exc.message)
