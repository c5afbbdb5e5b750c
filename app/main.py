# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Haikugram web app.
# It configures the FastAPI application with logging, error handlers and
# routers.
#
# Usage:
#   poetry run uvicorn app.main:app --reload
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request

from app.config import settings
from app.exceptions import (
    DatabaseUnavailableError,
    HaikugramException,
    haikugram_exception_handler,
    render_error_page,
)
from app.routers import health, pages, pangrams
from lib.supabase_client import SupabaseClientError

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log startup and shutdown."""
    logger.info(f"Starting Haikugram in {settings.ENVIRONMENT} mode")
    logger.info(f"Syllable API: {settings.SYLLABLE_API_URL}")

    yield

    logger.info("Shutting down Haikugram")


# Create FastAPI application
app = FastAPI(
    title="Haikugram",
    description="Submit three-line haiku pangrams: 5/7/5 syllables, every letter a-z.",
    version=health.VERSION,
    docs_url=None if settings.is_production else "/docs",
    redoc_url=None,
    lifespan=lifespan,
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(HaikugramException)
async def handle_haikugram_exception(request: Request, exc: HaikugramException):
    """Handle custom Haikugram exceptions."""
    return await haikugram_exception_handler(request, exc)


@app.exception_handler(SupabaseClientError)
async def handle_database_error(request: Request, exc: SupabaseClientError):
    """Database failures render a 503 page."""
    logger.error(f"Database error on {request.url.path}: {exc.to_dict()}")
    wrapped = DatabaseUnavailableError(reason=exc.message, suggestion=exc.suggestion)
    return await haikugram_exception_handler(request, wrapped)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return render_error_page(request, 500, "An unexpected error occurred.")


# =============================================================================
# Routers
# =============================================================================

# Home page and pangram creation
app.include_router(pangrams.router, tags=["Pangrams"])

# Static pages
app.include_router(pages.router, tags=["Pages"])

# Health check endpoints
app.include_router(health.router, tags=["Health"])
