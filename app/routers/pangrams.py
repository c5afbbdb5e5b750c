# =============================================================================
# app/routers/pangrams.py - Pangram List and Create Endpoints
# =============================================================================
# GET /        Lists every stored pangram, newest first, plus the form
# GET /create  Validates and stores a pangram, then redirects back to /
#
# Both handlers are plain functions: FastAPI runs them in its threadpool
# because the database and syllable lookups block.
# =============================================================================

from typing import Annotated
from urllib.parse import urlencode

from fastapi import APIRouter, Query, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from app.exceptions import PangramValidationError
from app.templating import templates
from core.models.pangram import REQUIRED_SYLLABLES, PangramCreate
from core.services.pangram_service import PangramService

router = APIRouter()


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/", response_class=HTMLResponse)
def list_pangrams(
    request: Request,
    error: Annotated[str | None, Query(description="Validation errors from /create")] = None,
    line1: Annotated[str, Query(description="Previously entered line 1")] = "",
    line2: Annotated[str, Query(description="Previously entered line 2")] = "",
    line3: Annotated[str, Query(description="Previously entered line 3")] = "",
):
    """
    Home page.

    Shows all pangrams and the submission form. When /create rejects a
    submission it redirects here with the error text and the rejected
    values so the form can be corrected.
    """
    pangrams = PangramService.list_pangrams()

    return templates.TemplateResponse(
        request,
        "home.html",
        {
            "pangrams": pangrams,
            "error": error,
            "line1": line1,
            "line2": line2,
            "line3": line3,
            "required_syllables": REQUIRED_SYLLABLES,
        },
    )


@router.get("/create")
def create_pangram(
    line1: Annotated[str, Query(description="First line (5 syllables)")] = "",
    line2: Annotated[str, Query(description="Second line (7 syllables)")] = "",
    line3: Annotated[str, Query(description="Third line (5 syllables)")] = "",
):
    """
    Create a pangram from query parameters.

    Example: /create?line1=...&line2=...&line3=...

    Redirects to / with no parameters on success. On validation failure
    redirects to / with `error` and the submitted lines.
    """
    pangram = PangramCreate(line1=line1, line2=line2, line3=line3)

    try:
        PangramService.create_pangram(pangram)
    except PangramValidationError as e:
        query = urlencode({
            "error": e.message,
            "line1": line1,
            "line2": line2,
            "line3": line3,
        })
        return RedirectResponse(url=f"/?{query}", status_code=302)

    return RedirectResponse(url="/", status_code=302)
