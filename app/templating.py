# =============================================================================
# app/templating.py - Jinja2 Template Setup
# =============================================================================
# Shared Jinja2Templates instance for the HTML pages in app/templates/.
#
# Usage:
#   from app.templating import templates
#   return templates.TemplateResponse(request, "about.html")
# =============================================================================

from pathlib import Path

from fastapi.templating import Jinja2Templates

TEMPLATES_DIR = Path(__file__).parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
