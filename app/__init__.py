# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the web application:
# - main.py: App entry point, logging, error handlers
# - config.py: Environment variable loading and settings
# - templating.py: Jinja2 templates for the HTML pages
# - routers/: Route definitions organized by feature
#
# The app layer is thin - it handles HTTP concerns and delegates
# business logic to the core/ package.
# =============================================================================
