# =============================================================================
# app/routers/ - Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - pangrams.py: Home page listing and pangram creation
# - pages.py: Static pages (about)
# - health.py: Health check endpoints
#
# Each router is mounted in main.py.
# =============================================================================

from . import health
from . import pages
from . import pangrams

__all__ = [
    "health",
    "pages",
    "pangrams",
]
