# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# - pangram.py: Submitted and stored pangram schemas
# =============================================================================

from .pangram import (
    REQUIRED_SYLLABLES,
    PangramCreate,
    PangramRecord,
)

__all__ = [
    "REQUIRED_SYLLABLES",
    "PangramCreate",
    "PangramRecord",
]
