# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .pangram_service import PangramService

__all__ = [
    "PangramService",
]
