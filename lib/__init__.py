# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains clients for the services the app talks to:
# - supabase_client.py: Typed Supabase wrapper for the pangram table
# - syllables.py: Word-info API client for syllable counts
# - utils.py: Shared error base class
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.supabase_client import SupabaseClient, SupabaseClientError
from lib.syllables import SyllableLookupError, count_syllables
from lib.utils import ApplicationError

__all__ = [
    # Supabase
    "SupabaseClient",
    "SupabaseClientError",
    # Syllables
    "SyllableLookupError",
    "count_syllables",
    # Utils
    "ApplicationError",
]
