# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the pangram rules and the service layer:
# - models/: Pydantic schemas for submitted and stored pangrams
# - validation.py: Letter coverage and syllable rules
# - services/: Validate-then-persist operations used by the routes
# =============================================================================
