# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for Haikugram:
# - test_models.py: Pydantic model tests
# - test_validation.py: Letter coverage and syllable rules
# - test_syllables.py: Word-info API client (mocked httpx)
# - test_supabase_client.py: Database wrapper (mocked Supabase)
# - test_pangram_service.py: Validate-then-persist service
# - test_routes.py: HTTP endpoints via TestClient
#
# Run tests with: poetry run pytest
# =============================================================================
