# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - Provides common fixtures for testing
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_KEY", "test-service-key")
os.environ.setdefault("SYLLABLE_API_URL", "https://rhymebrain.test/talk")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest

from core.models import PangramCreate


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def valid_lines():
    """Three lines that together use every letter."""
    return (
        "The quick brown fox",
        "jumps over the lazy dog",
        "while we sleep",
    )


@pytest.fixture
def valid_pangram(valid_lines):
    """A submission that passes letter coverage."""
    line1, line2, line3 = valid_lines
    return PangramCreate(line1=line1, line2=line2, line3=line3)


@pytest.fixture
def sample_rows():
    """Stored rows as Supabase returns them, newest first."""
    return [
        {
            "id": 2,
            "line1": "Sphinx of black quartz",
            "line2": "judge my vow and keep it well",
            "line3": "forever and a day",
            "created_at": "2024-01-15T10:31:00+00:00",
        },
        {
            "id": 1,
            "line1": "The quick brown fox",
            "line2": "jumps over the lazy dog",
            "line3": "while we sleep",
            "created_at": "2024-01-15T10:30:00+00:00",
        },
    ]
