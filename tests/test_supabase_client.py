# =============================================================================
# tests/test_supabase_client.py - Supabase Wrapper Tests
# =============================================================================
# The Supabase client is mocked; queries are checked through the mock's
# call chain.
# =============================================================================

from unittest.mock import MagicMock, patch

import pytest

from app.config import settings
from lib.supabase_client import SupabaseClient, SupabaseClientError


@pytest.fixture
def mock_client():
    """Replace the singleton client with a MagicMock."""
    client = MagicMock()
    with patch.object(SupabaseClient, "_instance", client):
        yield client


class TestGetClient:
    """Tests for client creation."""

    def test_creates_once(self):
        SupabaseClient.reset()
        try:
            with patch("lib.supabase_client.create_client") as create:
                first = SupabaseClient.get_client()
                second = SupabaseClient.get_client()

            create.assert_called_once_with(
                settings.SUPABASE_URL,
                settings.SUPABASE_SERVICE_KEY,
            )
            assert first is second
        finally:
            SupabaseClient.reset()

    def test_creation_failure(self):
        SupabaseClient.reset()
        with patch("lib.supabase_client.create_client", side_effect=Exception("bad url")):
            with pytest.raises(SupabaseClientError) as exc_info:
                SupabaseClient.get_client()

        assert exc_info.value.code == "CLIENT_INIT_FAILED"
        assert "SUPABASE_URL" in str(exc_info.value)


class TestInsertPangram:
    """Tests for insert_pangram."""

    def test_returns_stored_row(self, mock_client, sample_rows):
        mock_client.table.return_value.insert.return_value.execute.return_value.data = [sample_rows[1]]

        row = SupabaseClient.insert_pangram("a", "b", "c")

        assert row == sample_rows[1]
        mock_client.table.assert_called_once_with("pangrams")
        mock_client.table.return_value.insert.assert_called_once_with(
            {"line1": "a", "line2": "b", "line3": "c"}
        )

    def test_empty_response_raises(self, mock_client):
        mock_client.table.return_value.insert.return_value.execute.return_value.data = []

        with pytest.raises(SupabaseClientError) as exc_info:
            SupabaseClient.insert_pangram("a", "b", "c")

        assert exc_info.value.code == "INSERT_PANGRAM_FAILED"

    def test_query_failure_wrapped(self, mock_client):
        mock_client.table.return_value.insert.return_value.execute.side_effect = Exception("denied")

        with pytest.raises(SupabaseClientError, match="denied"):
            SupabaseClient.insert_pangram("a", "b", "c")


class TestFetchPangrams:
    """Tests for fetch_pangrams."""

    def test_orders_newest_first(self, mock_client, sample_rows):
        """Test ordering by created_at then id, both descending."""
        select = mock_client.table.return_value.select.return_value
        ordered = select.order.return_value.order.return_value
        ordered.execute.return_value.data = sample_rows

        rows = SupabaseClient.fetch_pangrams()

        assert rows == sample_rows
        select.order.assert_called_once_with("created_at", desc=True)
        select.order.return_value.order.assert_called_once_with("id", desc=True)
        ordered.limit.assert_not_called()

    def test_limit(self, mock_client):
        ordered = mock_client.table.return_value.select.return_value.order.return_value.order.return_value
        ordered.limit.return_value.execute.return_value.data = []

        assert SupabaseClient.fetch_pangrams(limit=1) == []
        ordered.limit.assert_called_once_with(1)

    def test_none_data_is_empty(self, mock_client):
        ordered = mock_client.table.return_value.select.return_value.order.return_value.order.return_value
        ordered.execute.return_value.data = None

        assert SupabaseClient.fetch_pangrams() == []

    def test_query_failure_wrapped(self, mock_client):
        mock_client.table.side_effect = Exception("relation does not exist")

        with pytest.raises(SupabaseClientError) as exc_info:
            SupabaseClient.fetch_pangrams()

        assert exc_info.value.code == "FETCH_PANGRAMS_FAILED"
        assert "pangrams" in exc_info.value.suggestion
