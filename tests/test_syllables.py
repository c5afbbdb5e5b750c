# =============================================================================
# tests/test_syllables.py - Word-Info API Client Tests
# =============================================================================
# httpx is mocked; no network access.
# =============================================================================

from unittest.mock import MagicMock, patch

import httpx
import pytest

from app.config import settings
from lib.syllables import SyllableLookupError, count_syllables


@pytest.fixture
def mock_get():
    """Patch httpx.get as used by the syllable client."""
    with patch("lib.syllables.httpx.get") as mock:
        yield mock


def json_response(body):
    response = MagicMock()
    response.json.return_value = body
    return response


class TestCountSyllables:
    """Tests for count_syllables."""

    def test_parses_string_count(self, mock_get):
        """Test the API's string "syllables" field is parsed as int."""
        mock_get.return_value = json_response({"word": "an old silent pond", "syllables": "5"})

        assert count_syllables("an old silent pond") == 5

    def test_parses_int_count(self, mock_get):
        mock_get.return_value = json_response({"syllables": 7})
        assert count_syllables("a frog jumps into the pond") == 7

    def test_request_params(self, mock_get):
        """Test the getWordInfo call shape."""
        mock_get.return_value = json_response({"syllables": "2"})

        count_syllables("haiku")

        mock_get.assert_called_once_with(
            settings.SYLLABLE_API_URL,
            params={"function": "getWordInfo", "word": "haiku"},
            timeout=settings.SYLLABLE_API_TIMEOUT,
        )

    def test_explicit_timeout(self, mock_get):
        mock_get.return_value = json_response({"syllables": "2"})

        count_syllables("haiku", timeout=1.5)

        assert mock_get.call_args.kwargs["timeout"] == 1.5

    def test_timeout_raises(self, mock_get):
        """Test a timeout becomes SyllableLookupError."""
        mock_get.side_effect = httpx.ReadTimeout("too slow")

        with pytest.raises(SyllableLookupError) as exc_info:
            count_syllables("haiku")

        assert exc_info.value.code == "SYLLABLE_LOOKUP_TIMEOUT"
        assert exc_info.value.details == {"phrase": "haiku"}

    def test_connection_error_raises(self, mock_get):
        mock_get.side_effect = httpx.ConnectError("refused")

        with pytest.raises(SyllableLookupError) as exc_info:
            count_syllables("haiku")

        assert exc_info.value.code == "SYLLABLE_LOOKUP_FAILED"
        assert "SYLLABLE_API_URL" in exc_info.value.suggestion

    def test_http_status_error_raises(self, mock_get):
        """Test non-2xx responses are errors."""
        response = MagicMock()
        response.raise_for_status.side_effect = httpx.HTTPStatusError(
            "503 Service Unavailable",
            request=MagicMock(),
            response=MagicMock(),
        )
        mock_get.return_value = response

        with pytest.raises(SyllableLookupError):
            count_syllables("haiku")

    def test_non_json_body_raises(self, mock_get):
        response = MagicMock()
        response.json.side_effect = ValueError("Expecting value")
        mock_get.return_value = response

        with pytest.raises(SyllableLookupError, match="non-JSON"):
            count_syllables("haiku")

    @pytest.mark.parametrize("body", [
        {},
        {"syllables": None},
        {"syllables": "lots"},
        [],
    ])
    def test_unusable_count_raises(self, mock_get, body):
        """Test missing or non-integer syllable values are errors."""
        mock_get.return_value = json_response(body)

        with pytest.raises(SyllableLookupError, match="no usable syllable count"):
            count_syllables("haiku")
