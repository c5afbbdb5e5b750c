# =============================================================================
# lib/syllables.py - Word-Info API Client
# =============================================================================
# Counts syllables in a phrase by asking the RhymeBrain "getWordInfo" endpoint.
#
# One blocking HTTP round trip per call. There is no retry: callers treat a
# failed lookup as a syllable mismatch.
#
# Usage:
#   from lib.syllables import count_syllables
#   count_syllables("an old silent pond")  # -> 5
# =============================================================================

import logging

import httpx

from app.config import settings
from lib.utils import ApplicationError

logger = logging.getLogger(__name__)


class SyllableLookupError(ApplicationError):
    """Raised when the word-info API can't produce a syllable count."""

    def __init__(self, message: str, phrase: str, code: str = "SYLLABLE_LOOKUP_FAILED"):
        super().__init__(
            message,
            code=code,
            suggestion="Check SYLLABLE_API_URL and that the word-info service is reachable",
            details={"phrase": phrase},
        )


def count_syllables(phrase: str, timeout: float | None = None) -> int:
    """
    Look up the number of syllables in a phrase.

    Args:
        phrase: Word or short phrase to look up
        timeout: Request timeout in seconds (defaults to SYLLABLE_API_TIMEOUT)

    Returns:
        Syllable count reported by the service

    Raises:
        SyllableLookupError: On transport errors, timeouts, non-2xx responses,
            non-JSON bodies or a missing/non-integer "syllables" field
    """
    params = {"function": "getWordInfo", "word": phrase}
    timeout = settings.SYLLABLE_API_TIMEOUT if timeout is None else timeout

    try:
        response = httpx.get(settings.SYLLABLE_API_URL, params=params, timeout=timeout)
        response.raise_for_status()
    except httpx.TimeoutException as e:
        raise SyllableLookupError(
            f"Syllable lookup timed out after {timeout}s",
            phrase,
            code="SYLLABLE_LOOKUP_TIMEOUT",
        ) from e
    except httpx.HTTPError as e:
        raise SyllableLookupError(f"Syllable lookup failed: {e}", phrase) from e

    try:
        data = response.json()
    except ValueError as e:
        raise SyllableLookupError("Word-info API returned a non-JSON body", phrase) from e

    raw = data.get("syllables") if isinstance(data, dict) else None
    try:
        syllables = int(raw)
    except (TypeError, ValueError) as e:
        raise SyllableLookupError(
            f"Word-info API returned no usable syllable count: {raw!r}",
            phrase,
        ) from e

    logger.debug(f"'{phrase}' has {syllables} syllables")
    return syllables
