# =============================================================================
# lib/supabase_client.py - Supabase Client Wrapper
# =============================================================================
# This module provides a typed wrapper for the pangram table in Supabase.
# It implements the singleton pattern to reuse a single client connection
# and provides the two operations the app needs:
# - Insert a validated pangram
# - Fetch stored pangrams, newest first
#
# Usage:
#   from lib.supabase_client import SupabaseClient
#   rows = SupabaseClient.fetch_pangrams()
# =============================================================================

from __future__ import annotations

import logging
from typing import Any

from supabase import create_client, Client

from app.config import settings
from lib.utils import ApplicationError

# Set up logging for this module
logger = logging.getLogger(__name__)


class SupabaseClientError(ApplicationError):
    """Error during Supabase operations."""

    def __init__(
        self,
        message: str,
        code: str = "SUPABASE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code=code, suggestion=suggestion, details=details)

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result


class SupabaseClient:
    """
    Typed wrapper for Supabase database operations.

    Implements singleton pattern - one client instance is shared across
    the application. All methods are class methods for easy access without
    instantiation.

    Example:
        row = SupabaseClient.insert_pangram(
            "The quick brown fox",
            "jumps over the lazy dog",
            "while we sleep",
        )
        rows = SupabaseClient.fetch_pangrams()
    """

    _instance: Client | None = None

    @classmethod
    def get_client(cls) -> Client:
        """
        Get or create the singleton Supabase client.

        Returns:
            Client: Supabase client instance

        Raises:
            SupabaseClientError: If client creation fails
        """
        if cls._instance is None:
            try:
                cls._instance = create_client(
                    settings.SUPABASE_URL,
                    settings.SUPABASE_SERVICE_KEY
                )
                logger.info("Supabase client initialized successfully")
            except Exception as e:
                raise SupabaseClientError(
                    message=f"Failed to create Supabase client: {e}",
                    code="CLIENT_INIT_FAILED",
                    suggestion="Check SUPABASE_URL and SUPABASE_SERVICE_KEY in your .env file"
                ) from e
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drop the cached client (used by tests)."""
        cls._instance = None

    # -------------------------------------------------------------------------
    # Pangrams
    # -------------------------------------------------------------------------

    @classmethod
    def insert_pangram(cls, line1: str, line2: str, line3: str) -> dict[str, Any]:
        """
        Insert one pangram row.

        Args:
            line1: First line (5 syllables)
            line2: Second line (7 syllables)
            line3: Third line (5 syllables)

        Returns:
            The stored row, including the generated id and created_at

        Raises:
            SupabaseClientError: If the insert fails or returns no row
        """
        client = cls.get_client()
        table = settings.PANGRAMS_TABLE

        try:
            response = (
                client.table(table)
                .insert({"line1": line1, "line2": line2, "line3": line3})
                .execute()
            )
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to insert pangram: {e}",
                code="INSERT_PANGRAM_FAILED",
                suggestion=f"Check that the '{table}' table exists and is writable",
                details={"table": table},
            ) from e

        if not response.data:
            raise SupabaseClientError(
                message="Insert returned no data",
                code="INSERT_PANGRAM_FAILED",
                details={"table": table},
            )

        row = response.data[0]
        logger.debug(f"Inserted pangram row {row.get('id')}")
        return row

    @classmethod
    def fetch_pangrams(cls, limit: int | None = None) -> list[dict[str, Any]]:
        """
        Fetch stored pangrams, most recently created first.

        Rows sharing a created_at timestamp fall back to id order, so the
        result always follows insertion order in reverse.

        Args:
            limit: Maximum number of rows to return (default: all)

        Returns:
            List of row dicts with keys id, line1, line2, line3, created_at

        Raises:
            SupabaseClientError: If query fails
        """
        client = cls.get_client()
        table = settings.PANGRAMS_TABLE

        try:
            query = (
                client.table(table)
                .select("id, line1, line2, line3, created_at")
                .order("created_at", desc=True)
                .order("id", desc=True)
            )
            if limit is not None:
                query = query.limit(limit)

            response = query.execute()
            rows = response.data or []

            logger.debug(f"Fetched {len(rows)} pangrams")
            return rows

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to fetch pangrams: {e}",
                code="FETCH_PANGRAMS_FAILED",
                suggestion=f"Check that the '{table}' table exists and is readable",
                details={"table": table, "limit": limit},
            ) from e
