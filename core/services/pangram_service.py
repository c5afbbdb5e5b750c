# =============================================================================
# core/services/pangram_service.py - Pangram Business Logic
# =============================================================================
# Validates submissions and stores the valid ones.
# Separates HTTP concerns from database/business logic.
# =============================================================================

import logging

from app.exceptions import PangramValidationError
from core.models.pangram import PangramCreate, PangramRecord
from core.validation import validate_pangram
from lib.supabase_client import SupabaseClient

logger = logging.getLogger(__name__)


class PangramService:
    """
    Service for pangram operations.

    Provides a clean interface between routes and the database.
    """

    @staticmethod
    def list_pangrams() -> list[PangramRecord]:
        """
        Get every stored pangram, newest first.

        Raises:
            SupabaseClientError: If the query fails
        """
        rows = SupabaseClient.fetch_pangrams()
        return [PangramRecord.model_validate(row) for row in rows]

    @staticmethod
    def create_pangram(pangram: PangramCreate) -> PangramRecord:
        """
        Validate a submission and store it.

        Nothing is written unless every rule passes.

        Args:
            pangram: The submitted lines

        Returns:
            The stored record

        Raises:
            PangramValidationError: If any rule fails (carries every message)
            SupabaseClientError: If the insert fails
        """
        errors = validate_pangram(pangram)
        if errors:
            logger.info(f"Rejected pangram with {len(errors)} error(s): {errors}")
            raise PangramValidationError(errors)

        row = SupabaseClient.insert_pangram(*pangram.lines)
        record = PangramRecord.model_validate(row)

        logger.info(f"Created pangram: {record.id}")
        return record
