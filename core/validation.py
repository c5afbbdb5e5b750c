# =============================================================================
# core/validation.py - Pangram Rules
# =============================================================================
# Two rules decide whether a submission can be stored:
# 1. Letter coverage: the three lines together use every letter a-z
# 2. Syllables: lines have 5, 7 and 5 syllables (one remote lookup per line)
#
# validate_pangram() returns human-readable messages; an empty list means
# the submission is valid.
# =============================================================================

import logging
import string

from core.models.pangram import REQUIRED_SYLLABLES, PangramCreate
from lib.syllables import SyllableLookupError, count_syllables

logger = logging.getLogger(__name__)


# =============================================================================
# Letter Coverage
# =============================================================================

def missing_letters(text: str) -> list[str]:
    """
    Letters of the alphabet that never appear in the text.

    Case-insensitive. Characters outside a-z are ignored.

    Example:
        missing_letters("The quick brown fox")  # -> ["a", "d", "g", ...]
    """
    present = set(text.lower())
    return [letter for letter in string.ascii_lowercase if letter not in present]


def is_pangram(text: str) -> bool:
    return not missing_letters(text)


# =============================================================================
# Syllables
# =============================================================================

def check_syllables(line: str, required: int) -> bool:
    """
    Check a line's syllable count against the required number.

    A failed lookup is logged and counts as a mismatch.
    """
    try:
        syllables = count_syllables(line)
    except SyllableLookupError as e:
        logger.warning(f"Syllable lookup failed for '{line}': {e}")
        return False

    return syllables == required


# =============================================================================
# Full Validation
# =============================================================================

def validate_pangram(pangram: PangramCreate) -> list[str]:
    """
    Run every rule against a submission.

    Lines are checked in order and their syllables looked up one after
    another. The letter coverage message is reported with line 2.

    Args:
        pangram: The submitted lines

    Returns:
        Error messages in field order; empty if the pangram is valid

    Example:
        validate_pangram(PangramCreate(line1="hi", line2="", line3="there"))
        # -> ["Line 1 doesn't have 5 syllables.",
        #     "Not a pangram! Missing letters: a, b, c, ...",
        #     "Line 2 is required.",
        #     "Line 3 doesn't have 5 syllables."]
    """
    errors: list[str] = []
    absent = missing_letters(pangram.text)

    for number, (line, required) in enumerate(zip(pangram.lines, REQUIRED_SYLLABLES), start=1):
        if number == 2 and absent:
            errors.append(f"Not a pangram! Missing letters: {', '.join(absent)}.")

        if not line.strip():
            errors.append(f"Line {number} is required.")
            continue

        if not check_syllables(line, required):
            errors.append(f"Line {number} doesn't have {required} syllables.")

    return errors
