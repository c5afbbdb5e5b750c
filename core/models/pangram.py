# =============================================================================
# core/models/pangram.py - Pangram Schemas
# =============================================================================
# These models define the shape of a pangram as it moves through the app:
# - PangramCreate: Values submitted through the form (may still be invalid)
# - PangramRecord: A stored row returned by the database
#
# A pangram here is a three-line haiku (5/7/5 syllables) whose lines together
# use every letter of the alphabet.
# =============================================================================

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


# Required syllables per line, in line order
REQUIRED_SYLLABLES: tuple[int, int, int] = (5, 7, 5)


class PangramCreate(BaseModel):
    """
    Schema for a submitted pangram.

    Every field defaults to an empty string so a missing query parameter
    turns into a validation message instead of a request error.

    Example:
        {
            "line1": "The quick brown fox",
            "line2": "jumps over the lazy dog",
            "line3": "while we sleep"
        }
    """

    line1: str = Field(default="", description="First line (5 syllables)")
    line2: str = Field(default="", description="Second line (7 syllables)")
    line3: str = Field(default="", description="Third line (5 syllables)")

    @property
    def lines(self) -> tuple[str, str, str]:
        """The three lines in order."""
        return (self.line1, self.line2, self.line3)

    @property
    def text(self) -> str:
        """All three lines concatenated."""
        return "".join(self.lines)


class PangramRecord(BaseModel):
    """
    Schema for a stored pangram.

    Returned by the database client and rendered on the home page.

    Example:
        {
            "id": 42,
            "line1": "The quick brown fox",
            "line2": "jumps over the lazy dog",
            "line3": "while we sleep",
            "created_at": "2024-01-15T10:30:00Z"
        }
    """

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="Row identifier, increases with insertion order")
    line1: str
    line2: str
    line3: str
    created_at: datetime | None = Field(
        default=None,
        description="Timestamp when the pangram was stored"
    )

    @property
    def lines(self) -> tuple[str, str, str]:
        return (self.line1, self.line2, self.line3)

    @property
    def character_count(self) -> int:
        """Total characters across the three lines, spaces and punctuation included."""
        return len(self.line1) + len(self.line2) + len(self.line3)
