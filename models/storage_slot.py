"""
StorageSlot model - one named key-value slot of persisted state.
"""

from datetime import datetime, timezone
from sqlmodel import SQLModel, Field


def utc_now() -> datetime:
    """Timezone-aware current time for slot timestamps."""
    return datetime.now(timezone.utc)


class StorageSlot(SQLModel, table=True):
    """A single named slot holding a serialized string value."""
    key: str = Field(primary_key=True)  # e.g., "advancedSportsCards", "theme"
    value: str
    updated_at: datetime = Field(default_factory=utc_now)
