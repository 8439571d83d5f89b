"""
Record Store - ordered card record collection persisted into one slot.
The whole collection is serialized as a JSON array on every mutation.
"""

import json
import logging
from typing import List, Tuple

from pydantic import ValidationError

from errors import StorageError
from models import CardRecord
from repositories.storage_backend import StorageBackend

logger = logging.getLogger(__name__)


class RecordStore:
    """
    In-memory card collection owning load/save to a storage backend.
    Insertion order is the chronological entry order.
    """

    def __init__(self, backend: StorageBackend, slot: str):
        self.backend = backend
        self.slot = slot
        self._records: List[CardRecord] = []

    @property
    def records(self) -> Tuple[CardRecord, ...]:
        """Read-only view of the current collection."""
        return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def load(self) -> List[CardRecord]:
        """
        Reconstitute the collection from the storage slot.
        Absent, unreadable or malformed content yields an empty collection.

        Returns:
            List of loaded CardRecord objects
        """
        self._records = self._read_slot()
        logger.info(f"Loaded {len(self._records)} card records from slot '{self.slot}'")
        return list(self._records)

    def _read_slot(self) -> List[CardRecord]:
        try:
            raw = self.backend.get_item(self.slot)
        except StorageError as e:
            logger.warning(f"Starting with an empty collection: {e}")
            return []

        if not raw:
            return []

        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning(f"Slot '{self.slot}' does not hold valid JSON: {e}")
            return []

        if not isinstance(payload, list):
            logger.warning(f"Slot '{self.slot}' does not hold a JSON array, ignoring it")
            return []

        records = []
        for index, item in enumerate(payload):
            try:
                records.append(CardRecord.model_validate(item))
            except ValidationError as e:
                logger.warning(f"Skipping stored record #{index}: {e.error_count()} invalid field(s)")
        return records

    def append(self, record: CardRecord) -> None:
        """
        Add a record to the end of the collection and persist immediately.
        The record stays in memory even if persisting fails.
        """
        self._records.append(record)
        self.persist()

    def remove(self, record_id: str) -> bool:
        """
        Delete the record with a matching id and persist.

        Args:
            record_id: ID of the record to delete

        Returns:
            True if a record was removed, False if no record matched
        """
        remaining = [r for r in self._records if r.id != record_id]
        if len(remaining) == len(self._records):
            logger.debug(f"No record with id {record_id}, nothing to delete")
            return False
        self._records = remaining
        self.persist()
        return True

    def persist(self) -> None:
        """
        Overwrite the slot with the entire collection.

        Raises:
            StorageError: if the backend rejects the write
        """
        payload = json.dumps([record.to_storage() for record in self._records])
        try:
            self.backend.set_item(self.slot, payload)
        except StorageError:
            raise
        except OSError as e:
            raise StorageError(f"Could not persist slot '{self.slot}': {e}") from e
        logger.debug(f"Persisted {len(self._records)} records to slot '{self.slot}'")
