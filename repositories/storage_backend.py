"""
Key-value storage backends for persisted slots.
The record store and preferences only need get/set/remove of string values.
"""

import logging
from typing import Dict, Optional, Protocol

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from db_engine import get_engine
from errors import StorageError
from repositories.storage_repository import StorageRepository

logger = logging.getLogger(__name__)


class StorageBackend(Protocol):
    """A named-slot string store."""

    def get_item(self, key: str) -> Optional[str]:
        ...

    def set_item(self, key: str, value: str) -> None:
        ...

    def remove_item(self, key: str) -> None:
        ...


class SQLiteStorage:
    """
    Storage backend keeping each slot as a row of the storageslot table.
    Database failures surface as StorageError.
    """

    def __init__(self, engine=None):
        self._engine = engine if engine is not None else get_engine()

    def get_item(self, key: str) -> Optional[str]:
        try:
            with Session(self._engine) as session:
                return StorageRepository.get(key, session=session)
        except SQLAlchemyError as e:
            logger.error(f"Failed to read slot '{key}': {e}")
            raise StorageError(f"Could not read slot '{key}'") from e

    def set_item(self, key: str, value: str) -> None:
        try:
            with Session(self._engine) as session:
                StorageRepository.put(key, value, session=session)
        except SQLAlchemyError as e:
            logger.error(f"Failed to write slot '{key}': {e}")
            raise StorageError(f"Could not write slot '{key}'") from e

    def remove_item(self, key: str) -> None:
        try:
            with Session(self._engine) as session:
                StorageRepository.delete(key, session=session)
        except SQLAlchemyError as e:
            logger.error(f"Failed to clear slot '{key}': {e}")
            raise StorageError(f"Could not clear slot '{key}'") from e


class MemoryStorage:
    """Storage backend living only for the current session."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._slots: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._slots.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._slots[key] = value

    def remove_item(self, key: str) -> None:
        self._slots.pop(key, None)
