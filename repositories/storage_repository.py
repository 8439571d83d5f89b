"""
Storage Repository - data access layer for StorageSlot model.
Optimized with optional session parameter for transaction reuse.
"""

from typing import Optional

from sqlmodel import Session

from db_engine import get_engine
from models import StorageSlot, utc_now


class StorageRepository:
    """Repository for StorageSlot CRUD operations."""

    @staticmethod
    def get(key: str, session: Optional[Session] = None) -> Optional[str]:
        """
        Read the value stored under a slot key.

        Args:
            key: Slot key to look up
            session: Optional existing session for transaction reuse

        Returns:
            Stored string value or None if the slot is empty
        """
        def _get(sess: Session) -> Optional[str]:
            slot = sess.get(StorageSlot, key)
            return slot.value if slot else None

        if session is not None:
            return _get(session)
        else:
            with Session(get_engine()) as session:
                return _get(session)

    @staticmethod
    def put(key: str, value: str, session: Optional[Session] = None) -> StorageSlot:
        """
        Write a slot, replacing any previous value wholesale.

        Args:
            key: Slot key to write
            value: Serialized value
            session: Optional existing session for transaction reuse

        Returns:
            The saved StorageSlot
        """
        def _put(sess: Session) -> StorageSlot:
            try:
                slot = sess.get(StorageSlot, key)
                if slot:
                    slot.value = value
                    slot.updated_at = utc_now()
                else:
                    slot = StorageSlot(key=key, value=value)
                sess.add(slot)
                sess.commit()
                sess.refresh(slot)
                return slot
            except Exception as e:
                sess.rollback()
                raise e

        if session is not None:
            return _put(session)
        else:
            with Session(get_engine()) as session:
                return _put(session)

    @staticmethod
    def delete(key: str, session: Optional[Session] = None) -> bool:
        """
        Clear a slot.

        Args:
            key: Slot key to clear
            session: Optional existing session for transaction reuse

        Returns:
            True if a slot was removed, False if it did not exist
        """
        def _delete(sess: Session) -> bool:
            try:
                slot = sess.get(StorageSlot, key)
                if slot:
                    sess.delete(slot)
                    sess.commit()
                    return True
                return False
            except Exception as e:
                sess.rollback()
                raise e

        if session is not None:
            return _delete(session)
        else:
            with Session(get_engine()) as session:
                return _delete(session)
