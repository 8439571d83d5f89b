"""
Repositories package for SlabLedger.
Provides the storage slots and the card record collection built on them.
"""

from repositories.storage_repository import StorageRepository
from repositories.storage_backend import StorageBackend, SQLiteStorage, MemoryStorage
from repositories.record_store import RecordStore
from repositories.preferences_repository import PreferencesRepository, THEMES

__all__ = [
    'StorageRepository',
    'StorageBackend',
    'SQLiteStorage',
    'MemoryStorage',
    'RecordStore',
    'PreferencesRepository',
    'THEMES',
]
