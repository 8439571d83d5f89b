"""
Data models for SlabLedger.
The SQLModel table and the card record model are centralized here.
"""

from models.storage_slot import StorageSlot, utc_now
from models.card_record import CardRecord
from models.periods import (
    ALL,
    PERIOD_KEYS,
    CHART_PERIODS,
    period_label
)

__all__ = [
    'StorageSlot',
    'utc_now',
    'CardRecord',
    'ALL',
    'PERIOD_KEYS',
    'CHART_PERIODS',
    'period_label',
]
