"""
Card tracker engine.
Command and read interface used by a presentation layer; holds the record
store, the active filters and the notification outbox.
"""

import logging
from pathlib import Path
from typing import Any, List, Mapping, Optional, Union

from config import Settings, get_settings
from errors import RecordValidationError, StorageError
from models import ALL, CardRecord
from repositories import PreferencesRepository, RecordStore, SQLiteStorage, StorageBackend
from services.aggregator import (
    CategoryShare,
    PeriodPoint,
    SummaryStats,
    category_distribution,
    period_series,
    summarize
)
from services.export import export_csv, format_summary_report
from services.filters import filter_records, list_categories
from services.notification import NotificationQueue
from services.validation import build_record

logger = logging.getLogger(__name__)


class CardTracker:
    """
    Portfolio tracker for bought and resold cards.
    Constructed with an explicit storage backend; loads existing records
    immediately.
    """

    def __init__(
        self,
        storage: StorageBackend,
        settings: Optional[Settings] = None,
        notifications: Optional[NotificationQueue] = None
    ):
        settings = settings or get_settings()
        self.store = RecordStore(storage, settings.records_slot)
        self.preferences = PreferencesRepository(
            storage,
            slot=settings.theme_slot,
            default_theme=settings.default_theme
        )
        self.notifications = notifications or NotificationQueue()
        self.current_period = ALL
        self.current_category = ALL
        self.store.load()

    # ==================== Commands ====================

    def create_record(self, raw: Mapping[str, Any]) -> CardRecord:
        """
        Validate form input, add the card and persist.

        Args:
            raw: Raw form input (camelCase or snake_case keys)

        Returns:
            The created CardRecord

        Raises:
            RecordValidationError: if the input is invalid; nothing is stored
        """
        try:
            record = build_record(raw)
        except RecordValidationError as e:
            self.notifications.push(f"Could not add card: {', '.join(e.errors.values())}", "error")
            raise

        try:
            self.store.append(record)
        except StorageError as e:
            self.notifications.push(f"Card kept for this session only: {e}", "warning")

        self.notifications.push(f'Added "{record.name}" to portfolio!', "success")
        return record

    def delete_record(self, record_id: str) -> bool:
        """
        Delete a card by id. Unknown ids are ignored.

        Returns:
            True if a card was deleted
        """
        try:
            removed = self.store.remove(record_id)
        except StorageError as e:
            self.notifications.push(f"Deletion not saved: {e}", "warning")
            removed = True

        if removed:
            self.notifications.push("Card deleted from portfolio", "info")
        return removed

    def set_filters(self, period: str = ALL, category: str = ALL) -> None:
        """Set the active period and category filters ("all" disables one)."""
        self.current_period = period or ALL
        self.current_category = category or ALL
        logger.debug(f"Filters set to period={self.current_period}, category={self.current_category}")

    # ==================== Reads ====================

    @property
    def records(self) -> List[CardRecord]:
        """The whole collection, unfiltered."""
        return list(self.store.records)

    def get_visible_records(self) -> List[CardRecord]:
        """Records matching the active filters."""
        return filter_records(self.store.records, self.current_period, self.current_category)

    def get_summary_stats(self) -> SummaryStats:
        """Summary over the visible records; portfolio value over all records."""
        return summarize(self.get_visible_records(), portfolio=self.store.records)

    def get_period_series(self) -> List[PeriodPoint]:
        """Per-period chart series over the whole collection."""
        return period_series(self.store.records)

    def get_category_distribution(self) -> List[CategoryShare]:
        """Cards per category over the whole collection."""
        return category_distribution(self.store.records)

    def get_categories(self) -> List[str]:
        """Categories present in the collection, for the category filter."""
        return list_categories(self.store.records)

    # ==================== Theme ====================

    def get_theme(self) -> str:
        return self.preferences.get_theme()

    def set_theme(self, theme: str) -> str:
        """Apply a theme; it stays in effect for the session if saving fails."""
        try:
            self.preferences.save_theme(theme)
        except StorageError as e:
            self.notifications.push(f"Theme not saved: {e}", "warning")
        return self.preferences.get_theme()

    def toggle_theme(self) -> str:
        """Switch between light and dark."""
        new_theme = "light" if self.preferences.get_theme() == "dark" else "dark"
        return self.set_theme(new_theme)

    # ==================== Export ====================

    def export_csv(self, path: Optional[Union[str, Path]] = None) -> str:
        """Export the visible records as CSV."""
        csv_text = export_csv(self.get_visible_records(), path)
        if path is not None:
            self.notifications.push(f"Exported portfolio to {path}", "success")
        return csv_text

    def summary_report(self) -> str:
        """Plain-text report of the summary stats and period series."""
        return format_summary_report(
            self.get_summary_stats(),
            self.get_period_series(),
            period=self.current_period,
            category=self.current_category
        )


def create_tracker(settings: Optional[Settings] = None) -> CardTracker:
    """
    Build a tracker persisted in a SQLite database.

    Args:
        settings: Settings to use. When given, the tracker gets its own engine
            for settings.database_url; otherwise the global engine is used.

    Returns:
        CardTracker backed by SQLiteStorage
    """
    from db_engine import build_engine, get_engine, init_db

    if settings is None:
        settings = get_settings()
        engine = get_engine()
    else:
        engine = build_engine(settings)
    init_db(engine)
    return CardTracker(SQLiteStorage(engine), settings=settings)
