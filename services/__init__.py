"""
Services package for SlabLedger.
Provides core business logic separated from presentation and data layers.
"""

from services.calculator import DerivedFinancials, compute_derived
from services.validation import build_record, parse_number
from services.filters import filter_records, list_categories
from services.aggregator import (
    SummaryStats,
    PeriodPoint,
    CategoryShare,
    summarize,
    period_series,
    category_distribution,
    mean_roi
)
from services.notification import Notification, NotificationQueue
from services.export import export_csv, records_to_frame, format_summary_report
from services.tracker import CardTracker, create_tracker

__all__ = [
    # Calculation
    'DerivedFinancials',
    'compute_derived',
    'build_record',
    'parse_number',
    # Filtering and aggregation
    'filter_records',
    'list_categories',
    'SummaryStats',
    'PeriodPoint',
    'CategoryShare',
    'summarize',
    'period_series',
    'category_distribution',
    'mean_roi',
    # Notifications and export
    'Notification',
    'NotificationQueue',
    'export_csv',
    'records_to_frame',
    'format_summary_report',
    # Engine
    'CardTracker',
    'create_tracker',
]
