"""
Export of card records and dashboard numbers.
CSV for spreadsheets and a plain-text summary report.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

import pandas as pd

from models import CardRecord, period_label
from services.aggregator import PeriodPoint, SummaryStats

logger = logging.getLogger(__name__)


def export_columns() -> List[str]:
    """CSV headers: camelCase storage keys in model field order."""
    return [info.alias or name for name, info in CardRecord.model_fields.items()]


def records_to_frame(records: Iterable[CardRecord]) -> pd.DataFrame:
    """Build a DataFrame with one row per record and camelCase columns."""
    rows = [record.to_storage() for record in records]
    return pd.DataFrame(rows, columns=export_columns())


def export_csv(records: Iterable[CardRecord], path: Optional[Union[str, Path]] = None) -> str:
    """
    Serialize records as CSV.

    Args:
        records: Records to export
        path: Optional file to write the CSV to

    Returns:
        The CSV text
    """
    df = records_to_frame(records)
    csv_text = df.to_csv(index=False)

    if path is not None:
        path = Path(path)
        path.write_text(csv_text, encoding='utf-8')
        logger.info(f"Exported {len(df)} records to {path}")

    return csv_text


def format_summary_report(
    stats: SummaryStats,
    series: List[PeriodPoint],
    period: str = "all",
    category: str = "all"
) -> str:
    """
    Format a summary report for display or printing.

    Args:
        stats: Summary statistics of the visible records
        series: Per-period chart series
        period: Active period filter
        category: Active category filter

    Returns:
        Formatted report string
    """
    category_name = "All Sports" if category == "all" else category.capitalize()

    lines = [
        "=" * 60,
        "SPORTS CARD PORTFOLIO REPORT",
        "=" * 60,
        f"Filters:                   {period_label(period)} / {category_name}",
        "",
        "SUMMARY",
        "-" * 40,
        f"Total Portfolio Value:     ${stats.total_portfolio_value:,.2f}",
        f"Total Profit:              ${stats.total_profit:,.2f}",
        f"Cards:                     {stats.total_cards}",
        f"Average ROI:               {stats.avg_roi:.1f}%",
        "",
        "PROFIT BY PERIOD",
        "-" * 40,
    ]

    if series:
        table = pd.DataFrame(
            {
                'Profit ($)': [round(p.total_profit, 2) for p in series],
                'Avg ROI (%)': [round(p.avg_roi, 1) for p in series],
                'Cards': [p.card_count for p in series],
            },
            index=[p.label for p in series]
        )
        lines.append(table.to_string())
    else:
        lines.append("  No periods to report")

    lines.append("")
    lines.append("=" * 60)

    return "\n".join(lines)
