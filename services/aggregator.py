"""
Portfolio aggregation for the dashboard.
Summary statistics, per-period chart series and category distribution.
"""

import logging
from typing import Dict, Iterable, List, Optional, Sequence
from dataclasses import dataclass

import numpy as np

from models import CardRecord, CHART_PERIODS, period_label

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SummaryStats:
    """Headline dashboard numbers."""
    total_portfolio_value: float  # Sum of sale prices over the whole collection
    total_profit: float
    total_cards: int
    avg_roi: float

    def to_dict(self) -> Dict:
        return {
            'totalPortfolioValue': self.total_portfolio_value,
            'totalProfit': self.total_profit,
            'totalCards': self.total_cards,
            'avgROI': self.avg_roi,
        }


@dataclass(frozen=True)
class PeriodPoint:
    """One bar of the per-period charts."""
    period: str
    label: str
    total_profit: float
    avg_roi: float
    card_count: int

    def to_dict(self) -> Dict:
        return {
            'period': self.period,
            'periodLabel': self.label,
            'totalProfit': self.total_profit,
            'avgROI': self.avg_roi,
            'cardCount': self.card_count,
        }


@dataclass(frozen=True)
class CategoryShare:
    """Card count and profit for one category (sport)."""
    category: str
    card_count: int
    total_profit: float


def mean_roi(records: Sequence[CardRecord]) -> float:
    """Arithmetic mean of ROI, 0.0 for no records."""
    if not records:
        return 0.0
    return float(np.mean([r.roi for r in records]))


def summarize(
    visible: Iterable[CardRecord],
    portfolio: Optional[Iterable[CardRecord]] = None
) -> SummaryStats:
    """
    Calculate summary statistics.

    Profit, count and average ROI cover the visible (filtered) records.
    Portfolio value always covers the whole collection.

    Args:
        visible: Records currently shown
        portfolio: Full collection (default: the visible records)

    Returns:
        SummaryStats
    """
    visible = list(visible)
    portfolio = visible if portfolio is None else list(portfolio)

    return SummaryStats(
        total_portfolio_value=float(sum(r.sale_price for r in portfolio)),
        total_profit=float(sum(r.profit for r in visible)),
        total_cards=len(visible),
        avg_roi=mean_roi(visible)
    )


def period_series(
    records: Iterable[CardRecord],
    periods: Sequence[str] = CHART_PERIODS
) -> List[PeriodPoint]:
    """
    Calculate profit, average ROI and card count per period bucket.

    Output follows the order of ``periods``; empty buckets report zeros.

    Args:
        records: Records to bucket
        periods: Period keys to report (default: week1..week4, month1..month3)

    Returns:
        List of PeriodPoint, one per period key
    """
    buckets: Dict[str, List[CardRecord]] = {period: [] for period in periods}
    for record in records:
        if record.period in buckets:
            buckets[record.period].append(record)

    return [
        PeriodPoint(
            period=period,
            label=period_label(period),
            total_profit=float(sum(r.profit for r in bucket)),
            avg_roi=mean_roi(bucket),
            card_count=len(bucket)
        )
        for period, bucket in buckets.items()
    ]


def category_distribution(records: Iterable[CardRecord]) -> List[CategoryShare]:
    """
    Count cards and total profit per category, in order of first appearance.
    """
    counts: Dict[str, int] = {}
    profits: Dict[str, float] = {}
    for record in records:
        counts[record.category] = counts.get(record.category, 0) + 1
        profits[record.category] = profits.get(record.category, 0.0) + record.profit

    return [
        CategoryShare(category=category, card_count=count, total_profit=profits[category])
        for category, count in counts.items()
    ]
