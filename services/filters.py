"""
Period and category filtering of card records.
"""

from typing import Iterable, List

from models import ALL, CardRecord


def filter_records(
    records: Iterable[CardRecord],
    period: str = ALL,
    category: str = ALL
) -> List[CardRecord]:
    """
    Narrow records by period and category.

    "all" disables a selector; otherwise values must match exactly. Both
    selectors apply together. The input is never modified and the relative
    order is kept.

    Args:
        records: Records to filter
        period: Period key or "all"
        category: Category (sport) or "all"

    Returns:
        New list of matching records
    """
    filtered = list(records)

    if period != ALL:
        filtered = [r for r in filtered if r.period == period]

    if category != ALL:
        filtered = [r for r in filtered if r.category == category]

    return filtered


def list_categories(records: Iterable[CardRecord]) -> List[str]:
    """Distinct categories in order of first appearance, for filter menus."""
    seen = []
    for record in records:
        if record.category not in seen:
            seen.append(record.category)
    return seen
