"""
Period buckets used to group card sales.
"""

ALL = "all"

WEEK_PERIODS = ("week1", "week2", "week3", "week4")
MONTH_PERIODS = ("month1", "month2", "month3")
QUARTER_PERIODS = ("q1", "q2", "q3", "q4")

PERIOD_KEYS = WEEK_PERIODS + MONTH_PERIODS + QUARTER_PERIODS

# Chart series only cover the week and month buckets
CHART_PERIODS = WEEK_PERIODS + MONTH_PERIODS


def period_label(period: str) -> str:
    """
    Human readable name for a period key.

    Examples:
        >>> period_label("week1")
        'Week 1'
        >>> period_label("q3")
        'Q3'
        >>> period_label("all")
        'All Time'
    """
    if period == ALL:
        return "All Time"
    if period.startswith("week") and period[4:].isdigit():
        return f"Week {period[4:]}"
    if period.startswith("month") and period[5:].isdigit():
        return f"Month {period[5:]}"
    if period.startswith("q") and period[1:].isdigit():
        return period.upper()
    return period
