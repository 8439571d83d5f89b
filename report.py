"""
Command-line portfolio report.
Prints the dashboard summary for the stored card collection.

  python report.py                          # Whole portfolio
  python report.py --period week1           # One period
  python report.py --sport baseball --csv out.csv
  python report.py --json                   # Summary and chart series as JSON
"""

import argparse
import json
import logging
import sys

from config import get_settings
from models import ALL
from services import CardTracker, create_tracker

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Sports card portfolio report")
    parser.add_argument("--period", default=ALL, help="Period key (week1..week4, month1..month3, q1..q4) or 'all'")
    parser.add_argument("--sport", default=ALL, help="Sport/category to show, or 'all'")
    parser.add_argument("--csv", metavar="PATH", help="Also export the visible cards to a CSV file")
    parser.add_argument("--json", action="store_true", help="Print summary and period series as JSON")
    return parser.parse_args(argv)


def dashboard_json(tracker: CardTracker) -> str:
    """Summary stats and per-period series in the shape chart widgets consume."""
    payload = {
        'filters': {'period': tracker.current_period, 'category': tracker.current_category},
        'summary': tracker.get_summary_stats().to_dict(),
        'periods': [point.to_dict() for point in tracker.get_period_series()],
    }
    return json.dumps(payload, indent=2)


def main(argv=None) -> int:
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    args = parse_args(argv)

    tracker = create_tracker()
    tracker.set_filters(args.period, args.sport)
    if args.json:
        print(dashboard_json(tracker))
    else:
        print(tracker.summary_report())

    if args.csv:
        tracker.export_csv(args.csv)

    for notification in tracker.notifications.drain():
        logger.info(f"[{notification.level}] {notification.message}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
