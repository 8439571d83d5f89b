"""
Turns raw form input into a validated CardRecord.
All field problems are collected and reported together.
"""

import logging
import math
import uuid
from datetime import date, datetime
from typing import Any, Dict, Mapping, Optional

from errors import RecordValidationError
from models import CardRecord, PERIOD_KEYS
from services.calculator import compute_derived

logger = logging.getLogger(__name__)

DEFAULT_PLAYER_NAME = "Unknown"
DEFAULT_GRADE = "raw"


def _text(raw: Mapping[str, Any], *keys: str) -> str:
    """First non-empty stripped string among the given keys."""
    for key in keys:
        value = raw.get(key)
        if value is not None and str(value).strip():
            return str(value).strip()
    return ""


def parse_number(value: Any) -> Optional[float]:
    """
    Parse a form value as a finite float.

    Returns:
        The float, or None for blank, non-numeric, NaN or infinite input.
        Python-only spellings such as "1_000" count as non-numeric.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value or "_" in value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def parse_year(value: Any, default: int) -> int:
    """Parse a year, falling back to default for blank, invalid or zero input."""
    number = parse_number(value)
    if number is None or int(number) == 0:
        return default
    return int(number)


def parse_date(value: Any) -> Optional[date]:
    """
    Parse an ISO 8601 calendar date, optionally followed by a time part.

    Raises:
        ValueError: if a non-blank value is not an ISO date
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    if not text:
        return None
    if "T" in text:
        return datetime.fromisoformat(text).date()
    return date.fromisoformat(text)


def build_record(raw: Mapping[str, Any], now: Optional[datetime] = None) -> CardRecord:
    """
    Validate raw form input and create a CardRecord with derived fields.

    Accepts camelCase form keys (``purchasePrice``) or snake_case keys
    (``purchase_price``); ``sport`` is accepted as an alias of ``category``.

    Args:
        raw: Raw form input
        now: Creation time (default: current time)

    Returns:
        A new CardRecord with a fresh id

    Raises:
        RecordValidationError: if a required field is missing or invalid
    """
    now = now or datetime.now()
    errors: Dict[str, str] = {}

    name = _text(raw, "name")
    if not name:
        errors["name"] = "Card name is required"

    category = _text(raw, "category", "sport")
    if not category:
        errors["category"] = "Category is required"

    purchase_raw = raw.get("purchasePrice", raw.get("purchase_price"))
    purchase_price = parse_number(purchase_raw)
    if purchase_price is None:
        errors["purchasePrice"] = "Purchase price must be a number"
    elif purchase_price <= 0:
        errors["purchasePrice"] = "Purchase price must be greater than 0"

    sale_raw = raw.get("salePrice", raw.get("sale_price"))
    sale_price = parse_number(sale_raw)
    if sale_price is None:
        errors["salePrice"] = "Sale price must be a number"

    period = _text(raw, "period")
    if not period:
        errors["period"] = "Period is required"
    elif period not in PERIOD_KEYS:
        errors["period"] = f"Unknown period '{period}'"

    fees = parse_number(raw.get("fees")) or 0.0
    if fees < 0:
        errors["fees"] = "Fees cannot be negative"

    tax_rate = parse_number(raw.get("taxRate", raw.get("tax_rate"))) or 0.0

    purchase_date = now.date()
    sale_date = None
    try:
        purchase_date = parse_date(raw.get("purchaseDate", raw.get("purchase_date"))) or now.date()
    except ValueError:
        errors["purchaseDate"] = "Purchase date must be an ISO 8601 date"
    try:
        sale_date = parse_date(raw.get("saleDate", raw.get("sale_date")))
    except ValueError:
        errors["saleDate"] = "Sale date must be an ISO 8601 date"

    if errors:
        logger.info(f"Rejected card input: {', '.join(errors)}")
        raise RecordValidationError(errors)

    derived = compute_derived(purchase_price, sale_price, fees=fees, tax_rate=tax_rate)

    return CardRecord(
        id=uuid.uuid4().hex,
        name=name,
        player_name=_text(raw, "playerName", "player_name") or DEFAULT_PLAYER_NAME,
        category=category,
        year=parse_year(raw.get("year"), now.year),
        grade=_text(raw, "grade") or DEFAULT_GRADE,
        purchase_price=purchase_price,
        sale_price=sale_price,
        purchase_date=purchase_date,
        sale_date=sale_date,
        fees=fees,
        tax_rate=tax_rate,
        period=period,
        notes=_text(raw, "notes"),
        created_at=now,
        net_profit=derived.net_profit,
        tax_amount=derived.tax_amount,
        profit=derived.profit,
        roi=derived.roi
    )
