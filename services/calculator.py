"""
Profit and ROI calculation for a single card sale.
Pure functions only, no storage access.
"""

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DerivedFinancials:
    """Derived profit figures for one sale."""
    net_profit: float  # Before tax
    tax_amount: float
    profit: float  # Final, tax-adjusted profit shown to the user
    roi: float  # Percentage of purchase price


def compute_derived(
    purchase_price: float,
    sale_price: float,
    fees: float = 0.0,
    tax_rate: float = 0.0
) -> DerivedFinancials:
    """
    Calculate net profit, tax, final profit and ROI for a sale.

    Tax is charged on the net profit, so a loss produces a negative tax amount.
    ROI is not clamped; it can be negative or exceed 100.

    Args:
        purchase_price: Amount paid for the card
        sale_price: Amount the card sold for
        fees: Selling fees (default: 0)
        tax_rate: Tax percentage, 20 means 20% (default: 0)

    Returns:
        DerivedFinancials. ROI is NaN when purchase_price is 0.

    Examples:
        >>> compute_derived(100, 150, fees=5, tax_rate=20)
        DerivedFinancials(net_profit=45.0, tax_amount=9.0, profit=36.0, roi=36.0)
    """
    fees = fees or 0.0
    tax_rate = tax_rate or 0.0

    net_profit = float(sale_price - purchase_price - fees)
    tax_amount = net_profit * (tax_rate / 100)
    profit = net_profit - tax_amount

    if purchase_price == 0:
        logger.warning("Purchase price is 0, ROI is undefined")
        roi = float("nan")
    else:
        roi = (profit / purchase_price) * 100

    return DerivedFinancials(
        net_profit=net_profit,
        tax_amount=tax_amount,
        profit=profit,
        roi=roi
    )
