import math

import pytest

from services.calculator import compute_derived


def test_concrete_sale_with_fees_and_tax():
    result = compute_derived(100, 150, fees=5, tax_rate=20)

    assert result.net_profit == pytest.approx(45.0)
    assert result.tax_amount == pytest.approx(9.0)
    assert result.profit == pytest.approx(36.0)
    assert result.roi == pytest.approx(36.0)


@pytest.mark.parametrize(
    "purchase,sale,fees,tax_rate",
    [
        (10.0, 12.5, 0.0, 0.0),
        (250.0, 180.0, 12.75, 15.0),
        (3.33, 99.99, 1.01, 37.5),
        (1200.0, 1200.0, 0.0, 25.0),
    ],
)
def test_profit_matches_closed_form(purchase, sale, fees, tax_rate):
    result = compute_derived(purchase, sale, fees=fees, tax_rate=tax_rate)

    expected = (sale - purchase - fees) * (1 - tax_rate / 100)
    assert abs(result.profit - expected) < 1e-9
    assert abs(result.roi - expected / purchase * 100) < 1e-9


def test_fees_and_tax_default_to_zero():
    result = compute_derived(40, 55)

    assert result.net_profit == 15
    assert result.tax_amount == 0
    assert result.profit == 15
    assert result.roi == pytest.approx(37.5)


def test_loss_reduces_tax_and_gives_negative_roi():
    result = compute_derived(200, 150, fees=10, tax_rate=10)

    assert result.net_profit == pytest.approx(-60.0)
    assert result.tax_amount == pytest.approx(-6.0)
    assert result.profit == pytest.approx(-54.0)
    assert result.roi == pytest.approx(-27.0)


def test_roi_is_not_clamped_above_100():
    assert compute_derived(10, 100).roi == pytest.approx(900.0)


def test_zero_purchase_price_gives_nan_roi():
    result = compute_derived(0, 50)

    assert result.profit == 50
    assert math.isnan(result.roi)
