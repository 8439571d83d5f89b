import pytest

from services.aggregator import (
    category_distribution,
    mean_roi,
    period_series,
    summarize,
)
from services.filters import filter_records
from services.validation import build_record


def _card(raw_card, purchase, sale, period="week1", category="baseball"):
    return build_record(
        raw_card(purchasePrice=purchase, salePrice=sale, fees=0, taxRate=0, period=period, category=category)
    )


def test_empty_summary_has_zero_average_roi():
    stats = summarize([])

    assert stats.total_cards == 0
    assert stats.total_profit == 0
    assert stats.total_portfolio_value == 0
    assert stats.avg_roi == 0.0
    assert mean_roi([]) == 0.0


def test_week1_bucket_sums_profit_and_averages_roi(raw_card):
    gain = _card(raw_card, 100, 110)  # profit 10, roi 10
    loss = _card(raw_card, 50, 46)  # profit -4, roi -8

    week1 = period_series([gain, loss])[0]

    assert week1.period == "week1"
    assert week1.total_profit == pytest.approx(6.0)
    assert week1.avg_roi == pytest.approx((gain.roi + loss.roi) / 2)
    assert week1.card_count == 2


def test_period_series_follows_fixed_order_and_zero_fills(raw_card):
    records = [
        _card(raw_card, 10, 20, period="month3"),
        _card(raw_card, 10, 15, period="week2"),
        _card(raw_card, 10, 30, period="q1"),
    ]

    series = period_series(records)

    assert [p.period for p in series] == ["week1", "week2", "week3", "week4", "month1", "month2", "month3"]
    assert [p.label for p in series][:2] == ["Week 1", "Week 2"]
    by_period = {p.period: p for p in series}
    assert by_period["week2"].total_profit == pytest.approx(5.0)
    assert by_period["month3"].avg_roi == pytest.approx(100.0)
    assert by_period["week1"].total_profit == 0
    assert by_period["week1"].avg_roi == 0
    assert sum(p.card_count for p in series) == 2


def test_period_series_with_custom_periods(raw_card):
    series = period_series([_card(raw_card, 10, 30, period="q1")], periods=("q1", "q2"))

    assert [(p.label, p.card_count) for p in series] == [("Q1", 1), ("Q2", 0)]


def test_portfolio_value_covers_whole_collection(raw_card):
    records = [
        _card(raw_card, 100, 150, category="baseball"),
        _card(raw_card, 100, 80, category="basketball"),
    ]
    visible = filter_records(records, category="basketball")

    stats = summarize(visible, portfolio=records)

    assert stats.total_portfolio_value == pytest.approx(230.0)
    assert stats.total_profit == pytest.approx(-20.0)
    assert stats.total_cards == 1
    assert stats.avg_roi == pytest.approx(-20.0)
    assert stats.to_dict() == {
        "totalPortfolioValue": stats.total_portfolio_value,
        "totalProfit": stats.total_profit,
        "totalCards": 1,
        "avgROI": stats.avg_roi,
    }


def test_category_distribution(raw_card):
    records = [
        _card(raw_card, 10, 20, category="football"),
        _card(raw_card, 10, 5, category="hockey"),
        _card(raw_card, 10, 12, category="football"),
    ]

    shares = category_distribution(records)

    assert [(s.category, s.card_count) for s in shares] == [("football", 2), ("hockey", 1)]
    assert shares[0].total_profit == pytest.approx(12.0)


def test_period_point_to_dict_for_charts():
    dicts = [point.to_dict() for point in period_series([])]

    assert len(dicts) == 7
    assert dicts[0] == {
        "period": "week1", "periodLabel": "Week 1", "totalProfit": 0.0, "avgROI": 0.0, "cardCount": 0
    }
