import pytest

from services.filters import filter_records, list_categories
from services.validation import build_record


@pytest.fixture
def records(raw_card):
    return [
        build_record(raw_card(name="A", period="week1", category="baseball")),
        build_record(raw_card(name="B", period="week2", category="basketball")),
        build_record(raw_card(name="C", period="week1", category="basketball")),
        build_record(raw_card(name="D", period="q1", category="baseball")),
    ]


def test_all_all_is_identity(records):
    assert filter_records(records, "all", "all") == records


def test_period_filter_keeps_order(records):
    assert [r.name for r in filter_records(records, period="week1")] == ["A", "C"]


def test_category_filter(records):
    assert [r.name for r in filter_records(records, category="baseball")] == ["A", "D"]


def test_filters_combine_with_and(records):
    assert [r.name for r in filter_records(records, "week1", "basketball")] == ["C"]


def test_filter_is_idempotent(records):
    once = filter_records(records, "week1", "basketball")
    assert filter_records(once, "week1", "basketball") == once


def test_filter_does_not_mutate_input(records):
    before = list(records)
    result = filter_records(records, "q1", "all")
    result.clear()
    assert records == before


def test_unknown_selector_matches_nothing(records):
    assert filter_records(records, category="hockey") == []


def test_list_categories_in_first_seen_order(records):
    assert list_categories(records) == ["baseball", "basketball"]
