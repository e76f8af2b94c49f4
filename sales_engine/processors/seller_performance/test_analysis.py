"""
Tests — End-to-end seller performance report.

Usage:
    python -m pytest sales_engine/processors/seller_performance
    (run from the project root)
"""

import json

import pytest
from pydantic import ValidationError

from ...config import Settings
from ...schemas import SalesDataset, SellerReport
from . import (
    AnalysisOptions, InvalidInputError, SalesAnalyzer, analyze_sales_data,
    calculate_bonus_by_profit, calculate_simple_revenue,
)
from .factories import make_item


def test_single_seller_example(options):
    data = {
        "sellers": [{"id": "s1", "first_name": "A", "last_name": "B"}],
        "products": [{"sku": "X", "purchase_price": 5}],
        "purchase_records": [
            {"seller_id": "s1", "items": [make_item("X", 2, 10, 0)]},
        ],
    }

    [report] = analyze_sales_data(data, options)

    assert report.model_dump() == {
        "seller_id": "s1",
        "name": "A B",
        "revenue": 20.0,
        "profit": 10.0,
        "sales_count": 1,
        "top_products": [{"sku": "X", "quantity": 2}],
        "bonus": 1.5,
    }


def test_report_has_one_row_per_seller(sales_data, options):
    report = analyze_sales_data(sales_data, options)
    assert len(report) == len(sales_data["sellers"])
    assert all(isinstance(r, SellerReport) for r in report)


def test_report_ordered_by_profit(sales_data, options):
    report = analyze_sales_data(sales_data, options)
    assert [r.seller_id for r in report] == ["s2", "s1", "s3", "s4"]
    assert [r.profit for r in report] == [15.0, 10.0, 6.0, 0.0]


def test_bonuses_follow_rank(sales_data, options):
    bonuses = {r.seller_id: r.bonus for r in analyze_sales_data(sales_data, options)}
    assert bonuses == {"s2": 2.25, "s1": 1.0, "s3": 0.6, "s4": 0.0}


def test_sales_count_ignores_unknown_sellers(sales_data, options):
    report = analyze_sales_data(sales_data, options)
    assert sum(r.sales_count for r in report) == 4


def test_unknown_sku_only_counts_the_sale(sales_data, options):
    s4 = next(r for r in analyze_sales_data(sales_data, options) if r.seller_id == "s4")
    assert s4.sales_count == 1
    assert s4.revenue == 0 and s4.profit == 0
    assert s4.top_products == []


def test_top_products_in_report(sales_data, options):
    s2 = analyze_sales_data(sales_data, options)[0]
    assert [(p.sku, p.quantity) for p in s2.top_products] == [("Y", 10), ("X", 1)]


def test_money_is_rounded_to_cents(options):
    data = {
        "sellers": [{"id": "s1", "first_name": "A", "last_name": "B"}],
        "products": [{"sku": "X", "purchase_price": 0.1}],
        "purchase_records": [
            {"seller_id": "s1", "items": [make_item("X", 1, 0.1), make_item("X", 1, 0.2)]},
            {"seller_id": "s1", "items": [make_item("X", 3, 0.7, 10)]},
        ],
    }
    [report] = analyze_sales_data(data, options)
    assert report.revenue == 2.19
    assert report.profit == 1.69
    assert report.revenue == round(report.revenue, 2)


def test_accepts_pydantic_dataset(sales_data, options):
    dataset = SalesDataset.model_validate(sales_data)
    from_model = analyze_sales_data(dataset, options)
    from_dicts = analyze_sales_data(sales_data, options)
    assert from_model == from_dicts


def test_accepts_camel_case_options_mapping(sales_data):
    report = SalesAnalyzer().analyze(sales_data, {
        "calculateRevenue": calculate_simple_revenue,
        "calculateBonus": calculate_bonus_by_profit,
    })
    assert report[0].seller_id == "s2"


def test_custom_strategies(sales_data):
    seen = []

    def gross_revenue(item, product):
        return item["sale_price"] * item["quantity"]

    def flat_bonus(index, total, seller):
        seen.append((index, total, seller.id))
        return 100 - index

    report = analyze_sales_data(sales_data, AnalysisOptions(gross_revenue, flat_bonus))

    # s2 now earns 60 gross: profit 60 - 20 - 5 = 35
    assert report[0].seller_id == "s2"
    assert report[0].profit == 35.0
    assert [r.bonus for r in report] == [100, 99, 98, 97]
    assert seen[0] == (0, 4, "s2")


def test_strategy_errors_propagate(sales_data):
    def broken(item, product):
        raise ZeroDivisionError("bad pricing")

    with pytest.raises(ZeroDivisionError):
        analyze_sales_data(sales_data, AnalysisOptions(broken, calculate_bonus_by_profit))


def test_invalid_input_fails_before_work(sales_data):
    calls = []

    def tracking_revenue(item, product):
        calls.append(item)
        return 0

    sales_data["purchase_records"] = []
    with pytest.raises(InvalidInputError):
        analyze_sales_data(sales_data, AnalysisOptions(tracking_revenue, calculate_bonus_by_profit))
    assert calls == []


def test_missing_strategy_is_rejected(sales_data):
    with pytest.raises(InvalidInputError):
        analyze_sales_data(sales_data, {"calculateRevenue": calculate_simple_revenue})


def test_input_is_not_mutated(sales_data, options):
    snapshot = json.dumps(sales_data, sort_keys=True)
    analyze_sales_data(sales_data, options)
    assert json.dumps(sales_data, sort_keys=True) == snapshot


def test_report_is_json_ready(sales_data, options):
    payload = json.dumps([r.model_dump() for r in analyze_sales_data(sales_data, options)])
    assert json.loads(payload)[0]["seller_id"] == "s2"


def test_runs_are_independent(sales_data, options):
    analyzer = SalesAnalyzer()
    assert analyzer.analyze(sales_data, options) == analyzer.analyze(sales_data, options)


# ------------------------------------------------------------------
# Settings
# ------------------------------------------------------------------

def test_settings_defaults():
    defaults = Settings()
    assert defaults.TOP_PRODUCTS_LIMIT == 10
    assert defaults.MONEY_DECIMALS == 2
    assert defaults.BONUS_RATE_FIRST == 0.15


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("SALES_ENGINE_TOP_PRODUCTS_LIMIT", "5")
    assert Settings().TOP_PRODUCTS_LIMIT == 5


def test_settings_reject_zero_limit(monkeypatch):
    monkeypatch.setenv("SALES_ENGINE_TOP_PRODUCTS_LIMIT", "0")
    with pytest.raises(ValidationError):
        Settings()
