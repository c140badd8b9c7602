import pytest
from backend.models.request import FinancialInput
from backend.valuation.multiples import compute_multiple_valuation


def test_comps_ev_ebitda():
    value, trace = compute_multiple_valuation(
        "comps", FinancialInput(ebitda=250_000, user_industry_ev_ebitda_multiple=6),
    )
    assert value == 1_500_000
    assert trace.rule == "ev_ebitda"
    assert trace.base_value == 250_000
    assert trace.multiplier == 6


def test_comps_pe_takes_priority_over_ev_ebitda():
    financials = FinancialInput(
        ebitda=250_000, net_income=100_000,
        user_industry_pe_ratio=15, user_industry_ev_ebitda_multiple=6,
    )
    value, trace = compute_multiple_valuation("comps", financials)
    assert trace.rule == "pe_ratio"
    assert value == 1_500_000


def test_comps_pe_skipped_when_net_income_not_positive():
    financials = FinancialInput(
        ebitda=250_000, net_income=0,
        user_industry_pe_ratio=15, user_industry_ev_ebitda_multiple=6,
    )
    _, trace = compute_multiple_valuation("comps", financials)
    assert trace.rule == "ev_ebitda"


def test_comps_heuristic_without_benchmarks():
    financials = FinancialInput(revenue=1_000_000, ebitda=200_000, total_liabilities=100_000)
    value, trace = compute_multiple_valuation("comps", financials)
    assert trace.rule == "comps_heuristic"
    assert trace.base_value == pytest.approx(300_000)
    assert trace.multiplier == 1.1
    assert value == 330_000


def test_comps_heuristic_treats_missing_values_as_zero():
    value, trace = compute_multiple_valuation("comps", FinancialInput(ebitda=5_000))
    assert trace.base_value == 5_000
    assert value == 10_000
    assert trace.floor_applied


def test_multiples_default_multiplier():
    value, trace = compute_multiple_valuation("multiples", FinancialInput(revenue=1_000_000))
    assert value == 800_000
    assert trace.rule == "default_revenue_multiple"
    assert trace.multiplier == 0.8


def test_multiples_user_revenue_multiple():
    value, trace = compute_multiple_valuation(
        "multiples", FinancialInput(revenue=1_000_000, user_industry_revenue_multiple=2.5),
    )
    assert value == 2_500_000
    assert trace.rule == "revenue_multiple"


def test_multiples_floor():
    value, trace = compute_multiple_valuation("multiples", FinancialInput(revenue=5_000))
    assert value == 10_000
    assert trace.calculated_value == pytest.approx(4_000)
    assert trace.floor_applied


def test_rejects_other_methods():
    with pytest.raises(ValueError):
        compute_multiple_valuation("dcf", FinancialInput(revenue=1))
