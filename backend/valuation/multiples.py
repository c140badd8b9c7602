from backend.models.request import FinancialInput
from backend.models.valuations import MultipleTrace
from backend.valuation.floors import MULTIPLES_FLOOR, apply_floor, round_half_up

# Heuristic used by comps when no usable benchmark multiple is supplied
_COMPS_REVENUE_WEIGHT = 0.2
_COMPS_HEURISTIC_MULTIPLIER = 1.1
_DEFAULT_REVENUE_MULTIPLIER = 0.8


def _select_comps_rule(financials: FinancialInput) -> tuple[str, float, float]:
    """First matching rule wins: P/E on net income, EV/EBITDA on EBITDA, then the revenue/EBITDA heuristic."""
    revenue = financials.revenue or 0.0
    ebitda = financials.ebitda or 0.0
    net_income = financials.net_income or 0.0

    if financials.user_industry_pe_ratio is not None and net_income > 0:
        return "pe_ratio", net_income, financials.user_industry_pe_ratio
    if financials.user_industry_ev_ebitda_multiple is not None and ebitda > 0:
        return "ev_ebitda", ebitda, financials.user_industry_ev_ebitda_multiple

    base = revenue * _COMPS_REVENUE_WEIGHT + ebitda - (financials.total_liabilities or 0.0)
    return "comps_heuristic", base, _COMPS_HEURISTIC_MULTIPLIER


def _select_multiples_rule(financials: FinancialInput) -> tuple[str, float, float]:
    revenue = financials.revenue or 0.0
    if financials.user_industry_revenue_multiple is not None and revenue > 0:
        return "revenue_multiple", revenue, financials.user_industry_revenue_multiple
    return "default_revenue_multiple", revenue, _DEFAULT_REVENUE_MULTIPLIER


def compute_multiple_valuation(method_id: str, financials: FinancialInput) -> tuple[float, MultipleTrace]:
    """Base metric x multiplier, floored at 10,000. ``method_id`` is 'comps' or 'multiples'."""
    if method_id == "comps":
        rule, base_value, multiplier = _select_comps_rule(financials)
    elif method_id == "multiples":
        rule, base_value, multiplier = _select_multiples_rule(financials)
    else:
        raise ValueError(f"Not a multiple-based method: {method_id!r}")

    calculated = base_value * multiplier
    final_value, floor_applied = apply_floor(round_half_up(calculated), MULTIPLES_FLOOR, unfloored=calculated)

    return final_value, MultipleTrace(
        method=method_id,
        rule=rule,
        revenue=financials.revenue,
        ebitda=financials.ebitda,
        net_income=financials.net_income,
        total_liabilities=financials.total_liabilities,
        base_value=base_value,
        multiplier=multiplier,
        calculated_value=calculated,
        floor=MULTIPLES_FLOOR,
        floor_applied=floor_applied,
        final_value=final_value,
    )
