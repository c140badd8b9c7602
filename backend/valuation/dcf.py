from backend.models.request import DCFInput, FinancialInput
from backend.models.valuations import DCFTrace
from backend.valuation.floors import DCF_FLOOR, apply_floor, round_half_up

LIQUIDITY_DISCOUNT_FACTOR = 0.8
FALLBACK_TERMINAL_MULTIPLE = 10.0
ESTIMATED_FCF_GROWTH = 0.02
ESTIMATED_FCF_DEFAULT = 100_000.0


def _estimate_last_fcf(fcfs: list[float], n_years: int) -> tuple[float, bool]:
    """Final-year FCF, or the first year's FCF grown at 2%/yr when the final year is missing or zero."""
    last = fcfs[n_years - 1] if n_years <= len(fcfs) else 0.0
    if last:
        return last, False
    first = fcfs[0] if fcfs and fcfs[0] else ESTIMATED_FCF_DEFAULT
    return first * (1 + ESTIMATED_FCF_GROWTH) ** (n_years - 1), True


def _compute_terminal_value(last_fcf: float, wacc: float, tgr: float) -> tuple[float, bool]:
    """Gordon growth when wacc > tgr, otherwise a flat multiple of the last FCF. Returns (tv, fallback_used)."""
    if wacc > tgr:
        return last_fcf * (1 + tgr) / (wacc - tgr), False
    return last_fcf * FALLBACK_TERMINAL_MULTIPLE, True


def compute_dcf_valuation(dcf: DCFInput, financials: FinancialInput) -> tuple[float, DCFTrace]:
    """Discounted cash flow with liquidity discount and a 50,000 floor.

    Missing projected FCF entries count as zero. A user sector growth rate replaces the
    entered terminal growth rate; the country risk premium is carried for display only.
    """
    n_years = dcf.projection_years
    discount_rate = dcf.discount_rate
    input_tgr = dcf.terminal_growth_rate

    tgr_percent = input_tgr
    if financials.user_sector_growth_rate is not None:
        tgr_percent = financials.user_sector_growth_rate

    wacc = discount_rate / 100
    tgr = tgr_percent / 100

    fcfs = [fcf or 0.0 for fcf in dcf.projected_fcf]
    pv_fcfs: list[float] = []
    for i in range(n_years):
        fcf = fcfs[i] if i < len(fcfs) else 0.0
        pv_fcfs.append(fcf / (1 + wacc) ** (i + 1))
    pv_sum = sum(pv_fcfs)

    last_fcf, last_fcf_estimated = _estimate_last_fcf(fcfs, n_years)
    terminal_value, fallback = _compute_terminal_value(last_fcf, wacc, tgr)
    pv_terminal = terminal_value / (1 + wacc) ** n_years

    enterprise_value = pv_sum + pv_terminal
    discounted_ev = enterprise_value * LIQUIDITY_DISCOUNT_FACTOR
    final_value, floor_applied = apply_floor(round_half_up(discounted_ev), DCF_FLOOR, unfloored=discounted_ev)

    trace = DCFTrace(
        projection_years=n_years,
        fcf_inputs=list(dcf.projected_fcf),
        discount_rate_percent=discount_rate,
        wacc=wacc,
        input_terminal_growth_rate=input_tgr,
        terminal_growth=tgr,
        user_sector_growth_rate_used=financials.user_sector_growth_rate,
        user_country_risk_premium=financials.user_country_risk_premium,
        pv_fcfs=pv_fcfs,
        pv_projected_fcf_sum=pv_sum,
        last_fcf=last_fcf,
        last_fcf_estimated=last_fcf_estimated,
        terminal_value=terminal_value,
        terminal_value_fallback=fallback,
        pv_terminal_value=pv_terminal,
        enterprise_value=enterprise_value,
        liquidity_discount_factor=LIQUIDITY_DISCOUNT_FACTOR,
        liquidity_discount_percent=round((1 - LIQUIDITY_DISCOUNT_FACTOR) * 100),
        discounted_ev=discounted_ev,
        floor=DCF_FLOOR,
        floor_applied=floor_applied,
        final_value=final_value,
    )
    return final_value, trace
