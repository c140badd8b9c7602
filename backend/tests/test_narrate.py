from backend.models.reference import Language
from backend.models.request import DCFInput, FinancialInput, ValuationRequest
from backend.pipeline.orchestrator import build_result
from backend.pipeline.step_narrate import build_explanation_lines, render_lines
from backend.valuation.engine import compute_valuation

DISCLAIMER_EN = "Data sources: all figures are user-provided inputs"


def _make_request(method_id="dcf", currency_code="USD", **financials):
    if method_id == "dcf" and "dcf" not in financials:
        financials["dcf"] = DCFInput(
            projection_years=2, discount_rate=10, terminal_growth_rate=2, projected_fcf=[100_000, 110_000],
        )
    return ValuationRequest(
        company_name="Acme Trading",
        country_code="SA",
        sector_id="technology",
        method_id=method_id,
        currency_code=currency_code,
        financials=FinancialInput(**financials),
    )


def test_dcf_explanation_english():
    text = build_result(_make_request()).calculation_explanation.en
    assert text.startswith("This valuation was calculated using the Discounted Cash Flow (DCF) method.")
    assert "**Step 1: Present Value of Projected FCF**" in text
    assert "  - Year 1: $100,000" in text
    assert "- Discount rate (WACC): 10.0%" in text
    assert "Gordon Growth Model: $110,000 x (1 + 0.0200) / (0.1000 - 0.0200) = $1,402,500" in text
    assert "Estimated value (rounded): $1,072,727" in text
    assert "Minimum value" not in text
    assert text.rstrip().splitlines()[-1].startswith(DISCLAIMER_EN)


def test_dcf_explanation_arabic():
    text = build_result(_make_request()).calculation_explanation.ar
    assert "**الخطوة ١: القيمة الحالية للتدفقات النقدية المتوقعة**" in text
    assert "١٬٠٧٢٬٧٢٧ $" in text
    assert "١٠٫٠٪" in text
    assert text.rstrip().splitlines()[-1].startswith("مصادر البيانات")


def test_both_narratives_have_the_same_shape():
    explanation = build_result(_make_request()).calculation_explanation
    en_lines = explanation.en.split("\n")
    ar_lines = explanation.ar.split("\n")
    assert len(en_lines) == len(ar_lines)
    for en, ar in zip(en_lines, ar_lines):
        assert (en == "") == (ar == "")
        assert en.startswith("**") == ar.startswith("**")
        assert en.startswith("  - ") == ar.startswith("  - ")


def test_floor_note_when_floor_binds():
    request = _make_request(dcf=DCFInput(projection_years=1, discount_rate=50, terminal_growth_rate=40, projected_fcf=[1]))
    text = build_result(request).calculation_explanation.en
    assert "Minimum value of $50,000 applied" in text


def test_fallback_terminal_value_is_called_out():
    request = _make_request(dcf=DCFInput(projection_years=1, discount_rate=5, terminal_growth_rate=6, projected_fcf=[1_000]))
    text = build_result(request).calculation_explanation.en
    assert "Fallback applied" in text
    assert "$1,000 x 10 = $10,000" in text


def test_sector_growth_named_as_user_supplied():
    text = build_result(_make_request(user_sector_growth_rate=3)).calculation_explanation.en
    assert "User-supplied sector growth rate of 3.0% replaces the entered terminal growth rate of 2.0%" in text


def test_country_risk_premium_noted_only():
    text = build_result(_make_request(user_country_risk_premium=4.5)).calculation_explanation.en
    assert "Country Risk Premium 4.5%" in text
    assert "not added to the discount rate" in text


def test_book_explanation():
    request = _make_request("book", total_assets=2_000_000, total_liabilities=500_000)
    text = build_result(request).calculation_explanation.en
    assert "- Total assets: $2,000,000" in text
    assert "$2,000,000 - $500,000 = $1,500,000" in text


def test_comps_explanation_lists_benchmark():
    request = _make_request("comps", currency_code="SAR", ebitda=250_000, user_industry_ev_ebitda_multiple=6)
    text = build_result(request).calculation_explanation.en
    assert "- Industry EV/EBITDA Multiple: 6 (user-supplied)" in text
    assert "SAR 250,000 x 6 = SAR 1,500,000" in text


def test_multiples_default_multiplier_called_out():
    text = build_result(_make_request("multiples", revenue=1_000_000)).calculation_explanation.en
    assert "default multiplier of 0.8" in text
    assert "$1,000,000 x 0.8 = $800,000" in text


def test_summary_names_everything():
    result = build_result(_make_request("multiples", revenue=1_000_000))
    assert result.summary.en.startswith("Based on the Market Multiples, the estimated valuation for Acme Trading")
    assert "$800,000 USD" in result.summary.en
    assert "Technology sector in Saudi Arabia" in result.summary.en
    assert "المملكة العربية السعودية" in result.summary.ar
    assert "التكنولوجيا" in result.summary.ar


def test_render_is_repeatable():
    request = _make_request()
    _, trace = compute_valuation(request.method_id, request.financials, request.currency_code)
    lines = build_explanation_lines(request, trace)
    assert render_lines(lines, Language.AR, "USD") == render_lines(lines, Language.AR, "USD")


def test_book_explanation_for_very_large_balance_sheet():
    request = _make_request("book", total_assets=1e70, total_liabilities=0)
    result = build_result(request)
    assert result.estimated_value == 1e70
    assert "$10,000,000" in result.calculation_explanation.en
