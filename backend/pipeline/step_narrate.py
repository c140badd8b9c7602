"""Step 3: Turn a valuation trace into the English and Arabic explanations.

The explanation is built once as a list of :class:`NarrativeLine` specs
(translation key plus typed parameters) and rendered per language, so both
narratives always describe the same steps with the same figures.

Rendered lines use a light markup that the report layer parses:
``**Heading**``, ``- bullet``, ``  - sub-bullet`` and blank separators.
"""
from dataclasses import dataclass, field
from typing import Literal, Optional, Union

from backend.i18n.formatting import Fixed, Money, Number, Percent, TemplateValue, format_value
from backend.i18n.translator import translate
from backend.models.reference import Language
from backend.models.request import ValuationRequest
from backend.models.valuations import BilingualText, BookValueTrace, DCFTrace, MultipleTrace
from backend.reference.catalog import country_name, method_label, sector_name

LineStyle = Literal["heading", "bullet", "sub_bullet", "text", "blank"]


@dataclass(frozen=True)
class Label:
    """A field label looked up under ``labels.<key>``."""
    key: str


@dataclass(frozen=True)
class MethodLabel:
    method_id: str


NarrativeParam = Union[TemplateValue, Label, MethodLabel]


@dataclass(frozen=True)
class NarrativeLine:
    key: Optional[str]
    params: dict = field(default_factory=dict)
    style: LineStyle = "text"


_BLANK = NarrativeLine(key=None, style="blank")


def _heading(key: str) -> NarrativeLine:
    return NarrativeLine(key, style="heading")


def _bullet(key: str, **params: NarrativeParam) -> NarrativeLine:
    return NarrativeLine(key, params, style="bullet")


def _sub_bullet(key: str, **params: NarrativeParam) -> NarrativeLine:
    return NarrativeLine(key, params, style="sub_bullet")


def _text(key: str, **params: NarrativeParam) -> NarrativeLine:
    return NarrativeLine(key, params)


def _dcf_lines(trace: DCFTrace) -> list[NarrativeLine]:
    k = "calculation.dcf."
    wacc = Fixed(trace.wacc)
    lines = [_text(k + "intro"), _BLANK, _heading(k + "wacc_title"), _text(k + "wacc_explanation")]
    if trace.user_country_risk_premium is not None:
        lines.append(_text(k + "crp_note", value=Percent(trace.user_country_risk_premium)))
    lines += [_BLANK, _heading(k + "fcf_title"), _text(k + "fcf_explanation"), _BLANK]

    lines += [
        _heading(k + "inputs_header"),
        _bullet(k + "projection_period", value=trace.projection_years),
        _bullet(k + "wacc", value=Percent(trace.discount_rate_percent)),
        _bullet(k + "terminal_growth", value=Percent(trace.input_terminal_growth_rate)),
    ]
    if trace.user_sector_growth_rate_used is not None:
        lines.append(_bullet(
            k + "sector_growth_used",
            value=Percent(trace.user_sector_growth_rate_used),
            inputValue=Percent(trace.input_terminal_growth_rate),
        ))
    lines.append(_bullet(k + "fcf_list"))
    for year in range(1, trace.projection_years + 1):
        entered = trace.fcf_inputs[year - 1] if year <= len(trace.fcf_inputs) else None
        lines.append(_sub_bullet(k + "fcf_year", year=year, value=Money(entered)))

    lines += [_BLANK, _heading(k + "step1_header"), _text(k + "step1_desc", pvSum=Money(trace.pv_projected_fcf_sum))]
    for year, pv in enumerate(trace.pv_fcfs, start=1):
        fcf = trace.fcf_inputs[year - 1] if year <= len(trace.fcf_inputs) else None
        lines.append(_sub_bullet(
            k + "pv_fcf_calc", year=year, fcf=Money(fcf or 0.0), waccDecimal=wacc, pvFcf=Money(pv),
        ))

    lines += [_BLANK, _heading(k + "step2_header"), _text(k + "step2_desc", lastFcf=Money(trace.last_fcf))]
    if trace.last_fcf_estimated:
        lines.append(_text(k + "last_fcf_estimated"))
    tv_key = "tv_fallback" if trace.terminal_value_fallback else "tv_ggm"
    lines.append(_text(
        k + tv_key,
        lastFcf=Money(trace.last_fcf),
        terminalGrowthDecimal=Fixed(trace.terminal_growth),
        waccDecimal=wacc,
        tv=Money(trace.terminal_value),
    ))

    lines += [
        _BLANK,
        _heading(k + "step3_header"),
        _text(
            k + "step3_desc",
            tv=Money(trace.terminal_value),
            waccDecimal=wacc,
            projectionYears=trace.projection_years,
            pvTv=Money(trace.pv_terminal_value),
        ),
        _BLANK,
        _heading(k + "step4_header"),
        _text(
            k + "step4_desc",
            pvSum=Money(trace.pv_projected_fcf_sum),
            pvTv=Money(trace.pv_terminal_value),
            ev=Money(trace.enterprise_value),
        ),
        _BLANK,
        _heading(k + "step5_header"),
        _text(
            k + "step5_desc",
            discountPercentage=Number(trace.liquidity_discount_percent),
            ev=Money(trace.enterprise_value),
            discountFactor=Number(trace.liquidity_discount_factor, 0, 2),
            discountedEv=Money(trace.discounted_ev),
        ),
        _BLANK,
        _heading(k + "step6_header"),
        _text(k + "step6_desc", finalValue=Money(trace.final_value)),
    ]
    if trace.floor_applied:
        lines.append(_text(k + "min_val_note", floor=Money(trace.floor)))
    return lines


def _book_lines(trace: BookValueTrace) -> list[NarrativeLine]:
    k = "calculation.book."
    lines = [
        _text(k + "intro"),
        _BLANK,
        _heading(k + "inputs_header"),
        _bullet(k + "total_assets", value=Money(trace.total_assets)),
        _bullet(k + "total_liabilities", value=Money(trace.total_liabilities)),
        _BLANK,
        _heading(k + "step1_header"),
        _text(
            k + "step1_desc",
            totalAssets=Money(trace.total_assets),
            totalLiabilities=Money(trace.total_liabilities),
            bookValue=Money(trace.book_value),
        ),
        _BLANK,
        _heading(k + "step2_header"),
        _text(k + "step2_desc", finalValue=Money(trace.final_value)),
    ]
    if trace.floor_applied:
        lines.append(_text(k + "min_val_note", floor=Money(trace.floor)))
    return lines


_RULE_BENCHMARKS = {
    "comps": ("user_industry_pe_ratio", "user_industry_ev_ebitda_multiple"),
    "multiples": ("user_industry_revenue_multiple",),
}


def _multiple_lines(trace: MultipleTrace, request: ValuationRequest) -> list[NarrativeLine]:
    k = "calculation.other."
    financials = request.financials
    lines = [
        _text(k + "intro"),
        _BLANK,
        _heading(k + "inputs_header"),
        _bullet(k + "input_line", label=Label("revenue"), value=Money(trace.revenue)),
        _bullet(k + "input_line", label=Label("ebitda"), value=Money(trace.ebitda)),
        _bullet(k + "input_line", label=Label("net_income"), value=Money(trace.net_income)),
    ]
    if trace.rule == "comps_heuristic":
        lines.append(_bullet(k + "input_line", label=Label("total_liabilities"), value=Money(trace.total_liabilities)))
    for name in _RULE_BENCHMARKS[trace.method]:
        benchmark = getattr(financials, name)
        if benchmark is not None:
            lines.append(_bullet(k + "benchmark_line", label=Label(name), value=Number(benchmark, 0, 2)))

    multiplier = Number(trace.multiplier, 0, 2)
    estimated = Money(trace.calculated_value)
    lines += [_BLANK, _heading(k + "step1_header")]
    if trace.rule == "pe_ratio":
        params = {"netIncome": Money(trace.base_value), "peRatio": multiplier}
    elif trace.rule == "ev_ebitda":
        params = {"ebitda": Money(trace.base_value), "evEbitdaMultiple": multiplier}
    elif trace.rule == "revenue_multiple":
        params = {"revenue": Money(trace.base_value), "revMultiple": multiplier}
    else:
        params = {"baseValue": Money(trace.base_value), "multiplier": multiplier}
    lines.append(_text(k + "step1_" + trace.rule, **params))
    if trace.rule == "comps_heuristic":
        lines.append(_text(k + "heuristic_note", multiplier=multiplier))
    elif trace.rule == "default_revenue_multiple":
        lines.append(_text(k + "default_multiple_note", multiplier=multiplier))

    step2_key = trace.rule if trace.rule in ("pe_ratio", "ev_ebitda", "revenue_multiple") else "generic"
    lines += [
        _BLANK,
        _heading(k + "step2_header"),
        _text(k + "step2_" + step2_key, estimatedValue=estimated, **params),
        _BLANK,
        _heading(k + "step3_header"),
        _text(k + "step3_desc", finalValue=Money(trace.final_value)),
    ]
    if trace.floor_applied:
        lines.append(_text(k + "min_val_note", floor=Money(trace.floor)))
    return lines


def build_explanation_lines(
    request: ValuationRequest,
    trace: Union[DCFTrace, BookValueTrace, MultipleTrace],
) -> list[NarrativeLine]:
    """Language-neutral explanation of one computation."""
    lines = [_text("calculation.introduction", methodName=MethodLabel(request.method_id)), _BLANK]
    if isinstance(trace, DCFTrace):
        lines += _dcf_lines(trace)
    elif isinstance(trace, BookValueTrace):
        lines += _book_lines(trace)
    else:
        lines += _multiple_lines(trace, request)
    lines += [_BLANK, _text("calculation.data_source_note")]
    return lines


def _render_param(value: NarrativeParam, language: Language, currency_code: str) -> str:
    if isinstance(value, Label):
        return translate(language, f"labels.{value.key}")
    if isinstance(value, MethodLabel):
        return method_label(value.method_id, language)
    return format_value(value, language, currency_code)


_STYLE_WRAPPERS = {
    "heading": "**{}**",
    "bullet": "- {}",
    "sub_bullet": "  - {}",
    "text": "{}",
}


def render_lines(lines: list[NarrativeLine], language: Language, currency_code: str) -> str:
    """Render line specs with ``language``'s string table, one line per spec."""
    rendered = []
    for line in lines:
        if line.style == "blank":
            rendered.append("")
            continue
        params = {name: _render_param(v, language, currency_code) for name, v in line.params.items()}
        rendered.append(_STYLE_WRAPPERS[line.style].format(translate(language, line.key, **params)))
    return "\n".join(rendered)


def build_calculation_explanation(
    request: ValuationRequest,
    trace: Union[DCFTrace, BookValueTrace, MultipleTrace],
) -> BilingualText:
    lines = build_explanation_lines(request, trace)
    return BilingualText(
        en=render_lines(lines, Language.EN, request.currency_code),
        ar=render_lines(lines, Language.AR, request.currency_code),
    )


def _summary(request: ValuationRequest, estimated_value: float, language: Language) -> str:
    return translate(
        language,
        "summary",
        methodName=method_label(request.method_id, language),
        companyName=request.company_name,
        value=format_value(Money(estimated_value), language, request.currency_code),
        currencyCode=request.currency_code,
        sectorName=sector_name(request.sector_id, language),
        countryName=country_name(request.country_code, language),
    )


def build_summary(request: ValuationRequest, estimated_value: float) -> BilingualText:
    return BilingualText(
        en=_summary(request, estimated_value, Language.EN),
        ar=_summary(request, estimated_value, Language.AR),
    )
