"""Export-document data for a valuation result.

Produces everything a PDF renderer needs, already localized: labels, formatted
figures, styled explanation lines, text direction and a suggested file name.
"""
from backend.i18n.formatting import format_currency, format_number, format_percent
from backend.i18n.translator import translate
from backend.models.reference import Language
from backend.models.report import DetailRow, ReportLine, ValuationReport
from backend.models.request import ValuationRequest
from backend.models.valuations import ValuationResult
from backend.reference.catalog import country_name, currency_label, method_label, sector_name
from backend.report.chart import build_chart_series

_PERCENT_BENCHMARKS = ("user_country_risk_premium", "user_sector_growth_rate")


def parse_explanation(text: str) -> list[ReportLine]:
    """Split a rendered explanation into styled lines; blank separators are dropped."""
    lines: list[ReportLine] = []
    for raw in text.split("\n"):
        if not raw.strip():
            continue
        if raw.startswith("**") and raw.endswith("**") and len(raw) > 4:
            lines.append(ReportLine(text=raw[2:-2], style="heading"))
        elif raw.startswith("  - "):
            lines.append(ReportLine(text=raw[4:], style="sub_bullet"))
        elif raw.startswith("- "):
            lines.append(ReportLine(text=raw[2:], style="bullet"))
        else:
            lines.append(ReportLine(text=raw, style="text"))
    return lines


def _details(request: ValuationRequest, language: Language) -> list[DetailRow]:
    def t(key: str) -> str:
        return translate(language, f"report.{key}")

    return [
        DetailRow(label=t("company_name"), value=request.company_name),
        DetailRow(label=t("country"), value=country_name(request.country_code, language)),
        DetailRow(label=t("sector"), value=sector_name(request.sector_id, language)),
        DetailRow(label=t("valuation_method"), value=method_label(request.method_id, language)),
        DetailRow(label=t("currency"), value=currency_label(request.currency_code, language)),
    ]


def _dcf_inputs(result: ValuationResult, language: Language) -> list[str]:
    used = result.dcf_inputs_used
    if used is None:
        return []
    return [
        translate(language, "report.dcf_projection_years", value=format_number(used.projection_years, language)),
        translate(language, "report.dcf_discount_rate", value=format_percent(used.discount_rate, language, 1, 1)),
        translate(language, "report.dcf_terminal_growth_rate", value=format_percent(used.terminal_growth_rate, language, 1, 1)),
    ]


def _benchmarks(result: ValuationResult, language: Language) -> list[str]:
    if result.benchmarks_used is None:
        return []
    rows = []
    for name, value in result.benchmarks_used.model_dump().items():
        if value is None:
            continue
        if name in _PERCENT_BENCHMARKS:
            shown = format_percent(value, language, 1, 2)
        else:
            shown = format_number(value, language, 0, 2)
        rows.append(f"{translate(language, f'labels.{name}')}: {shown}")
    return rows


def report_file_name(company_name: str) -> str:
    return f"ValuationReport-{company_name.replace(' ', '_')}.pdf"


def build_report(request: ValuationRequest, result: ValuationResult, language: Language) -> ValuationReport:
    dcf_inputs = _dcf_inputs(result, language)
    benchmarks = _benchmarks(result, language)

    return ValuationReport(
        language=language,
        direction=language.direction,
        alignment="right" if language == Language.AR else "left",
        title=translate(language, "report.title"),
        company_name=request.company_name,
        details_title=translate(language, "report.company_details"),
        details=_details(request, language),
        estimated_value_label=translate(language, "report.estimated_value"),
        estimated_value=result.estimated_value,
        estimated_value_display=format_currency(result.estimated_value, result.currency_code, language),
        dcf_inputs_title=translate(language, "report.dcf_inputs_title") if dcf_inputs else None,
        dcf_inputs=dcf_inputs,
        benchmarks_title=translate(language, "report.benchmarks_title") if benchmarks else None,
        benchmarks=benchmarks,
        summary_title=translate(language, "report.summary"),
        summary=result.summary.for_language(language),
        chart_title=translate(language, "report.chart"),
        chart=build_chart_series(request, result, language),
        calculation_title=translate(language, "report.calculation_title"),
        calculation_lines=parse_explanation(result.calculation_explanation.for_language(language)),
        disclaimer=translate(language, "report.ifrs_compliance_note"),
        file_name=report_file_name(request.company_name),
    )
