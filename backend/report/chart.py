from backend.i18n.translator import translate
from backend.models.reference import Language
from backend.models.report import ChartPoint
from backend.models.request import ValuationRequest
from backend.models.valuations import ValuationResult

ESTIMATED_VALUE_FILL = "#3b82f6"
REVENUE_FILL = "#8884d8"
EBITDA_FILL = "#82ca9d"


def _fcf_fill(index: int) -> str:
    return f"hsl({200 + index * 20}, 70%, 60%)"


def build_chart_series(
    request: ValuationRequest,
    result: ValuationResult,
    language: Language,
) -> list[ChartPoint]:
    """Bar-chart data: projected FCF per year for DCF, otherwise revenue and EBITDA, then the estimate."""
    financials = request.financials
    points: list[ChartPoint] = []

    if request.method_id == "dcf" and financials.dcf is not None:
        for i, fcf in enumerate(financials.dcf.projected_fcf):
            points.append(ChartPoint(
                name=translate(language, "labels.projected_fcf_year", year=i + 1),
                value=fcf or 0.0,
                fill=_fcf_fill(i),
            ))
    else:
        points.append(ChartPoint(name=translate(language, "labels.revenue"), value=financials.revenue or 0.0, fill=REVENUE_FILL))
        points.append(ChartPoint(name=translate(language, "labels.ebitda"), value=financials.ebitda or 0.0, fill=EBITDA_FILL))

    points.append(ChartPoint(
        name=translate(language, "labels.estimated_value"),
        value=result.estimated_value,
        fill=ESTIMATED_VALUE_FILL,
    ))
    return points
