from backend.models.request import ValuationRequest, FinancialInput, DCFInput, BenchmarksUsed
from backend.models.reference import Language, Country, Sector, Currency, ValuationMethodInfo
from backend.models.valuations import (
    DCFTrace, BookValueTrace, MultipleTrace, ValuationTrace,
    BilingualText, DCFInputsUsed, ValuationResult,
)
from backend.models.updates import SetScalarField, SetDCFField, SetProjectedFCFAt, FinancialUpdate
from backend.models.report import ChartPoint, DetailRow, ReportLine, ValuationReport

__all__ = [
    "ValuationRequest", "FinancialInput", "DCFInput", "BenchmarksUsed",
    "Language", "Country", "Sector", "Currency", "ValuationMethodInfo",
    "DCFTrace", "BookValueTrace", "MultipleTrace", "ValuationTrace",
    "BilingualText", "DCFInputsUsed", "ValuationResult",
    "SetScalarField", "SetDCFField", "SetProjectedFCFAt", "FinancialUpdate",
    "ChartPoint", "DetailRow", "ReportLine", "ValuationReport",
]
