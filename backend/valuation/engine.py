import logging
import math

from backend.models.request import FinancialInput
from backend.models.valuations import ValuationTrace
from backend.reference.catalog import get_currency, get_method
from backend.valuation.book_value import compute_book_valuation
from backend.valuation.dcf import compute_dcf_valuation
from backend.valuation.multiples import compute_multiple_valuation

logger = logging.getLogger(__name__)

# Inputs that feed each method's arithmetic, reported when the result overflows.
_NUMERIC_INPUTS = {
    "dcf": ["discount_rate", "terminal_growth_rate", "projected_fcf"],
    "book": ["total_assets", "total_liabilities"],
    "comps": [
        "revenue", "ebitda", "net_income", "total_liabilities",
        "user_industry_pe_ratio", "user_industry_ev_ebitda_multiple",
    ],
    "multiples": ["revenue", "user_industry_revenue_multiple"],
}


class ValuationInputError(Exception):
    """Raised when required inputs for the selected method are missing or not numeric."""
    def __init__(self, message: str, missing_fields: list[str]):
        self.missing_fields = missing_fields
        super().__init__(message)


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def find_missing_inputs(method_id: str, financials: FinancialInput) -> list[str]:
    """Names of required inputs that are absent or not finite numbers for ``method_id``."""
    method = get_method(method_id)
    missing: list[str] = []

    dcf = financials.dcf
    for field in method.required:
        if field == "projected_fcf":
            if dcf is None or not dcf.projected_fcf:
                missing.append(field)
            elif any(v is not None and not _is_number(v) for v in dcf.projected_fcf):
                missing.append(field)
        elif field in ("projection_years", "discount_rate", "terminal_growth_rate"):
            value = getattr(dcf, field) if dcf is not None else None
            if not _is_number(value):
                missing.append(field)
        elif not _is_number(getattr(financials, field)):
            missing.append(field)

    return missing


def validate_financials(method_id: str, financials: FinancialInput) -> None:
    missing = find_missing_inputs(method_id, financials)
    if missing:
        raise ValuationInputError(
            f"Missing or non-numeric inputs for method '{method_id}': {', '.join(missing)}",
            missing,
        )

    if method_id == "dcf" and financials.dcf.discount_rate <= -100:
        raise ValuationInputError("Discount rate must be greater than -100%", ["discount_rate"])


def compute_valuation(
    method_id: str,
    financials: FinancialInput,
    currency_code: str,
) -> tuple[float, ValuationTrace]:
    """Run the selected valuation method. Returns (estimated_value, trace).

    Raises UnknownMethodError / UnknownCurrencyError for bad codes and
    ValuationInputError when required inputs are missing or too large to
    produce a finite value.
    """
    get_method(method_id)
    get_currency(currency_code)
    validate_financials(method_id, financials)

    try:
        if method_id == "dcf":
            value, trace = compute_dcf_valuation(financials.dcf, financials)
        elif method_id == "book":
            value, trace = compute_book_valuation(financials.total_assets, financials.total_liabilities)
        else:
            value, trace = compute_multiple_valuation(method_id, financials)
        if not math.isfinite(value):
            raise OverflowError(f"{method_id} produced {value}")
    except OverflowError as e:
        logger.warning(f"{method_id} valuation overflowed: {e}")
        raise ValuationInputError(
            f"Inputs are too large to compute a '{method_id}' valuation",
            list(_NUMERIC_INPUTS[method_id]),
        )

    if trace.floor_applied:
        logger.info(f"{method_id} floor of {trace.floor:,.0f} applied")
    return value, trace
