import logging

from backend.models.request import ValuationRequest
from backend.models.valuations import ValuationTrace
from backend.valuation.engine import compute_valuation

logger = logging.getLogger(__name__)


def run_valuation(request: ValuationRequest) -> tuple[float, ValuationTrace]:
    """Step 2: Run the selected method over the request's financials."""
    value, trace = compute_valuation(request.method_id, request.financials, request.currency_code)
    logger.info(
        f"{request.method_id} result for '{request.company_name}': "
        f"{value:,.0f} {request.currency_code}"
    )
    if getattr(trace, "terminal_value_fallback", False):
        logger.warning("Terminal growth rate >= discount rate; used 10x final-year FCF for terminal value")
    return value, trace
