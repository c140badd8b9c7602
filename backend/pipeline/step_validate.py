import logging

from backend.i18n.translator import translate
from backend.models.reference import Language
from backend.models.request import ValuationRequest
from backend.reference.catalog import get_country, get_currency, get_method, get_sector
from backend.valuation.engine import ValuationInputError, find_missing_inputs, validate_financials

logger = logging.getLogger(__name__)


def _missing_selections(request: ValuationRequest) -> list[str]:
    missing = []
    for field in ("company_name", "country_code", "sector_id", "method_id", "currency_code"):
        if not getattr(request, field).strip():
            missing.append(field)
    return missing


def _dcf_form_problems(request: ValuationRequest) -> list[str]:
    """Projected FCF must have exactly one present entry per projection year."""
    dcf = request.financials.dcf
    if dcf is None or dcf.projection_years is None:
        return []
    fcfs = dcf.projected_fcf
    if len(fcfs) != dcf.projection_years or any(v is None for v in fcfs):
        return ["projected_fcf"]
    return []


def validate_request(request: ValuationRequest, language: Language = Language.EN) -> None:
    """Step 1: Check the request the way the input form does before any calculation.

    Raises ValuationInputError for missing selections or inputs and
    UnknownReferenceError for codes absent from the reference tables.
    """
    missing = _missing_selections(request)
    if missing:
        logger.error(f"Validation failed for '{request.company_name}': missing {missing}")
        raise ValuationInputError(translate(language, "validation.fill_fields"), missing)

    get_country(request.country_code)
    get_sector(request.sector_id)
    get_method(request.method_id)
    get_currency(request.currency_code)

    missing = find_missing_inputs(request.method_id, request.financials)
    if request.method_id == "dcf":
        missing += [f for f in _dcf_form_problems(request) if f not in missing]
        if missing:
            logger.error(f"DCF validation failed for '{request.company_name}': {missing}")
            raise ValuationInputError(translate(language, "validation.dcf_inputs"), missing)
    elif missing:
        logger.error(f"Validation failed for '{request.company_name}': missing {missing}")
        raise ValuationInputError(translate(language, "validation.fill_fields"), missing)

    validate_financials(request.method_id, request.financials)
