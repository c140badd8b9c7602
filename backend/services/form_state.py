import logging
import math
from typing import Optional

from backend.models.request import DCFInput, FinancialInput
from backend.models.updates import FinancialUpdate, SetDCFField, SetProjectedFCFAt, SetScalarField

logger = logging.getLogger(__name__)

MAX_PROJECTION_YEARS = 10


class InvalidNumberError(ValueError):
    """Raised when form text cannot be read as a number."""
    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(f"Not a valid number: {raw!r}")


class InvalidUpdateError(ValueError):
    pass


def parse_numeric_input(raw: Optional[str]) -> Optional[float]:
    """Parse form text like '1,500,000', '$ 250000' or '(6,963)'. Empty text means no value."""
    if raw is None:
        return None
    s = raw.strip().replace("$", "").replace(",", "").replace("\xa0", "").strip()
    if not s:
        return None
    neg = s.startswith("(") and s.endswith(")")
    if neg:
        s = s[1:-1].strip()
    try:
        val = float(s)
    except ValueError:
        raise InvalidNumberError(raw)
    if not math.isfinite(val):
        raise InvalidNumberError(raw)
    return -val if neg else val


def _resize_fcf(current: list[Optional[float]], years: Optional[float]) -> tuple[Optional[int], list[Optional[float]]]:
    if years is None or years <= 0:
        return None, []
    if years != int(years):
        raise InvalidUpdateError(f"projection_years must be a whole number, got {years}")
    n = min(int(years), MAX_PROJECTION_YEARS)
    fcf = list(current[:n])
    fcf += [None] * (n - len(fcf))
    return n, fcf


def apply_update(financials: FinancialInput, update: FinancialUpdate) -> FinancialInput:
    """Return a copy of ``financials`` with one field changed."""
    if isinstance(update, SetScalarField):
        return financials.model_copy(update={update.field: update.value})

    dcf = financials.dcf or DCFInput()
    if isinstance(update, SetDCFField):
        if update.field == "projection_years":
            years, fcf = _resize_fcf(dcf.projected_fcf, update.value)
            new_dcf = dcf.model_copy(update={"projection_years": years, "projected_fcf": fcf})
            logger.debug(f"Projection years set to {years}; {len(fcf)} FCF slots")
        else:
            new_dcf = dcf.model_copy(update={update.field: update.value})
    elif isinstance(update, SetProjectedFCFAt):
        fcf = list(dcf.projected_fcf)
        if update.index >= len(fcf):
            fcf += [None] * (update.index + 1 - len(fcf))
        fcf[update.index] = update.value
        new_dcf = dcf.model_copy(update={"projected_fcf": fcf})
    else:
        raise InvalidUpdateError(f"Unsupported update: {update!r}")

    return financials.model_copy(update={"dcf": new_dcf})
