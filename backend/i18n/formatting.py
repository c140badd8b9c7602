"""Locale-aware number formatting for the two supported languages.

English follows en-US conventions (``1,500,000.5``). Arabic follows ar-EG
conventions: Arabic-Indic digits, ``٬`` as the group separator and ``٫`` as
the decimal separator (``١٬٥٠٠٬٠٠٠٫٥``).

Narrative templates receive typed values (:class:`Money`, :class:`Percent`,
:class:`Number`, :class:`Fixed`) so one line definition renders correctly in
either language.
"""
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Optional, Union

from backend.models.reference import Language
from backend.reference.catalog import get_currency

NOT_AVAILABLE = "N/A"

_ARABIC_DIGITS = str.maketrans("0123456789", "٠١٢٣٤٥٦٧٨٩")
_AR_GROUP = "٬"
_AR_DECIMAL = "٫"
_AR_PERCENT = "٪"


def _localize_digits(text: str, language: Language) -> str:
    if language != Language.AR:
        return text
    text = text.replace(",", _AR_GROUP).replace(".", _AR_DECIMAL)
    return text.translate(_ARABIC_DIGITS)


def format_number(
    value: Optional[float],
    language: Language,
    min_decimals: int = 0,
    max_decimals: int = 3,
) -> str:
    """Group digits and keep between ``min_decimals`` and ``max_decimals`` fraction digits."""
    if value is None:
        return NOT_AVAILABLE
    exact = Decimal(repr(float(value)))
    quantum = Decimal(1).scaleb(-max_decimals)
    with localcontext() as ctx:
        # quantize needs every integer digit plus the kept fraction digits
        ctx.prec = max(60, exact.adjusted() + max_decimals + 2)
        rounded = exact.quantize(quantum, rounding=ROUND_HALF_UP)
    if rounded == 0:
        rounded = abs(rounded)
    text = f"{rounded:,.{max_decimals}f}"
    if "." in text:
        whole, frac = text.split(".")
        frac = frac.rstrip("0").ljust(min_decimals, "0")
        text = f"{whole}.{frac}" if frac else whole
    return _localize_digits(text, language)


def format_currency(value: Optional[float], currency_code: str, language: Language) -> str:
    """Whole-unit currency figure, e.g. '$1,500,000', 'SAR 1,500,000' or '١٬٥٠٠٬٠٠٠ SAR'."""
    if value is None:
        return NOT_AVAILABLE
    symbol = get_currency(currency_code).symbol
    amount = format_number(abs(value), language, 0, 0)
    sign = "-" if value < 0 and amount not in ("0", "٠") else ""
    if language == Language.AR:
        return f"{sign}{amount} {symbol}"
    if symbol.isalpha():
        return f"{sign}{symbol} {amount}"
    return f"{sign}{symbol}{amount}"


def format_percent(
    value: Optional[float],
    language: Language,
    min_decimals: int = 1,
    max_decimals: int = 2,
) -> str:
    """Percentage figure given in percent units (10 -> '10.0%')."""
    if value is None:
        return NOT_AVAILABLE
    sign = _AR_PERCENT if language == Language.AR else "%"
    return f"{format_number(value, language, min_decimals, max_decimals)}{sign}"


def format_fixed(value: float, places: int = 4) -> str:
    """Plain fixed-point rendering used inside formulas, e.g. 0.1000."""
    return f"{value:.{places}f}"


@dataclass(frozen=True)
class Money:
    value: Optional[float]


@dataclass(frozen=True)
class Percent:
    value: Optional[float]
    min_decimals: int = 1
    max_decimals: int = 2


@dataclass(frozen=True)
class Number:
    value: Optional[float]
    min_decimals: int = 0
    max_decimals: int = 3


@dataclass(frozen=True)
class Fixed:
    value: float
    places: int = 4


TemplateValue = Union[Money, Percent, Number, Fixed, str, int]


def format_value(value: TemplateValue, language: Language, currency_code: str) -> str:
    if isinstance(value, Money):
        return format_currency(value.value, currency_code, language)
    if isinstance(value, Percent):
        return format_percent(value.value, language, value.min_decimals, value.max_decimals)
    if isinstance(value, Number):
        return format_number(value.value, language, value.min_decimals, value.max_decimals)
    if isinstance(value, Fixed):
        return format_fixed(value.value, value.places)
    if isinstance(value, int) and not isinstance(value, bool):
        return format_number(value, language)
    return str(value)
