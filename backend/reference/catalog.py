import re

from backend.i18n.translator import translate
from backend.models.reference import Country, Currency, Language, Sector, ValuationMethodInfo


class UnknownReferenceError(Exception):
    """Raised when a code or id is not present in the reference tables."""
    def __init__(self, kind: str, code: str):
        self.kind = kind
        self.code = code
        super().__init__(f"Unknown {kind}: {code!r}")


class UnknownMethodError(UnknownReferenceError):
    def __init__(self, code: str):
        super().__init__("valuation method", code)


class UnknownCurrencyError(UnknownReferenceError):
    def __init__(self, code: str):
        super().__init__("currency", code)


_CURRENCY_CODE = re.compile(r"^[A-Z]{3}$")

CURRENCIES: list[Currency] = [
    Currency(code="USD", name="US Dollar", name_ar="دولار أمريكي", symbol="$"),
    Currency(code="EUR", name="Euro", name_ar="يورو", symbol="€"),
    Currency(code="GBP", name="British Pound", name_ar="جنيه إسترليني", symbol="£"),
    Currency(code="SAR", name="Saudi Riyal", name_ar="ريال سعودي", symbol="SAR"),
    Currency(code="AED", name="UAE Dirham", name_ar="درهم إماراتي", symbol="AED"),
    Currency(code="EGP", name="Egyptian Pound", name_ar="جنيه مصري", symbol="EGP"),
    Currency(code="KWD", name="Kuwaiti Dinar", name_ar="دينار كويتي", symbol="KWD"),
    Currency(code="QAR", name="Qatari Riyal", name_ar="ريال قطري", symbol="QAR"),
    Currency(code="BHD", name="Bahraini Dinar", name_ar="دينار بحريني", symbol="BHD"),
    Currency(code="OMR", name="Omani Rial", name_ar="ريال عماني", symbol="OMR"),
    Currency(code="JOD", name="Jordanian Dinar", name_ar="دينار أردني", symbol="JOD"),
]

COUNTRIES: list[Country] = [
    Country(code="SA", name="Saudi Arabia", name_ar="المملكة العربية السعودية", default_currency_code="SAR"),
    Country(code="AE", name="United Arab Emirates", name_ar="الإمارات العربية المتحدة", default_currency_code="AED"),
    Country(code="EG", name="Egypt", name_ar="مصر", default_currency_code="EGP"),
    Country(code="KW", name="Kuwait", name_ar="الكويت", default_currency_code="KWD"),
    Country(code="QA", name="Qatar", name_ar="قطر", default_currency_code="QAR"),
    Country(code="BH", name="Bahrain", name_ar="البحرين", default_currency_code="BHD"),
    Country(code="OM", name="Oman", name_ar="عُمان", default_currency_code="OMR"),
    Country(code="JO", name="Jordan", name_ar="الأردن", default_currency_code="JOD"),
    Country(code="US", name="United States", name_ar="الولايات المتحدة", default_currency_code="USD"),
    Country(code="GB", name="United Kingdom", name_ar="المملكة المتحدة", default_currency_code="GBP"),
    Country(code="DE", name="Germany", name_ar="ألمانيا", default_currency_code="EUR"),
    Country(code="FR", name="France", name_ar="فرنسا", default_currency_code="EUR"),
]

SECTORS: list[Sector] = [
    Sector(id="technology", name="Technology", name_ar="التكنولوجيا"),
    Sector(id="healthcare", name="Healthcare", name_ar="الرعاية الصحية"),
    Sector(id="financial_services", name="Financial Services", name_ar="الخدمات المالية"),
    Sector(id="real_estate", name="Real Estate", name_ar="العقارات"),
    Sector(id="energy", name="Energy", name_ar="الطاقة"),
    Sector(id="retail", name="Retail & Consumer", name_ar="التجزئة والمستهلك"),
    Sector(id="manufacturing", name="Manufacturing", name_ar="التصنيع"),
    Sector(id="telecommunications", name="Telecommunications", name_ar="الاتصالات"),
    Sector(id="hospitality", name="Hospitality & Tourism", name_ar="الضيافة والسياحة"),
    Sector(id="other", name="Other", name_ar="أخرى"),
]

VALUATION_METHODS: list[ValuationMethodInfo] = [
    ValuationMethodInfo(
        id="dcf",
        name="Discounted Cash Flow (DCF)",
        name_ar="التدفقات النقدية المخصومة",
        description="Values the company as the present value of its projected free cash flows plus a terminal value.",
        description_ar="يقيّم الشركة بالقيمة الحالية لتدفقاتها النقدية الحرة المتوقعة مضافًا إليها القيمة النهائية.",
        inputs=["dcf_specific", "benchmark_inputs"],
        required=["projection_years", "discount_rate", "terminal_growth_rate", "projected_fcf"],
    ),
    ValuationMethodInfo(
        id="book",
        name="Book Value",
        name_ar="القيمة الدفترية",
        description="Values the company as total assets minus total liabilities.",
        description_ar="يقيّم الشركة بإجمالي الأصول مطروحًا منه إجمالي الالتزامات.",
        inputs=["total_assets", "total_liabilities"],
        required=["total_assets", "total_liabilities"],
    ),
    ValuationMethodInfo(
        id="comps",
        name="Comparable Companies",
        name_ar="الشركات المماثلة",
        description="Applies industry P/E or EV/EBITDA multiples to the company's own earnings.",
        description_ar="يطبق مضاعفات الربحية أو قيمة المنشأة إلى الأرباح قبل الفوائد والضرائب والإهلاك على أرباح الشركة.",
        inputs=["revenue", "ebitda", "net_income", "total_liabilities", "benchmark_inputs"],
        required=["ebitda"],
    ),
    ValuationMethodInfo(
        id="multiples",
        name="Market Multiples",
        name_ar="مضاعفات السوق",
        description="Applies a revenue multiple to the company's annual revenue.",
        description_ar="يطبق مضاعف الإيرادات على الإيرادات السنوية للشركة.",
        inputs=["revenue", "ebitda", "benchmark_inputs"],
        required=["revenue"],
    ),
]

_COUNTRIES_BY_CODE = {c.code: c for c in COUNTRIES}
_CURRENCIES_BY_CODE = {c.code: c for c in CURRENCIES}
_SECTORS_BY_ID = {s.id: s for s in SECTORS}
_METHODS_BY_ID = {m.id: m for m in VALUATION_METHODS}


def get_country(code: str) -> Country:
    country = _COUNTRIES_BY_CODE.get(code)
    if country is None:
        raise UnknownReferenceError("country", code)
    return country


def get_sector(sector_id: str) -> Sector:
    sector = _SECTORS_BY_ID.get(sector_id)
    if sector is None:
        raise UnknownReferenceError("sector", sector_id)
    return sector


def get_currency(code: str) -> Currency:
    if not isinstance(code, str) or not _CURRENCY_CODE.match(code):
        raise UnknownCurrencyError(code)
    currency = _CURRENCIES_BY_CODE.get(code)
    if currency is None:
        raise UnknownCurrencyError(code)
    return currency


def get_method(method_id: str) -> ValuationMethodInfo:
    method = _METHODS_BY_ID.get(method_id)
    if method is None:
        raise UnknownMethodError(method_id)
    return method


def required_fields(method_id: str) -> list[str]:
    return list(get_method(method_id).required)


def required_field_labels(method_id: str, language: Language) -> dict[str, str]:
    """Required input ids for ``method_id`` mapped to their form labels in ``language``."""
    return {field: translate(language, f"labels.{field}") for field in required_fields(method_id)}


def default_currency_for(country_code: str) -> Currency:
    """Default currency for a country, or the first listed currency if the country's is not tabled."""
    country = get_country(country_code)
    return _CURRENCIES_BY_CODE.get(country.default_currency_code, CURRENCIES[0])


def _localized(item, language: Language) -> str:
    return item.name_ar if language == Language.AR else item.name


def country_name(code: str, language: Language) -> str:
    return _localized(get_country(code), language)


def sector_name(sector_id: str, language: Language) -> str:
    return _localized(get_sector(sector_id), language)


def method_label(method_id: str, language: Language) -> str:
    return _localized(get_method(method_id), language)


def currency_label(code: str, language: Language) -> str:
    """Currency name with its symbol, e.g. 'Saudi Riyal (SAR)'."""
    currency = get_currency(code)
    return f"{_localized(currency, language)} ({currency.symbol})"


_DISPLAY_LOOKUPS = {
    "country": country_name,
    "sector": sector_name,
    "method": method_label,
    "currency": currency_label,
}


def display_name(kind: str, code: str, language: Language) -> str:
    lookup = _DISPLAY_LOOKUPS.get(kind)
    if lookup is None:
        raise ValueError(f"Unknown reference kind: {kind!r}")
    return lookup(code, language)
