import pytest
from backend.models.reference import Language
from backend.reference.catalog import (
    COUNTRIES, CURRENCIES, UnknownReferenceError,
    default_currency_for, display_name, get_currency, method_label, required_field_labels, required_fields,
)


def test_required_fields():
    assert required_fields("book") == ["total_assets", "total_liabilities"]
    assert required_fields("comps") == ["ebitda"]
    assert required_fields("multiples") == ["revenue"]
    assert "projected_fcf" in required_fields("dcf")


def test_default_currency():
    assert default_currency_for("SA").code == "SAR"
    assert default_currency_for("FR").code == "EUR"


def test_every_country_has_a_tabled_currency():
    codes = {c.code for c in CURRENCIES}
    assert all(country.default_currency_code in codes for country in COUNTRIES)


def test_display_names():
    assert display_name("country", "EG", Language.EN) == "Egypt"
    assert display_name("country", "EG", Language.AR) == "مصر"
    assert display_name("sector", "energy", Language.AR) == "الطاقة"
    assert display_name("currency", "USD", Language.EN) == "US Dollar ($)"
    assert method_label("book", Language.EN) == "Book Value"


def test_unknown_codes():
    with pytest.raises(UnknownReferenceError):
        default_currency_for("XX")
    with pytest.raises(UnknownReferenceError):
        display_name("sector", "mining", Language.EN)
    with pytest.raises(ValueError):
        display_name("planet", "EG", Language.EN)


def test_currency_code_must_be_three_uppercase_letters():
    assert get_currency("KWD").symbol == "KWD"
    with pytest.raises(UnknownReferenceError):
        get_currency("kwd")


def test_required_field_labels():
    assert required_field_labels("book", Language.EN) == {
        "total_assets": "Total Assets",
        "total_liabilities": "Total Liabilities",
    }
    assert required_field_labels("multiples", Language.AR) == {"revenue": "الإيرادات السنوية"}
    assert list(required_field_labels("dcf", Language.AR)) == required_fields("dcf")
    assert required_field_labels("dcf", Language.EN)["discount_rate"] == "Discount Rate (WACC)"
