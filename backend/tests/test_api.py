import pytest
from fastapi.testclient import TestClient

from backend.api.dependencies import ConfigStore, get_config_store
from backend.config import AppConfig
from backend.models.reference import Language
from backend.main import app


@pytest.fixture
def store():
    return ConfigStore(AppConfig(simulated_delay_seconds=0))


@pytest.fixture
def client(store):
    app.dependency_overrides[get_config_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


def _payload(**overrides):
    body = {
        "company_name": "Nile Foods",
        "country_code": "EG",
        "sector_id": "retail",
        "method_id": "comps",
        "currency_code": "EGP",
        "financials": {"ebitda": 250000, "user_industry_ev_ebitda_multiple": 6},
    }
    body.update(overrides)
    return body


def test_create_valuation(client):
    resp = client.post("/api/valuations", json=_payload())
    assert resp.status_code == 200
    data = resp.json()
    assert data["estimated_value"] == 1_500_000
    assert data["trace"]["rule"] == "ev_ebitda"
    assert data["benchmarks_used"]["user_industry_ev_ebitda_multiple"] == 6
    assert "EGP 1,500,000" in data["calculation_explanation"]["en"]


def test_missing_inputs_return_422(client):
    resp = client.post("/api/valuations", json=_payload(financials={"revenue": 100}))
    assert resp.status_code == 422
    assert resp.json()["detail"]["missing_fields"] == ["ebitda"]


def test_unknown_currency_returns_400(client):
    resp = client.post("/api/valuations", json=_payload(currency_code="egp"))
    assert resp.status_code == 400


def test_unknown_method_returns_400(client):
    resp = client.post("/api/valuations", json=_payload(method_id="venture"))
    assert resp.status_code == 400


def test_non_finite_input_rejected(client):
    resp = client.post("/api/valuations", json=_payload(financials={"ebitda": "Infinity"}))
    assert resp.status_code == 422


def test_report_in_arabic(client):
    resp = client.post("/api/valuations/report", params={"language": "ar"}, json=_payload())
    assert resp.status_code == 200
    data = resp.json()
    assert data["direction"] == "rtl"
    assert data["file_name"] == "ValuationReport-Nile_Foods.pdf"


def test_report_uses_configured_language(client, store):
    store.config = store.config.with_language(Language.AR)
    resp = client.post("/api/valuations/report", json=_payload())
    assert resp.json()["language"] == "ar"


def test_chart(client):
    resp = client.post("/api/valuations/chart", json=_payload())
    assert [p["name"] for p in resp.json()] == ["Annual Revenue", "EBITDA", "Estimated Value"]


def test_apply_form_update(client):
    body = {
        "financials": {"dcf": {"projection_years": 2, "projected_fcf": [10, 20]}},
        "update": {"kind": "set_dcf", "field": "projection_years", "value": 3},
    }
    resp = client.post("/api/valuations/form/apply", json=body)
    assert resp.status_code == 200
    assert resp.json()["dcf"]["projected_fcf"] == [10, 20, None]


def test_apply_form_update_parses_raw_text(client):
    body = {"update": {"kind": "set_scalar", "field": "revenue"}, "raw_value": "1,250,000"}
    resp = client.post("/api/valuations/form/apply", json=body)
    assert resp.json()["revenue"] == 1_250_000


def test_apply_form_update_rejects_bad_number(client):
    body = {"update": {"kind": "set_scalar", "field": "revenue"}, "raw_value": "lots"}
    resp = client.post("/api/valuations/form/apply", json=body)
    assert resp.status_code == 422
    assert resp.json()["detail"] == "Please enter a valid number."


def test_reference_endpoints(client):
    assert len(client.get("/api/reference/countries").json()) == 12
    assert client.get("/api/reference/methods/book/required-fields").json()["required_fields"] == [
        "total_assets", "total_liabilities",
    ]
    assert client.get("/api/reference/countries/QA/default-currency").json()["code"] == "QAR"
    assert client.get("/api/reference/countries/ZZ/default-currency").status_code == 404


def test_config_language_switch(client):
    assert client.get("/api/config").json()["direction"] == "ltr"
    resp = client.put("/api/config/language", json={"language": "ar"})
    assert resp.json() == {"language": "ar", "direction": "rtl", "theme": "light", "simulated_delay_seconds": 0}


def test_config_reload_reads_environment(client, monkeypatch):
    monkeypatch.setenv("VALUATION_LANGUAGE", "ar")
    monkeypatch.setenv("VALUATION_SIMULATED_DELAY", "0")
    assert client.post("/api/config/reload").json()["language"] == "ar"


@pytest.mark.parametrize("path", ["/api/valuations", "/api/valuations/report", "/api/valuations/chart"])
def test_validation_message_uses_configured_language(client, store, path):
    store.config = store.config.with_language(Language.AR)
    resp = client.post(path, json=_payload(financials={"revenue": 100}))
    assert resp.status_code == 422
    assert resp.json()["detail"] == {"message": "يرجى تعبئة جميع الحقول المطلوبة.", "missing_fields": ["ebitda"]}


def test_overflowing_inputs_return_422(client):
    body = _payload(method_id="multiples", financials={"revenue": 1e308, "user_industry_revenue_multiple": 10})
    resp = client.post("/api/valuations", json=body)
    assert resp.status_code == 422
    assert "revenue" in resp.json()["detail"]["missing_fields"]


def test_huge_book_value_is_formatted(client):
    body = _payload(method_id="book", financials={"total_assets": 1e70, "total_liabilities": 0})
    resp = client.post("/api/valuations", json=body)
    assert resp.status_code == 200
    assert resp.json()["estimated_value"] == 1e70


def test_required_field_labels_follow_language(client, store):
    resp = client.get("/api/reference/methods/book/required-fields", params={"language": "ar"})
    assert resp.json()["labels"] == {"total_assets": "إجمالي الأصول", "total_liabilities": "إجمالي الالتزامات"}
    store.config = store.config.with_language(Language.AR)
    resp = client.get("/api/reference/methods/multiples/required-fields")
    assert resp.json()["labels"] == {"revenue": "الإيرادات السنوية"}
