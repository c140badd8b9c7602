import pytest

from backend.config import AppConfig
from backend.models.reference import Language
from backend.models.request import DCFInput, FinancialInput, ValuationRequest
from backend.pipeline.orchestrator import ValuationPipeline, build_result
from backend.reference.catalog import UnknownReferenceError
from backend.valuation.engine import ValuationInputError


def _make_request(**overrides):
    fields = dict(
        company_name="TestCorp",
        country_code="AE",
        sector_id="retail",
        method_id="book",
        currency_code="AED",
        financials=FinancialInput(total_assets=2_000_000, total_liabilities=500_000),
    )
    fields.update(overrides)
    return ValuationRequest(**fields)


@pytest.fixture
def pipeline():
    return ValuationPipeline(AppConfig(simulated_delay_seconds=0))


@pytest.mark.asyncio
async def test_pipeline_book_valuation(pipeline):
    result = await pipeline.run(_make_request())
    assert result.estimated_value == 1_500_000
    assert result.currency_code == "AED"
    assert result.method_id == "book"
    assert result.dcf_inputs_used is None
    assert result.benchmarks_used is None
    assert result.summary.en and result.summary.ar
    assert result.calculation_explanation.en and result.calculation_explanation.ar


@pytest.mark.asyncio
async def test_pipeline_matches_sync_build(pipeline):
    request = _make_request()
    assert await pipeline.run(request) == build_result(request)


@pytest.mark.asyncio
async def test_pipeline_dcf_records_inputs_and_benchmarks(pipeline):
    dcf = DCFInput(projection_years=2, discount_rate=12, terminal_growth_rate=3, projected_fcf=[50_000, 60_000])
    request = _make_request(
        method_id="dcf",
        financials=FinancialInput(dcf=dcf, user_country_risk_premium=2.5),
    )
    result = await pipeline.run(request)
    assert result.dcf_inputs_used.projection_years == 2
    assert result.dcf_inputs_used.discount_rate == 12
    assert result.benchmarks_used.user_country_risk_premium == 2.5
    assert result.trace.method == "dcf"


@pytest.mark.asyncio
async def test_result_does_not_depend_on_configured_language():
    request = _make_request()
    en = await ValuationPipeline(AppConfig(simulated_delay_seconds=0)).run(request)
    ar = await ValuationPipeline(AppConfig(simulated_delay_seconds=0, language=Language.AR)).run(request)
    assert en == ar


@pytest.mark.asyncio
async def test_missing_inputs_raise(pipeline):
    request = _make_request(financials=FinancialInput(total_assets=2_000_000))
    with pytest.raises(ValuationInputError) as exc:
        await pipeline.run(request)
    assert exc.value.missing_fields == ["total_liabilities"]
    assert str(exc.value) == "Please fill in all required fields."


@pytest.mark.asyncio
async def test_validation_message_follows_configured_language():
    pipeline = ValuationPipeline(AppConfig(simulated_delay_seconds=0, language=Language.AR))
    with pytest.raises(ValuationInputError) as exc:
        await pipeline.run(_make_request(financials=FinancialInput()))
    assert str(exc.value) == "يرجى تعبئة جميع الحقول المطلوبة."


@pytest.mark.asyncio
async def test_blank_selection_rejected(pipeline):
    with pytest.raises(ValuationInputError) as exc:
        await pipeline.run(_make_request(sector_id="  "))
    assert exc.value.missing_fields == ["sector_id"]


@pytest.mark.asyncio
async def test_fcf_count_must_match_projection_years(pipeline):
    dcf = DCFInput(projection_years=3, discount_rate=12, terminal_growth_rate=3, projected_fcf=[1, 2])
    with pytest.raises(ValuationInputError) as exc:
        await pipeline.run(_make_request(method_id="dcf", financials=FinancialInput(dcf=dcf)))
    assert exc.value.missing_fields == ["projected_fcf"]
    assert str(exc.value).startswith("DCF inputs")


@pytest.mark.asyncio
async def test_empty_fcf_entry_rejected(pipeline):
    dcf = DCFInput(projection_years=2, discount_rate=12, terminal_growth_rate=3, projected_fcf=[1, None])
    with pytest.raises(ValuationInputError):
        await pipeline.run(_make_request(method_id="dcf", financials=FinancialInput(dcf=dcf)))


@pytest.mark.asyncio
async def test_unknown_country_rejected(pipeline):
    with pytest.raises(UnknownReferenceError):
        await pipeline.run(_make_request(country_code="ZZ"))


def test_sync_build_validates_in_requested_language():
    request = _make_request(financials=FinancialInput(total_assets=2_000_000))
    with pytest.raises(ValuationInputError) as exc:
        build_result(request, Language.AR)
    assert str(exc.value) == "يرجى تعبئة جميع الحقول المطلوبة."
