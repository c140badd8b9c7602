from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from backend.api.dependencies import ConfigStore, get_config, get_config_store, get_pipeline
from backend.config import AppConfig
from backend.i18n.translator import translate
from backend.models.reference import Country, Currency, Language, Sector, ValuationMethodInfo
from backend.models.report import ChartPoint, ValuationReport
from backend.models.request import FinancialInput, ValuationRequest
from backend.models.updates import FinancialUpdate
from backend.models.valuations import ValuationResult
from backend.pipeline.orchestrator import ValuationPipeline, build_result
from backend.reference import catalog
from backend.reference.catalog import UnknownReferenceError
from backend.report.chart import build_chart_series
from backend.report.document import build_report
from backend.services.form_state import InvalidNumberError, InvalidUpdateError, apply_update, parse_numeric_input
from backend.valuation.engine import ValuationInputError

router = APIRouter(prefix="/api/valuations", tags=["valuations"])
reference_router = APIRouter(prefix="/api/reference", tags=["reference"])
config_router = APIRouter(prefix="/api/config", tags=["config"])


class ApplyUpdateRequest(BaseModel):
    financials: FinancialInput = FinancialInput()
    update: FinancialUpdate
    raw_value: Optional[str] = None


class LanguageUpdate(BaseModel):
    language: Language


class ConfigResponse(BaseModel):
    language: Language
    direction: str
    theme: str
    simulated_delay_seconds: float


def _to_http_error(e: Exception) -> HTTPException:
    if isinstance(e, ValuationInputError):
        return HTTPException(status_code=422, detail={"message": str(e), "missing_fields": e.missing_fields})
    return HTTPException(status_code=400, detail=str(e))


def _compute(request: ValuationRequest, language: Language) -> ValuationResult:
    try:
        return build_result(request, language)
    except (ValuationInputError, UnknownReferenceError) as e:
        raise _to_http_error(e)


@router.post("", response_model=ValuationResult)
async def create_valuation(
    request: ValuationRequest,
    pipeline: ValuationPipeline = Depends(get_pipeline),
):
    """Validate, compute and explain a valuation."""
    try:
        return await pipeline.run(request)
    except (ValuationInputError, UnknownReferenceError) as e:
        raise _to_http_error(e)


@router.post("/report", response_model=ValuationReport)
async def create_report(
    request: ValuationRequest,
    language: Optional[Language] = None,
    config: AppConfig = Depends(get_config),
):
    """Export-document data for the valuation, in the requested or configured language."""
    language = language or config.language
    result = _compute(request, language)
    return build_report(request, result, language)


@router.post("/chart", response_model=list[ChartPoint])
async def create_chart(
    request: ValuationRequest,
    language: Optional[Language] = None,
    config: AppConfig = Depends(get_config),
):
    language = language or config.language
    result = _compute(request, language)
    return build_chart_series(request, result, language)


@router.post("/form/apply", response_model=FinancialInput)
async def apply_form_update(body: ApplyUpdateRequest, config: AppConfig = Depends(get_config)):
    """Apply one field edit to the financial inputs. ``raw_value`` is form text and overrides ``update.value``."""
    update = body.update
    if body.raw_value is not None:
        try:
            update = update.model_copy(update={"value": parse_numeric_input(body.raw_value)})
        except InvalidNumberError:
            raise HTTPException(status_code=422, detail=translate(config.language, "validation.invalid_number"))
    try:
        return apply_update(body.financials, update)
    except InvalidUpdateError as e:
        raise HTTPException(status_code=422, detail=str(e))


@reference_router.get("/countries", response_model=list[Country])
async def list_countries():
    return catalog.COUNTRIES


@reference_router.get("/sectors", response_model=list[Sector])
async def list_sectors():
    return catalog.SECTORS


@reference_router.get("/currencies", response_model=list[Currency])
async def list_currencies():
    return catalog.CURRENCIES


@reference_router.get("/methods", response_model=list[ValuationMethodInfo])
async def list_methods():
    return catalog.VALUATION_METHODS


@reference_router.get("/methods/{method_id}/required-fields")
async def get_required_fields(
    method_id: str,
    language: Optional[Language] = None,
    config: AppConfig = Depends(get_config),
):
    """Required input ids for a method, with their labels in the requested or configured language."""
    try:
        return {
            "method_id": method_id,
            "required_fields": catalog.required_fields(method_id),
            "labels": catalog.required_field_labels(method_id, language or config.language),
        }
    except UnknownReferenceError as e:
        raise HTTPException(status_code=404, detail=str(e))


@reference_router.get("/countries/{country_code}/default-currency", response_model=Currency)
async def get_default_currency(country_code: str):
    try:
        return catalog.default_currency_for(country_code)
    except UnknownReferenceError as e:
        raise HTTPException(status_code=404, detail=str(e))


def _config_response(config: AppConfig) -> ConfigResponse:
    return ConfigResponse(
        language=config.language,
        direction=config.direction,
        theme=config.theme.value,
        simulated_delay_seconds=config.simulated_delay_seconds,
    )


@config_router.get("", response_model=ConfigResponse)
async def read_config(config: AppConfig = Depends(get_config)):
    return _config_response(config)


@config_router.put("/language", response_model=ConfigResponse)
async def set_language(body: LanguageUpdate, store: ConfigStore = Depends(get_config_store)):
    store.config = store.config.with_language(body.language)
    return _config_response(store.config)


@config_router.post("/reload", response_model=ConfigResponse)
async def reload_config(store: ConfigStore = Depends(get_config_store)):
    """Re-read the environment (and .env) into a fresh config."""
    store.config = store.config.reload()
    return _config_response(store.config)
