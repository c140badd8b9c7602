import asyncio
import inspect
import logging
import time

from backend.config import AppConfig
from backend.models.reference import Language
from backend.models.request import ValuationRequest
from backend.models.valuations import DCFInputsUsed, ValuationResult
from backend.pipeline.step_narrate import build_calculation_explanation, build_summary
from backend.pipeline.step_validate import validate_request
from backend.pipeline.step_valuate import run_valuation

logger = logging.getLogger(__name__)


def build_result(request: ValuationRequest, language: Language = Language.EN) -> ValuationResult:
    """Validate, compute and narrate synchronously. Same request, same result.

    ``language`` selects the language of validation messages.
    """
    validate_request(request, language)
    value, trace = run_valuation(request)
    return _assemble(request, value, trace)


def _assemble(request: ValuationRequest, value: float, trace) -> ValuationResult:
    financials = request.financials
    dcf_inputs_used = None
    if request.method_id == "dcf" and financials.dcf is not None:
        dcf_inputs_used = DCFInputsUsed(
            projection_years=financials.dcf.projection_years,
            discount_rate=financials.dcf.discount_rate,
            terminal_growth_rate=financials.dcf.terminal_growth_rate,
        )
    benchmarks = financials.benchmarks()

    return ValuationResult(
        estimated_value=value,
        currency_code=request.currency_code,
        method_id=request.method_id,
        summary=build_summary(request, value),
        calculation_explanation=build_calculation_explanation(request, trace),
        dcf_inputs_used=dcf_inputs_used,
        benchmarks_used=None if benchmarks.is_empty() else benchmarks,
        trace=trace,
    )


class ValuationPipeline:
    def __init__(self, config: AppConfig):
        self.config = config

    async def run(self, request: ValuationRequest) -> ValuationResult:
        logger.info(f"=== Pipeline started for '{request.company_name}' ({request.method_id}) ===")

        await self._run_step("validate", validate_request, request, self.config.language)
        if self.config.simulated_delay_seconds > 0:
            await asyncio.sleep(self.config.simulated_delay_seconds)
        value, trace = await self._run_step("valuate", run_valuation, request)
        result = await self._run_step("narrate", _assemble, request, value, trace)

        logger.info(
            f"=== Pipeline completed for '{request.company_name}': "
            f"{result.estimated_value:,.0f} {result.currency_code} ==="
        )
        return result

    async def _run_step(self, name: str, fn, *args):
        start = time.time()
        logger.info(f"Step '{name}' started")
        try:
            result = await fn(*args) if inspect.iscoroutinefunction(fn) else fn(*args)
        except Exception as e:
            logger.error(f"Step '{name}' failed in {(time.time() - start) * 1000:.0f}ms: {e}")
            raise
        logger.info(f"Step '{name}' completed in {(time.time() - start) * 1000:.0f}ms")
        return result
