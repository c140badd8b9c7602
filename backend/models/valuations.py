from pydantic import BaseModel, ConfigDict, Field
from typing import Annotated, Literal, Optional, Union

from backend.models.reference import Language
from backend.models.request import BenchmarksUsed


class DCFTrace(BaseModel):
    model_config = ConfigDict(frozen=True)

    method: Literal["dcf"] = "dcf"
    projection_years: int
    fcf_inputs: list[Optional[float]] = Field(..., description="Projected FCF per year as entered (None = not entered)")
    discount_rate_percent: float
    wacc: float = Field(..., description="Discount rate as a decimal")
    input_terminal_growth_rate: float = Field(..., description="Terminal growth rate entered with the DCF inputs, %")
    terminal_growth: float = Field(..., description="Terminal growth actually applied, as a decimal")
    user_sector_growth_rate_used: Optional[float] = None
    user_country_risk_premium: Optional[float] = Field(None, description="Shown in the narrative only, never applied to the discount rate")
    pv_fcfs: list[float]
    pv_projected_fcf_sum: float
    last_fcf: float
    last_fcf_estimated: bool = False
    terminal_value: float
    terminal_value_fallback: bool = False
    pv_terminal_value: float
    enterprise_value: float
    liquidity_discount_factor: float
    liquidity_discount_percent: float
    discounted_ev: float
    floor: float
    floor_applied: bool
    final_value: float


class BookValueTrace(BaseModel):
    model_config = ConfigDict(frozen=True)

    method: Literal["book"] = "book"
    total_assets: float
    total_liabilities: float
    book_value: float
    floor: float
    floor_applied: bool
    final_value: float


class MultipleTrace(BaseModel):
    model_config = ConfigDict(frozen=True)

    method: Literal["comps", "multiples"]
    rule: Literal["pe_ratio", "ev_ebitda", "comps_heuristic", "revenue_multiple", "default_revenue_multiple"]
    revenue: Optional[float] = None
    ebitda: Optional[float] = None
    net_income: Optional[float] = None
    total_liabilities: Optional[float] = None
    base_value: float
    multiplier: float
    calculated_value: float
    floor: float
    floor_applied: bool
    final_value: float


ValuationTrace = Annotated[Union[DCFTrace, BookValueTrace, MultipleTrace], Field(discriminator="method")]


class BilingualText(BaseModel):
    model_config = ConfigDict(frozen=True)

    en: str
    ar: str

    def for_language(self, language: Language) -> str:
        return self.ar if language == Language.AR else self.en


class DCFInputsUsed(BaseModel):
    model_config = ConfigDict(frozen=True)

    projection_years: Optional[int] = None
    discount_rate: Optional[float] = None
    terminal_growth_rate: Optional[float] = None


class ValuationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    estimated_value: float = Field(..., ge=0)
    currency_code: str
    method_id: str
    summary: BilingualText
    calculation_explanation: BilingualText
    dcf_inputs_used: Optional[DCFInputsUsed] = None
    benchmarks_used: Optional[BenchmarksUsed] = None
    trace: ValuationTrace
