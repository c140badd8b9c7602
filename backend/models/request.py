from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class DCFInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    projection_years: Optional[int] = Field(None, ge=1, le=10, description="Number of explicit projection years")
    discount_rate: Optional[float] = Field(None, allow_inf_nan=False, description="Discount rate (WACC) as a percentage, e.g. 10 for 10%")
    terminal_growth_rate: Optional[float] = Field(None, allow_inf_nan=False, description="Terminal growth rate as a percentage, e.g. 2 for 2%")
    projected_fcf: list[Optional[float]] = Field(default_factory=list, description="Projected free cash flow for each year")


class BenchmarksUsed(BaseModel):
    model_config = ConfigDict(frozen=True)

    user_country_risk_premium: Optional[float] = None
    user_sector_growth_rate: Optional[float] = None
    user_industry_pe_ratio: Optional[float] = None
    user_industry_ev_ebitda_multiple: Optional[float] = None
    user_industry_revenue_multiple: Optional[float] = None

    def is_empty(self) -> bool:
        return all(v is None for v in self.model_dump().values())


class FinancialInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    revenue: Optional[float] = Field(None, allow_inf_nan=False, description="Latest annual revenue")
    ebitda: Optional[float] = Field(None, allow_inf_nan=False, description="Latest annual EBITDA")
    net_income: Optional[float] = Field(None, allow_inf_nan=False, description="Latest annual net income")
    total_assets: Optional[float] = Field(None, allow_inf_nan=False, description="Total assets from the balance sheet")
    total_liabilities: Optional[float] = Field(None, allow_inf_nan=False, description="Total liabilities from the balance sheet")
    dcf: Optional[DCFInput] = Field(None, description="DCF projection inputs")

    # User-provided benchmarks
    user_country_risk_premium: Optional[float] = Field(None, allow_inf_nan=False, description="Country risk premium, %")
    user_sector_growth_rate: Optional[float] = Field(None, allow_inf_nan=False, description="Sector growth rate, %; replaces the terminal growth rate")
    user_industry_pe_ratio: Optional[float] = Field(None, allow_inf_nan=False, description="Industry P/E ratio for comps")
    user_industry_ev_ebitda_multiple: Optional[float] = Field(None, allow_inf_nan=False, description="Industry EV/EBITDA multiple for comps")
    user_industry_revenue_multiple: Optional[float] = Field(None, allow_inf_nan=False, description="Industry revenue multiple for market multiples")

    def benchmarks(self) -> BenchmarksUsed:
        return BenchmarksUsed(
            user_country_risk_premium=self.user_country_risk_premium,
            user_sector_growth_rate=self.user_sector_growth_rate,
            user_industry_pe_ratio=self.user_industry_pe_ratio,
            user_industry_ev_ebitda_multiple=self.user_industry_ev_ebitda_multiple,
            user_industry_revenue_multiple=self.user_industry_revenue_multiple,
        )


class ValuationRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    company_name: str = Field(..., min_length=1, description="Name of the company being valued")
    country_code: str = Field(..., description="ISO country code, e.g. 'SA'")
    sector_id: str = Field(..., description="Sector id from the reference catalog")
    method_id: str = Field(..., description="Valuation method: 'dcf', 'book', 'comps' or 'multiples'")
    currency_code: str = Field(..., description="ISO currency code, e.g. 'SAR'")
    financials: FinancialInput = Field(default_factory=FinancialInput)
