from pydantic import BaseModel, Field
from typing import Annotated, Literal, Optional, Union

ScalarField = Literal[
    "revenue",
    "ebitda",
    "net_income",
    "total_assets",
    "total_liabilities",
    "user_country_risk_premium",
    "user_sector_growth_rate",
    "user_industry_pe_ratio",
    "user_industry_ev_ebitda_multiple",
    "user_industry_revenue_multiple",
]

DCFField = Literal["projection_years", "discount_rate", "terminal_growth_rate"]


class SetScalarField(BaseModel):
    kind: Literal["set_scalar"] = "set_scalar"
    field: ScalarField
    value: Optional[float] = Field(None, allow_inf_nan=False)


class SetDCFField(BaseModel):
    kind: Literal["set_dcf"] = "set_dcf"
    field: DCFField
    value: Optional[float] = Field(None, allow_inf_nan=False)


class SetProjectedFCFAt(BaseModel):
    kind: Literal["set_projected_fcf"] = "set_projected_fcf"
    index: int = Field(..., ge=0, le=9, description="Zero-based projection year")
    value: Optional[float] = Field(None, allow_inf_nan=False)


FinancialUpdate = Annotated[
    Union[SetScalarField, SetDCFField, SetProjectedFCFAt],
    Field(discriminator="kind"),
]
