from pydantic import BaseModel, Field
from typing import Literal, Optional

from backend.models.reference import Language


class ChartPoint(BaseModel):
    name: str
    value: float
    fill: str


class DetailRow(BaseModel):
    label: str
    value: str


class ReportLine(BaseModel):
    text: str
    style: Literal["heading", "bullet", "sub_bullet", "text"] = "text"


class ValuationReport(BaseModel):
    language: Language
    direction: str = Field(..., description="'ltr' or 'rtl'")
    alignment: str = Field(..., description="'left' or 'right'")
    title: str
    company_name: str
    details_title: str
    details: list[DetailRow] = Field(default_factory=list)
    estimated_value_label: str
    estimated_value: float
    estimated_value_display: str
    dcf_inputs_title: Optional[str] = None
    dcf_inputs: list[str] = Field(default_factory=list)
    benchmarks_title: Optional[str] = None
    benchmarks: list[str] = Field(default_factory=list)
    summary_title: str
    summary: str
    chart_title: str
    chart: list[ChartPoint] = Field(default_factory=list)
    calculation_title: str
    calculation_lines: list[ReportLine] = Field(default_factory=list)
    disclaimer: str
    file_name: str
