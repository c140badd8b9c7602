from enum import Enum
from pydantic import BaseModel, ConfigDict, Field


class Language(str, Enum):
    EN = "en"
    AR = "ar"

    @property
    def direction(self) -> str:
        return "rtl" if self is Language.AR else "ltr"


class Country(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    name: str
    name_ar: str
    default_currency_code: str


class Sector(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    name_ar: str


class Currency(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    name: str
    name_ar: str
    symbol: str


class ValuationMethodInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    name_ar: str
    description: str
    description_ar: str
    inputs: list[str] = Field(..., description="Input groups shown for this method")
    required: list[str] = Field(..., description="Fields that must be present before computing")
