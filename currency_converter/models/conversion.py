from __future__ import annotations
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

ConversionStatus = Literal["ok", "empty", "invalid"]


class ConversionIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    amount: str = Field("", description="Raw amount text, digits with at most one '.'")
    from_currency: str = Field(..., alias="from", description="Source currency code")
    to_currency: str = Field(..., alias="to", description="Target currency code")

    @field_validator("from_currency", "to_currency")
    @classmethod
    def upper_code(cls, v: str) -> str:
        v = v.strip().upper()
        if not v:
            raise ValueError("currency code must not be empty")
        return v


class ConversionOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status: ConversionStatus
    amount: str
    from_currency: str = Field(..., alias="from")
    to_currency: str = Field(..., alias="to")
    result: Optional[float] = None
    formatted: Optional[str] = None
    message: str


class CurrenciesOut(BaseModel):
    base_currency: str
    currencies: List[str]
    default_from: str
    default_to: str


class RateTableOut(BaseModel):
    base_currency: str
    rates: Dict[str, float]
