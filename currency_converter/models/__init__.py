"""Pydantic domain models for the currency converter."""

from .constants import (
    BASE_CURRENCY,
    DEFAULT_RATES,
)  # re-export
from .conversion import (
    ConversionIn,
    ConversionOut,
    ConversionStatus,
    CurrenciesOut,
    RateTableOut,
)

__all__ = [
    "BASE_CURRENCY",
    "DEFAULT_RATES",
    "ConversionIn",
    "ConversionOut",
    "ConversionStatus",
    "CurrenciesOut",
    "RateTableOut",
]
