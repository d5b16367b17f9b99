from __future__ import annotations

"""Immutable rate table.

Every rate is "units of currency per 1 unit of base currency", so a table of
N entries covers all N*N conversion pairs by going through the base.
"""
import math
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Tuple

from currency_converter.core.errors import RateTableError, UnknownCurrencyError
from currency_converter.models.constants import BASE_CURRENCY


class RateTable(Mapping[str, float]):
    """Read-only code -> rate mapping, validated on construction."""

    __slots__ = ("_base_currency", "_rates")

    def __init__(self, rates: Mapping[str, float], base_currency: str = BASE_CURRENCY):
        base = base_currency.upper()
        normalized: Dict[str, float] = {}
        for code, rate in rates.items():
            code = code.strip().upper()
            if not code:
                raise RateTableError("currency code must not be empty")
            if code in normalized:
                raise RateTableError(f"duplicate currency code '{code}'")
            try:
                rate = float(rate)
            except (TypeError, ValueError) as e:
                raise RateTableError(f"rate for {code} is not a number: {rate!r}") from e
            if not math.isfinite(rate) or rate <= 0:
                raise RateTableError(f"rate for {code} must be positive, got {rate}")
            normalized[code] = rate
        if base not in normalized:
            raise RateTableError(f"base currency {base} missing from rate table")
        if normalized[base] != 1.0:
            raise RateTableError(
                f"base currency {base} must map to 1.0, got {normalized[base]}"
            )
        self._base_currency = base
        self._rates: Mapping[str, float] = MappingProxyType(normalized)

    # Mapping protocol ---------------------------------------------
    def __getitem__(self, code: str) -> float:
        if not isinstance(code, str):
            raise KeyError(code)
        return self._rates[code.upper()]

    def __iter__(self) -> Iterator[str]:
        return iter(self._rates)

    def __len__(self) -> int:
        return len(self._rates)

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and code.upper() in self._rates

    def __repr__(self) -> str:
        return f"RateTable(base_currency={self._base_currency!r}, rates={dict(self._rates)!r})"

    # Helpers ------------------------------------------------------
    @property
    def base_currency(self) -> str:
        return self._base_currency

    @property
    def codes(self) -> Tuple[str, ...]:
        return tuple(self._rates)

    def require(self, code: str) -> float:
        """Rate for code, raising UnknownCurrencyError when it is not listed."""
        try:
            return self[code]
        except KeyError:
            raise UnknownCurrencyError(code.upper(), self.codes) from None


def build_rate_table(settings) -> RateTable:  # type: ignore[no-untyped-def]
    return RateTable(settings.rates, settings.base_currency)
