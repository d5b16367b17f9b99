"""Conversion service used by the API layer.

Wraps the pure engine with the rules a caller needs:
    - reject text that fails the amount input filter
    - reject unknown codes unless strict_currency_codes is off
    - tell "nothing entered yet" (empty) apart from "entered garbage" (invalid)
    - format the result for display

Called explicitly per request; nothing is recomputed implicitly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from currency_converter.core.config import Settings
from currency_converter.core.errors import InvalidAmountInputError
from currency_converter.models.constants import (
    MESSAGE_EMPTY,
    MESSAGE_INVALID,
    MESSAGE_OK,
)
from currency_converter.services.money import format_result, separators_for
from currency_converter.services.rates.conversion import convert, is_valid_amount_input
from currency_converter.services.rates.table import RateTable

logger = logging.getLogger("currency_converter.service")


@dataclass(frozen=True)
class ConversionOutcome:
    status: str
    amount: str
    from_currency: str
    to_currency: str
    result: Optional[float]
    formatted: Optional[str]
    message: str

    @property
    def ok(self) -> bool:
        return self.status == "ok"


class ConversionService:
    def __init__(self, table: RateTable, settings: Settings):
        self._table = table
        self._settings = settings
        separators_for(settings.display_locale)  # fail fast on a bad locale

    @property
    def table(self) -> RateTable:
        return self._table

    def default_pair(self) -> Tuple[str, str]:
        return (
            self._settings.default_from_currency,
            self._settings.default_to_currency,
        )

    def _check_code(self, code: str) -> str:
        code = code.strip().upper()
        if self._settings.strict_currency_codes:
            self._table.require(code)
        return code

    def convert(self, amount: str, from_code: str, to_code: str) -> ConversionOutcome:
        if not is_valid_amount_input(amount):
            raise InvalidAmountInputError(
                f"Amount must contain only digits and at most one '.', got {amount!r}"
            )
        from_code = self._check_code(from_code)
        to_code = self._check_code(to_code)

        if amount == "":
            return ConversionOutcome(
                status="empty",
                amount=amount,
                from_currency=from_code,
                to_currency=to_code,
                result=None,
                formatted=None,
                message=MESSAGE_EMPTY,
            )

        result = convert(amount, from_code, to_code, self._table)
        if result is None:
            logger.debug("unparseable amount %r", amount)
            return ConversionOutcome(
                status="invalid",
                amount=amount,
                from_currency=from_code,
                to_currency=to_code,
                result=None,
                formatted=None,
                message=MESSAGE_INVALID,
            )

        formatted = format_result(
            result,
            to_code,
            self._settings.display_locale,
            self._settings.max_fraction_digits,
        )
        logger.debug("converted %s %s -> %s", amount, from_code, formatted)
        return ConversionOutcome(
            status="ok",
            amount=amount,
            from_currency=from_code,
            to_currency=to_code,
            result=result,
            formatted=formatted,
            message=MESSAGE_OK,
        )
