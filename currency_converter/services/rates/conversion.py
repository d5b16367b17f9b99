from __future__ import annotations

import logging
import math
import re
from typing import Optional

from currency_converter.models.constants import AMOUNT_INPUT_PATTERN
from .table import RateTable

"""Conversion engine.

Pure functions over an injected RateTable:
    - is_valid_amount_input(): the keystroke filter (digits, at most one '.')
    - parse_amount(): string -> float, or None when there is nothing usable
    - convert(): amount / rate[from] * rate[to]

No I/O and no shared state, so callers may invoke these from any thread.
Negative amounts never pass the input filter; if one reaches convert() it is
converted as-is since both operations preserve sign.
"""

logger = logging.getLogger("currency_converter.conversion")

# ASCII only: \d must not match other scripts' digits
_AMOUNT_RE = re.compile(AMOUNT_INPUT_PATTERN, re.ASCII)

# Rate used for a code missing from the table
FALLBACK_RATE = 1.0


def is_valid_amount_input(text: str) -> bool:
    return _AMOUNT_RE.fullmatch(text) is not None


def parse_amount(amount: str) -> Optional[float]:
    text = amount.strip()
    if not text:
        return None
    # float() also takes "1_000" and non-ASCII digits
    if "_" in text or not text.isascii():
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def _rate_or_fallback(table: RateTable, code: str) -> float:
    try:
        return table[code]
    except KeyError:
        logger.warning(
            "unknown currency %s, falling back to rate %s", code, FALLBACK_RATE
        )
        return FALLBACK_RATE


def convert(
    amount: str, from_code: str, to_code: str, table: RateTable
) -> Optional[float]:
    """Convert amount between two codes via the table's base currency.

    Returns None when amount does not parse. Unknown codes are looked up as
    rate 1.0; callers that want a hard error check codes first
    (see RateTable.require).
    """
    value = parse_amount(amount)
    if value is None:
        return None
    from_rate = _rate_or_fallback(table, from_code)
    to_rate = _rate_or_fallback(table, to_code)
    result = (value / from_rate) * to_rate
    if not math.isfinite(result):
        return None
    return result
