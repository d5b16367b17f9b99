"""Domain constants for the converter.

Rates are units of each currency per 1 USD. Order matters: it is the order
currencies are listed to the user.
"""

from typing import Dict

BASE_CURRENCY = "USD"

DEFAULT_RATES: Dict[str, float] = {
    "USD": 1.0,  # base
    "IDR": 16450.75,
    "EUR": 0.93,
    "JPY": 159.80,
    "SGD": 1.35,
    "MYR": 4.71,
    "SAR": 3.75,
}

DEFAULT_FROM_CURRENCY = "USD"
DEFAULT_TO_CURRENCY = "IDR"

# Digits with at most one decimal point; empty is allowed.
AMOUNT_INPUT_PATTERN = r"^\d*\.?\d*$"

MESSAGE_OK = "Converted amount"
MESSAGE_EMPTY = "Enter an amount"
MESSAGE_INVALID = "Enter a valid amount"
