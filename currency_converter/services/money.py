"""Money / display formatting helpers.

Centralized so the API and any other caller render amounts identically:
at most N fraction digits (half-even, no trailing zeros) with the locale's
grouping and decimal separators.
"""

from __future__ import annotations
from decimal import Decimal, ROUND_HALF_EVEN, localcontext
from typing import Dict, Tuple

# locale -> (group separator, decimal separator)
_SEPARATORS: Dict[str, Tuple[str, str]] = {
    "en_US": (",", "."),
    "en_GB": (",", "."),
    "ja_JP": (",", "."),
    "ms_MY": (",", "."),
    "id_ID": (".", ","),
    "de_DE": (".", ","),
    "fr_FR": ("\u202f", ","),  # narrow no-break space
}

SUPPORTED_LOCALES = tuple(_SEPARATORS)


def separators_for(locale: str) -> Tuple[str, str]:
    try:
        return _SEPARATORS[locale.replace("-", "_")]
    except KeyError:
        raise ValueError(
            f"Unsupported locale '{locale}'. Allowed: {', '.join(SUPPORTED_LOCALES)}"
        ) from None


def round_display(value: float, max_fraction_digits: int = 2) -> Decimal:
    quantum = Decimal(1).scaleb(-max_fraction_digits)
    # exact binary value, as Java NumberFormat rounds it
    exact = Decimal(value)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, exact.adjusted() + max_fraction_digits + 2)
        return exact.quantize(quantum, rounding=ROUND_HALF_EVEN)


def format_amount(
    value: float, locale: str = "en_US", max_fraction_digits: int = 2
) -> str:
    group_sep, decimal_sep = separators_for(locale)
    rounded = round_display(value, max_fraction_digits)
    if rounded == 0:
        rounded = abs(rounded)  # no "-0"
    sign = "-" if rounded < 0 else ""
    text = f"{abs(rounded):f}"
    whole, _, frac = text.partition(".")
    frac = frac.rstrip("0")
    grouped = f"{int(whole):,}".replace(",", group_sep)
    if frac:
        return f"{sign}{grouped}{decimal_sep}{frac}"
    return f"{sign}{grouped}"


def format_result(
    value: float, currency: str, locale: str = "en_US", max_fraction_digits: int = 2
) -> str:
    return f"{format_amount(value, locale, max_fraction_digits)} {currency.upper()}"
