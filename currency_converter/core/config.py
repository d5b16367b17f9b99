from functools import lru_cache
from typing import Dict

from pydantic_settings import BaseSettings, SettingsConfigDict

from currency_converter.models.constants import (
    BASE_CURRENCY,
    DEFAULT_FROM_CURRENCY,
    DEFAULT_RATES,
    DEFAULT_TO_CURRENCY,
)


class Settings(BaseSettings):
    """Application settings loaded from environment with defaults.

    Environment variable mapping follows pydantic's rules (e.g., APP_NAME, DEBUG,
    DISPLAY_LOCALE, STRICT_CURRENCY_CODES). RATES takes a JSON object.
    """

    # Basic app metadata
    app_name: str = "Currency Converter"
    debug: bool = False
    version: str = "0.1.0"

    # Rate table
    base_currency: str = BASE_CURRENCY
    rates: Dict[str, float] = dict(DEFAULT_RATES)

    # Starting pair shown before the user picks anything
    default_from_currency: str = DEFAULT_FROM_CURRENCY
    default_to_currency: str = DEFAULT_TO_CURRENCY

    # Display
    display_locale: str = "en_US"
    max_fraction_digits: int = 2

    # Unknown codes: reject (True) or look them up as rate 1.0 (False)
    strict_currency_codes: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    def init_post_load(self) -> None:
        """Normalize codes and check the default pair against the rate table."""
        self.base_currency = self.base_currency.upper()
        self.rates = {code.upper(): rate for code, rate in self.rates.items()}
        self.default_from_currency = self.default_from_currency.upper()
        self.default_to_currency = self.default_to_currency.upper()
        for code in (self.default_from_currency, self.default_to_currency):
            if code not in self.rates:
                raise ValueError(
                    f"Default currency '{code}' is not in the rate table. Allowed: {sorted(self.rates)}"
                )
        if self.max_fraction_digits < 0:
            raise ValueError("max_fraction_digits must be >= 0")


@lru_cache
def get_settings() -> Settings:
    settings = Settings()
    settings.init_post_load()
    return settings
