import pytest
from fastapi.testclient import TestClient

from currency_converter.core.config import Settings
from currency_converter.main import create_app
from currency_converter.models.constants import DEFAULT_RATES
from currency_converter.services.converter import ConversionService
from currency_converter.services.rates.table import RateTable


def make_settings(**overrides) -> Settings:
    settings = Settings(**overrides)
    settings.init_post_load()
    return settings


@pytest.fixture
def settings_factory():
    return make_settings


@pytest.fixture
def table() -> RateTable:
    return RateTable(DEFAULT_RATES, "USD")


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def service(table: RateTable, settings: Settings) -> ConversionService:
    return ConversionService(table, settings)


@pytest.fixture
def client(settings: Settings) -> TestClient:
    return TestClient(create_app(settings_override=settings))
