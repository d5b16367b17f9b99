import pytest

from currency_converter.core.errors import InvalidAmountInputError, UnknownCurrencyError
from currency_converter.models.constants import MESSAGE_EMPTY, MESSAGE_INVALID, MESSAGE_OK
from currency_converter.services.converter import ConversionService


def test_successful_conversion(service: ConversionService) -> None:
    outcome = service.convert("100", "usd", "idr")
    assert outcome.ok
    assert outcome.status == "ok"
    assert outcome.from_currency == "USD"
    assert outcome.to_currency == "IDR"
    assert outcome.result == pytest.approx(1645075.0)
    assert outcome.formatted == "1,645,075 IDR"
    assert outcome.message == MESSAGE_OK


def test_small_result_is_rounded_for_display(service: ConversionService) -> None:
    outcome = service.convert("100", "IDR", "USD")
    assert outcome.result == pytest.approx(0.006079, rel=1e-3)
    assert outcome.formatted == "0.01 USD"


def test_empty_amount_is_not_an_error(service: ConversionService) -> None:
    outcome = service.convert("", "USD", "EUR")
    assert outcome.status == "empty"
    assert outcome.result is None
    assert outcome.formatted is None
    assert outcome.message == MESSAGE_EMPTY
    assert not outcome.ok


def test_lone_decimal_point_is_invalid(service: ConversionService) -> None:
    outcome = service.convert(".", "USD", "EUR")
    assert outcome.status == "invalid"
    assert outcome.result is None
    assert outcome.message == MESSAGE_INVALID


@pytest.mark.parametrize(
    "amount", ["abc", "-5", "1.2.3", "1e3", "1_000", "\uff11\uff10\uff10", "\u0661\u0660\u0660"]
)
def test_filtered_input_is_rejected(service: ConversionService, amount: str) -> None:
    with pytest.raises(InvalidAmountInputError):
        service.convert(amount, "USD", "EUR")


def test_unknown_code_rejected_in_strict_mode(service: ConversionService) -> None:
    with pytest.raises(UnknownCurrencyError):
        service.convert("10", "GBP", "EUR")
    with pytest.raises(UnknownCurrencyError):
        service.convert("10", "EUR", "GBP")


def test_unknown_code_falls_back_when_not_strict(table, settings_factory) -> None:
    svc = ConversionService(table, settings_factory(strict_currency_codes=False))
    outcome = svc.convert("10", "GBP", "EUR")
    assert outcome.status == "ok"
    assert outcome.result == pytest.approx(9.3)
    assert outcome.formatted == "9.3 EUR"


def test_display_locale_is_applied(table, settings_factory) -> None:
    svc = ConversionService(table, settings_factory(display_locale="id_ID"))
    assert svc.convert("1", "USD", "IDR").formatted == "16.450,75 IDR"


def test_bad_display_locale_fails_fast(table, settings_factory) -> None:
    with pytest.raises(ValueError):
        ConversionService(table, settings_factory(display_locale="xx_XX"))


def test_default_pair(service: ConversionService) -> None:
    assert service.default_pair() == ("USD", "IDR")
