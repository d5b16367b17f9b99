import pytest

from currency_converter.core.errors import RateTableError, UnknownCurrencyError
from currency_converter.services.rates.table import RateTable


def test_default_table_has_seven_codes_in_order(table) -> None:
    assert table.codes == ("USD", "IDR", "EUR", "JPY", "SGD", "MYR", "SAR")
    assert table.base_currency == "USD"
    assert table["USD"] == 1.0
    assert table["IDR"] == 16450.75


def test_lookup_is_case_insensitive(table) -> None:
    assert table["eur"] == 0.93
    assert "jpy" in table
    assert "GBP" not in table
    assert 5 not in table


def test_non_string_lookup_is_a_missing_key(table) -> None:
    assert table.get(5) is None  # type: ignore[arg-type]
    assert table.get(None, 0.0) == 0.0  # type: ignore[arg-type]
    with pytest.raises(KeyError):
        table[5]  # type: ignore[index]


def test_table_is_read_only() -> None:
    table = RateTable({"USD": 1.0, "EUR": 0.9})
    with pytest.raises(TypeError):
        table["EUR"] = 2.0  # type: ignore[index]
    with pytest.raises(AttributeError):
        table.extra = 1  # type: ignore[attr-defined]


def test_source_mapping_changes_do_not_leak() -> None:
    source = {"USD": 1.0, "EUR": 0.9}
    table = RateTable(source)
    source["EUR"] = 5.0
    source["GBP"] = 0.8
    assert table["EUR"] == 0.9
    assert "GBP" not in table


@pytest.mark.parametrize(
    ("rates", "base"),
    [
        ({"USD": 1.0, "EUR": 0.0}, "USD"),
        ({"USD": 1.0, "EUR": -0.5}, "USD"),
        ({"USD": 1.0, "EUR": float("nan")}, "USD"),
        ({"USD": 1.0, "EUR": float("inf")}, "USD"),
        ({"USD": 1.0, "EUR": "abc"}, "USD"),
        ({"EUR": 0.9}, "USD"),
        ({"USD": 2.0, "EUR": 0.9}, "USD"),
        ({"USD": 1.0, "usd": 1.0}, "USD"),
        ({"USD": 1.0, " ": 2.0}, "USD"),
    ],
)
def test_invalid_tables_are_rejected(rates, base) -> None:
    with pytest.raises(RateTableError):
        RateTable(rates, base)


def test_require_raises_for_unknown_code(table) -> None:
    with pytest.raises(UnknownCurrencyError) as info:
        table.require("gbp")
    assert info.value.code == "GBP"
    assert "USD" in str(info.value)


def test_alternate_base_currency() -> None:
    table = RateTable({"eur": 1.0, "usd": 1.08}, base_currency="eur")
    assert table.base_currency == "EUR"
    assert table.codes == ("EUR", "USD")
    assert table == {"EUR": 1.0, "USD": 1.08}
