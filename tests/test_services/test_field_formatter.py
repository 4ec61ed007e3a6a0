from decimal import Decimal

import pytest

from receiptd.application.services.field_formatter import (
    format_currency,
    format_quantity,
    format_two_places,
    infer_unit_of_measure,
    parse_decimal,
    resolve_unit_of_measure,
)
from receiptd.domain.exceptions import ValueParsingError
from receiptd.domain.models import LineItem


def _item(code="2050", unit_of_measure=None):
    return LineItem(
        code=code,
        description="Block",
        quantity="1.00",
        price="1.00",
        amount="1.00",
        unit_of_measure=unit_of_measure,
    )


def test_currency_is_right_justified_with_symbol():
    assert format_currency("120.00") == "$     120.00"
    assert len(format_currency("1.00")) == 12


def test_empty_currency_renders_nothing():
    assert format_currency("") == ""


def test_each_whole_quantity_drops_fraction():
    assert format_quantity("5.00", "EA") == "      5    "


def test_each_fractional_quantity_is_kept():
    assert format_quantity("5.50", "EA") == "      5.50"


def test_ton_quantity_keeps_decimals():
    assert format_quantity("5.00", "TON") == "      5.00"


def test_empty_quantity_renders_nothing():
    assert format_quantity("", "EA") == ""


@pytest.mark.parametrize(
    "code,expected",
    [("2000", "EA"), ("2050", "EA"), ("2099", "EA"), ("1999", "TON"), ("2100", "TON")],
)
def test_unit_inferred_from_code_range(code, expected):
    assert infer_unit_of_measure(code) == expected


def test_explicit_unit_wins_over_code():
    assert resolve_unit_of_measure(_item(code="2050", unit_of_measure="YD")) == "YD"


def test_missing_code_has_no_unit():
    assert resolve_unit_of_measure(_item(code="")) == ""


def test_non_numeric_code_is_a_parse_error():
    with pytest.raises(ValueParsingError):
        resolve_unit_of_measure(_item(code="GRAVEL"))


def test_parse_decimal_accepts_symbols_and_separators():
    assert parse_decimal("-123.00") == Decimal("-123.00")
    assert parse_decimal("$1,234.50") == Decimal("1234.50")


@pytest.mark.parametrize("value", ["", "abc", "12..0", "NaN"])
def test_parse_decimal_rejects_garbage(value):
    with pytest.raises(ValueParsingError):
        parse_decimal(value)


def test_two_places_rounds_half_up():
    assert format_two_places(Decimal("123")) == "123.00"
    assert format_two_places(Decimal("2.345")) == "2.35"


def test_two_places_rejects_amounts_past_precision():
    with pytest.raises(ValueParsingError):
        format_two_places(Decimal("1e30"))
