"""Rendering rules for currency, quantity and unit-of-measure fields."""
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from receiptd.domain.exceptions import ValueParsingError
from receiptd.domain.models import LineItem

CURRENCY_SYMBOL = "$"
CURRENCY_WIDTH = 11
QUANTITY_WIDTH = 10
WHOLE_QUANTITY_WIDTH = 7

EACH = "EA"
TON = "TON"
# legacy item-code range for block products, counted each
EACH_CODE_RANGE = range(2000, 2100)

TWO_PLACES = Decimal("0.01")


def format_currency(value: str) -> str:
    if not value:
        return ""
    return f"{CURRENCY_SYMBOL}{value:>{CURRENCY_WIDTH}}"


def format_quantity(quantity: str, unit_of_measure: str) -> str:
    if not quantity:
        return ""
    if unit_of_measure == EACH and quantity.endswith(".00"):
        return f"{quantity[:-3]:>{WHOLE_QUANTITY_WIDTH}}    "
    return f"{quantity:>{QUANTITY_WIDTH}}"


def resolve_unit_of_measure(item: LineItem) -> str:
    """
    Prefer the explicit unit on the line item. Falling back to the item-code
    range is kept for emails that predate the unit column.
    """
    if item.unit_of_measure:
        return item.unit_of_measure
    if not item.code:
        return ""
    return infer_unit_of_measure(item.code)


def infer_unit_of_measure(code: str) -> str:
    try:
        item_num = int(code.strip())
    except ValueError as e:
        raise ValueParsingError(
            f"Item code `{code}` is not numeric; cannot infer unit of measure"
        ) from e
    return EACH if item_num in EACH_CODE_RANGE else TON


def parse_decimal(value: str) -> Decimal:
    cleaned = value.strip().replace(",", "").replace(CURRENCY_SYMBOL, "")
    try:
        number = Decimal(cleaned)
    except InvalidOperation as e:
        raise ValueParsingError(f"`{value}` is not a decimal number") from e
    if not number.is_finite():
        raise ValueParsingError(f"`{value}` is not a finite decimal number")
    return number


def format_two_places(value: Decimal) -> str:
    try:
        return str(value.quantize(TWO_PLACES, rounding=ROUND_HALF_UP))
    except InvalidOperation as e:
        # quantize needs the result to fit the context precision
        raise ValueParsingError(f"`{value}` is too large for a currency amount") from e
