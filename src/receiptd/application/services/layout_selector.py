from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from receiptd.domain.models import Document, DocumentType

LEFT_MARGIN = 54.0
RIGHT_MARGIN = 558.0


class Field(Enum):
    CODE = "code"
    DESCRIPTION = "description"
    UNIT_OF_MEASURE = "unit_of_measure"
    QUANTITY = "quantity"
    UNIT_PRICE = "unit_price"
    DISCOUNT = "discount"
    TOTAL = "total"


class LayoutVariant(Enum):
    STANDARD = "Standard"
    STANDARD_WITH_DISCOUNTS = "StandardWithDiscounts"
    RECEIPT = "Receipt"


@dataclass(frozen=True)
class Column:
    field: Field
    header: str
    left: float


@dataclass(frozen=True)
class Layout:
    variant: LayoutVariant
    max_desc_length: int
    columns: Tuple[Column, ...]
    totals_label_left: float

    @property
    def boundaries(self) -> Tuple[float, ...]:
        """Vertical divider positions; the first column starts at the margin."""
        return tuple(column.left for column in self.columns[1:])

    def column(self, field: Field) -> Optional[Column]:
        for column in self.columns:
            if column.field is field:
                return column
        return None

    def has(self, field: Field) -> bool:
        return self.column(field) is not None

    @property
    def totals_value_left(self) -> float:
        return self.column(Field.TOTAL).left


LAYOUTS: Dict[LayoutVariant, Layout] = {
    LayoutVariant.STANDARD: Layout(
        variant=LayoutVariant.STANDARD,
        max_desc_length=23,
        columns=(
            Column(Field.CODE, "Item", LEFT_MARGIN),
            Column(Field.DESCRIPTION, "Description", 104.0),
            Column(Field.UNIT_OF_MEASURE, "U/M", 282.0),
            Column(Field.QUANTITY, "Quantity", 322.0),
            Column(Field.UNIT_PRICE, "Unit Price", 393.0),
            Column(Field.TOTAL, "Total", 476.0),
        ),
        totals_label_left=393.0,
    ),
    LayoutVariant.STANDARD_WITH_DISCOUNTS: Layout(
        variant=LayoutVariant.STANDARD_WITH_DISCOUNTS,
        max_desc_length=18,
        columns=(
            Column(Field.CODE, "Item", LEFT_MARGIN),
            Column(Field.DESCRIPTION, "Description", 104.0),
            Column(Field.UNIT_OF_MEASURE, "U/M", 224.0),
            Column(Field.QUANTITY, "Quantity", 258.0),
            Column(Field.UNIT_PRICE, "Unit Price", 324.0),
            Column(Field.DISCOUNT, "Discount", 402.0),
            Column(Field.TOTAL, "Total", 480.0),
        ),
        totals_label_left=402.0,
    ),
    LayoutVariant.RECEIPT: Layout(
        variant=LayoutVariant.RECEIPT,
        max_desc_length=60,
        columns=(
            Column(Field.DESCRIPTION, "Description", LEFT_MARGIN),
            Column(Field.TOTAL, "Total", 476.0),
        ),
        totals_label_left=393.0,
    ),
}


def select_variant(doc_type: DocumentType, has_discounts: bool) -> LayoutVariant:
    if doc_type is DocumentType.RECEIPT:
        return LayoutVariant.RECEIPT
    if has_discounts:
        return LayoutVariant.STANDARD_WITH_DISCOUNTS
    return LayoutVariant.STANDARD


def select_layout(document: Document) -> Layout:
    return LAYOUTS[select_variant(document.doc_type, document.has_discounts)]
