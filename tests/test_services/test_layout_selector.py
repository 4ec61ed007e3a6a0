import pytest

from receiptd.application.services.layout_selector import (
    LAYOUTS,
    Field,
    LayoutVariant,
    select_layout,
    select_variant,
)
from receiptd.domain.models import DocumentType


@pytest.mark.parametrize(
    "doc_type,has_discounts,expected",
    [
        (DocumentType.INVOICE, False, LayoutVariant.STANDARD),
        (DocumentType.QUOTE, False, LayoutVariant.STANDARD),
        (DocumentType.INVOICE, True, LayoutVariant.STANDARD_WITH_DISCOUNTS),
        (DocumentType.QUOTE, True, LayoutVariant.STANDARD_WITH_DISCOUNTS),
        (DocumentType.RECEIPT, False, LayoutVariant.RECEIPT),
        (DocumentType.RECEIPT, True, LayoutVariant.RECEIPT),
    ],
)
def test_variant_selection(doc_type, has_discounts, expected):
    assert select_variant(doc_type, has_discounts) is expected


def test_layout_follows_line_discounts(sample_document):
    assert select_layout(sample_document).variant is LayoutVariant.STANDARD
    sample_document.item_lines[0].discount = "5.00"
    assert (
        select_layout(sample_document).variant
        is LayoutVariant.STANDARD_WITH_DISCOUNTS
    )


def test_standard_columns():
    layout = LAYOUTS[LayoutVariant.STANDARD]
    assert layout.column(Field.CODE) is not None
    assert len(layout.columns) == 6
    assert not layout.has(Field.DISCOUNT)
    assert layout.boundaries == (104.0, 282.0, 322.0, 393.0, 476.0)
    assert layout.max_desc_length == 23


def test_discount_layout_has_six_data_columns():
    layout = LAYOUTS[LayoutVariant.STANDARD_WITH_DISCOUNTS]
    assert len(layout.columns) == 7
    assert layout.has(Field.DISCOUNT)
    assert layout.max_desc_length < LAYOUTS[LayoutVariant.STANDARD].max_desc_length


def test_receipt_layout_only_description_and_total():
    layout = LAYOUTS[LayoutVariant.RECEIPT]
    assert [column.field for column in layout.columns] == [
        Field.DESCRIPTION,
        Field.TOTAL,
    ]
    assert layout.boundaries == (476.0,)


def test_columns_are_ordered_left_to_right():
    for layout in LAYOUTS.values():
        lefts = [column.left for column in layout.columns]
        assert lefts == sorted(lefts)
