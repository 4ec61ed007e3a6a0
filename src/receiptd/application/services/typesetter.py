import logging
from typing import Dict

from receiptd.application.services.field_formatter import (
    format_currency,
    format_quantity,
    resolve_unit_of_measure,
)
from receiptd.application.services.layout_selector import (
    LEFT_MARGIN,
    RIGHT_MARGIN,
    Field,
    Layout,
)
from receiptd.application.services.line_wrapper import wrap
from receiptd.domain.interfaces import FontStyle, PageCanvas
from receiptd.domain.models import Document, LineItem

logger = logging.getLogger(__name__)

# US Letter, 8.5" x 11"
PAGE_WIDTH = 612.0
PAGE_HEIGHT = 792.0

SPACING = 5.0
LINE_HEIGHT = 16.0
TABLE_TOP = 514.0
TABLE_BOTTOM = 254.0
TABLE_HEADER_HEIGHT = 20.0
TABLE_ROW_HEIGHT = 15.0
TAX_MARKER = "T"

DEFAULT_LEGAL_TEXT = (
    "All claims for shortage or damage must be made within 48 hours of delivery."
)


class Typesetter:
    """
    Places a normalized document on a single page.

    Coordinates are points from the bottom-left corner. Pagination is the
    caller's problem: a document with more rows than the item table holds
    runs past the table bottom.
    """

    def __init__(self, canvas: PageCanvas, legal_text: str = DEFAULT_LEGAL_TEXT):
        self.canvas = canvas
        self.legal_text = legal_text

    def typeset(self, document: Document, layout: Layout) -> None:
        logger.info(
            f"Typesetting {document.doc_type.value} {document.doc_number} "
            f"with {layout.variant.value} layout"
        )
        self._draw_heading(document)
        self._draw_header_fields(document)
        self._draw_customer_box(document)
        self._draw_item_table(document, layout)
        self._draw_totals(document, layout)
        self._draw_tenders(document)
        self._draw_footer(document)

    def _text(self, text: str, size: float, x: float, y: float, font: FontStyle):
        if text:
            self.canvas.draw_text(text, size, x, y, font)

    def _draw_heading(self, document: Document) -> None:
        self._text(document.title, 14.0, 260.0, 750.0, FontStyle.BOLD)
        self._text(document.company_name, 28.0, 225.0, 712.0, FontStyle.BOLD)
        self._text(document.company_info_line, 18.0, 228.0, 690.0, FontStyle.REGULAR)
        self.canvas.draw_logo(55.0, 682.0, 0.65)

    def _draw_header_fields(self, document: Document) -> None:
        bottom_border = 640.0
        positions = [LEFT_MARGIN, 222.0, 390.0]

        labels = ["Date/Time:", "VAT Number:", document.doc_type.number_label]
        for x, label in zip(positions, labels):
            self._text(label, 8.0, x + SPACING, bottom_border + 20.0, FontStyle.BOLD)

        text_bottom = bottom_border + 4.0
        self._text(
            document.date, 12.0, positions[0] + SPACING, text_bottom, FontStyle.REGULAR
        )
        self._text(
            document.vat_number,
            12.0,
            positions[1] + SPACING,
            text_bottom,
            FontStyle.REGULAR,
        )
        self._text(
            document.doc_number,
            18.0,
            positions[2] + SPACING,
            text_bottom - 1.0,
            FontStyle.BOLD,
        )

    def _draw_customer_box(self, document: Document) -> None:
        self.canvas.draw_box(LEFT_MARGIN, 530.0, RIGHT_MARGIN, 630.0)

        current_y = 618.0
        self._text("Sold to:", 8.0, LEFT_MARGIN + SPACING, current_y, FontStyle.BOLD)
        for line in document.customer_lines:
            current_y -= LINE_HEIGHT
            self._text(line, 12.0, LEFT_MARGIN + SPACING, current_y, FontStyle.REGULAR)

        # clerk and ticket numbers share the box on the right
        top = 618.0
        left = 390.0 + SPACING
        fields = [
            ("Clerk:", document.employee),
            ("Delivery Ticket #:", document.delivery_tickets),
            ("Weigh Ticket #:", document.weigh_tickets),
        ]
        for i, (label, value) in enumerate(fields):
            label_y = top - 2 * i * LINE_HEIGHT
            self._text(label, 8.0, left, label_y, FontStyle.BOLD)
            self._text(value, 12.0, left, label_y - LINE_HEIGHT, FontStyle.REGULAR)

    def _draw_item_table(self, document: Document, layout: Layout) -> None:
        self.canvas.draw_box(LEFT_MARGIN, TABLE_BOTTOM, RIGHT_MARGIN, TABLE_TOP)
        for x in layout.boundaries:
            self.canvas.draw_line(x, TABLE_BOTTOM, x, TABLE_TOP)

        bottom_border = TABLE_TOP - TABLE_HEADER_HEIGHT
        self.canvas.draw_line(LEFT_MARGIN, bottom_border, RIGHT_MARGIN, bottom_border)
        for column in layout.columns:
            self._text(
                column.header,
                12.0,
                column.left + SPACING,
                bottom_border + SPACING,
                FontStyle.REGULAR,
            )

        bottom_border -= TABLE_HEADER_HEIGHT
        description = layout.column(Field.DESCRIPTION)
        for item in document.item_lines:
            cursor_y = bottom_border + SPACING
            desc_lines = wrap(item.description, layout.max_desc_length)
            values = self._column_values(item, layout, desc_lines[0] if desc_lines else "")
            for column in layout.columns:
                self._text(
                    values[column.field],
                    10.0,
                    column.left + SPACING,
                    cursor_y,
                    FontStyle.MONO,
                )
            if item.taxable:
                self._text(TAX_MARKER, 10.0, RIGHT_MARGIN + 3.0, cursor_y, FontStyle.MONO)

            for continuation in desc_lines[1:]:
                bottom_border -= TABLE_ROW_HEIGHT
                self._text(
                    continuation,
                    10.0,
                    description.left + SPACING,
                    bottom_border + SPACING,
                    FontStyle.MONO,
                )
            bottom_border -= TABLE_ROW_HEIGHT

    def _column_values(
        self, item: LineItem, layout: Layout, first_desc_line: str
    ) -> Dict[Field, str]:
        values = {
            Field.CODE: item.code,
            Field.DESCRIPTION: first_desc_line,
            Field.UNIT_PRICE: format_currency(item.price),
            Field.DISCOUNT: format_currency(item.discount or ""),
            Field.TOTAL: format_currency(item.amount),
        }
        if layout.has(Field.UNIT_OF_MEASURE) or layout.has(Field.QUANTITY):
            uom = resolve_unit_of_measure(item)
            values[Field.UNIT_OF_MEASURE] = uom
            values[Field.QUANTITY] = format_quantity(item.quantity, uom)
        return values

    def _draw_totals(self, document: Document, layout: Layout) -> None:
        current_y = TABLE_BOTTOM
        x1 = layout.totals_label_left + SPACING
        x2 = layout.totals_value_left + SPACING
        for amount in document.totals:
            if amount.is_separator:
                current_y -= LINE_HEIGHT / 2
                self.canvas.draw_line(x1, current_y, RIGHT_MARGIN, current_y)
                continue

            current_y -= LINE_HEIGHT
            font = FontStyle.BOLD if amount.name == "Total:" else FontStyle.REGULAR
            name = "VAT:" if amount.name == "Tax:" else amount.name
            self._text(name, 12.0, x1, current_y, font)
            self._text(format_currency(amount.value), 10.0, x2, current_y, FontStyle.MONO)

    def _draw_tenders(self, document: Document) -> None:
        current_y = TABLE_BOTTOM - 40.0
        x1 = LEFT_MARGIN + SPACING
        x2 = 200.0

        current_y -= LINE_HEIGHT
        self._text("Tender", 12.0, x1, current_y, FontStyle.REGULAR)
        current_y -= 4.0
        self.canvas.draw_line(x1, current_y, x2 + 80.0, current_y)
        for amount in document.payments:
            current_y -= LINE_HEIGHT
            self._text(amount.name, 10.0, x1, current_y, FontStyle.REGULAR)
            self._text(format_currency(amount.value), 10.0, x2, current_y, FontStyle.MONO)

    def _draw_footer(self, document: Document) -> None:
        self.canvas.draw_box(350.0, 84.0, RIGHT_MARGIN, 84.0)
        self._text("Received By", 10.0, 350.0, 74.0, FontStyle.REGULAR)
        self._text(document.slogan, 9.0, 258.0, 54.0, FontStyle.REGULAR)
        self._text(self.legal_text, 7.0, LEFT_MARGIN, 36.0, FontStyle.REGULAR)
