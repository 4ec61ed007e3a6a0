import logging
import string
from typing import List, Tuple

from bs4 import BeautifulSoup
from bs4.element import Tag

from receiptd.domain.exceptions import (
    MissingBodyError,
    MissingCellError,
    MissingRowError,
    MissingSpanError,
    MissingTableError,
)
from receiptd.domain.models import Amount, Document, DocumentType, LineItem
from receiptd.infrastructure.parsers.base import BaseHtmlExtractor

logger = logging.getLogger(__name__)

DELIVERY_TICKET_CODE = "2300"
WEIGH_TICKET_CODE = "2301"

TRANSACTION_PREFIXES = ("TransactionNumber: ",)
ORDER_ID_PREFIXES = ("OrderId: ",)
DOC_NUMBER_PREFIXES = ("Invoice#: ", "Receipt#: ", "Quote#: ")
TAXABLE_FLAGS = {"t", "y", "yes", "x"}
TICKET_CHARACTERS = set(string.digits + string.punctuation + string.whitespace)


class MailHtmlExtractor(BaseHtmlExtractor):
    """
    Reads the point-of-sale notification template.

    The template is positional: two spans, then nine tables in document
    order. Each step below is a named checkpoint; the first one that does
    not find its element fails the whole file.
    """

    def __init__(
        self,
        company_name: str = "",
        company_info_line: str = "",
        vat_number: str = "",
    ):
        super().__init__()
        self.company_name = company_name
        self.company_info_line = company_info_line
        self.vat_number = vat_number

    def extract_fields(self, fragment: str) -> Document:
        soup = BeautifulSoup(fragment, "html.parser")
        body = soup.select_one("body")
        if body is None:
            raise MissingBodyError("body")

        spans = iter(body.select("span"))
        title = self.cleanup(self.expect(spans, MissingSpanError, "span 1 (title)"))
        date = self.cleanup(self.expect(spans, MissingSpanError, "span 2 (date)"))

        tables = iter(body.select("table"))
        table_one = self.expect(tables, MissingTableError, "table 1 (company and customer)")
        company_info, customer_info, transaction, order_id, doc_number = (
            self._read_parties(table_one)
        )
        self.expect(tables, MissingTableError, "table 2 (item headers)")
        table_three = self.expect(tables, MissingTableError, "table 3 (item lines)")
        items, delivery_tickets, weigh_tickets = self._read_items(table_three)
        self.expect(tables, MissingTableError, "table 4 (reserved)")
        totals = self._read_amounts(
            self.expect(tables, MissingTableError, "table 5 (totals)"), "totals"
        )
        payments = self._read_amounts(
            self.expect(tables, MissingTableError, "table 6 (payments)"), "payments"
        )
        amount_due = self._read_amount_due(
            self.expect(tables, MissingTableError, "table 7 (amount due)")
        )
        employee = self._read_employee(
            self.expect(tables, MissingTableError, "table 8 (employee)")
        )
        slogan = self._read_slogan(
            self.expect(tables, MissingTableError, "table 9 (footer)")
        )

        company_name, company_info_line = self._company_header(company_info)
        document = Document(
            title=title,
            date=date,
            doc_type=self.classify(title),
            company_name=company_name,
            company_info_line=company_info_line,
            company_info=company_info,
            customer_info=customer_info,
            transaction_number=transaction,
            order_id=order_id,
            vat_number=self.vat_number,
            doc_number=doc_number,
            item_lines=items,
            delivery_tickets=delivery_tickets,
            weigh_tickets=weigh_tickets,
            totals=totals,
            payments=payments,
            amount_due=amount_due,
            employee=employee,
            slogan=slogan,
        )
        logger.info(
            f"Extracted {document.doc_type.value} {document.doc_number}: "
            f"{len(items)} items, {len(totals)} totals, {len(payments)} payments"
        )
        return document

    def classify(self, title: str) -> DocumentType:
        lowered = title.lower()
        if "receipt" in lowered:
            return DocumentType.RECEIPT
        if "quote" in lowered or "estimate" in lowered:
            return DocumentType.QUOTE
        return DocumentType.INVOICE

    def _read_parties(self, table: Tag) -> Tuple[str, str, str, str, str]:
        rows = iter(table.select("tr"))

        parties = self.expect(rows, MissingRowError, "table 1 row 1 (company and customer)")
        cells = iter(parties.select("td"))
        company_info = self.cleanup_multiple_lines(
            self.expect(cells, MissingCellError, "no company info found")
        )
        customer_info = self.cleanup_multiple_lines(
            self.expect(cells, MissingCellError, "no customer info found")
        )

        self.expect(rows, MissingRowError, "table 1 row 2 (blank)")

        metadata = self.expect(rows, MissingRowError, "table 1 row 3 (order metadata)")
        cells = iter(metadata.select("td"))
        transaction = self.strip_label(
            self.cleanup(self.expect(cells, MissingCellError, "transaction number")),
            TRANSACTION_PREFIXES,
        )
        order_id = self.strip_label(
            self.cleanup(self.expect(cells, MissingCellError, "order id")),
            ORDER_ID_PREFIXES,
        )
        doc_number = self.strip_label(
            self.cleanup(self.expect(cells, MissingCellError, "document number")),
            DOC_NUMBER_PREFIXES,
        )
        return company_info, customer_info, transaction, order_id, doc_number

    def _read_items(self, table: Tag) -> Tuple[List[LineItem], str, str]:
        items = []
        delivery_tickets = []
        weigh_tickets = []
        for row_num, row in enumerate(table.select("tr"), start=1):
            cells = row.select("td")
            checkpoint = f"table 3 row {row_num}"
            code = self.cleanup(
                self.expect_at(cells, 0, MissingCellError, f"{checkpoint} item code")
            )
            description = self.cleanup(
                self.expect_at(cells, 1, MissingCellError, f"{checkpoint} description")
            )
            if code == DELIVERY_TICKET_CODE:
                delivery_tickets.append(description)
                continue
            if code == WEIGH_TICKET_CODE:
                weigh_tickets.append(description)
                continue

            quantity = self.cleanup(
                self.expect_at(cells, 2, MissingCellError, f"{checkpoint} quantity")
            )
            price = self.cleanup_amount(
                self.expect_at(cells, 3, MissingCellError, f"{checkpoint} unit price")
            )
            amount = self.cleanup_amount(
                self.expect_at(cells, 4, MissingCellError, f"{checkpoint} amount")
            )
            # newer templates append unit, discount and tax flag columns
            extra = cells[5:8]
            unit_of_measure = self.cleanup(extra[0]) if len(extra) > 0 else ""
            discount = self.cleanup_amount(extra[1]) if len(extra) > 1 else ""
            tax_flag = self.cleanup(extra[2]) if len(extra) > 2 else ""

            items.append(
                LineItem(
                    code=code,
                    description=description,
                    quantity=quantity,
                    price=price,
                    amount=amount,
                    unit_of_measure=unit_of_measure or None,
                    discount=discount or None,
                    taxable=tax_flag.lower() in TAXABLE_FLAGS,
                )
            )
        return items, _join_tickets(delivery_tickets), _join_tickets(weigh_tickets)

    def _read_amounts(self, table: Tag, name: str) -> List[Amount]:
        amounts = []
        for row_num, row in enumerate(table.select("tr"), start=1):
            cells = row.select("td")
            checkpoint = f"{name} row {row_num}"
            amounts.append(
                Amount(
                    name=self.cleanup(
                        self.expect_at(cells, 0, MissingCellError, f"{checkpoint} label")
                    ),
                    value=self.cleanup_amount(
                        self.expect_at(cells, 1, MissingCellError, f"{checkpoint} amount")
                    ),
                )
            )
        return amounts

    def _read_amount_due(self, table: Tag) -> str:
        cells = table.select("td")
        return self.cleanup_amount(
            self.expect_at(cells, 2, MissingCellError, "amount due value")
        )

    def _read_employee(self, table: Tag) -> str:
        cells = table.select("td")
        return self.cleanup(self.expect_at(cells, 1, MissingCellError, "employee name"))

    def _read_slogan(self, table: Tag) -> str:
        cells = table.select("td")
        return self.cleanup(self.expect_at(cells, 0, MissingCellError, "footer slogan"))

    def _company_header(self, company_info: str) -> Tuple[str, str]:
        lines = company_info.split("\n") if company_info else []
        name = self.company_name or (lines[0] if lines else "")
        info_line = self.company_info_line or " • ".join(lines[1:])
        return name, info_line


def _join_tickets(descriptions: List[str]) -> str:
    tokens = []
    for description in descriptions:
        kept = "".join(char for char in description if char in TICKET_CHARACTERS)
        for word in kept.split():
            token = word.strip(string.punctuation)
            if token:
                tokens.append(token)
    return " ".join(tokens)
