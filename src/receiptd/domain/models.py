from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class DocumentType(Enum):
    INVOICE = "Invoice"
    RECEIPT = "Receipt"
    QUOTE = "Quote"

    @property
    def number_label(self) -> str:
        return f"{self.value} Number:"


@dataclass
class LineItem:
    code: str
    description: str
    quantity: str
    price: str
    amount: str
    unit_of_measure: Optional[str] = None
    discount: Optional[str] = None
    taxable: bool = False

    @property
    def has_discount(self) -> bool:
        return bool(self.discount)


@dataclass
class Amount:
    name: str
    value: str

    @property
    def is_separator(self) -> bool:
        return self.name == ""


@dataclass
class Document:
    """
    One invoice, receipt or quote as read from a notification email.

    Monetary fields are display-ready decimal strings; nothing here does
    arithmetic.
    """

    title: str
    date: str
    doc_type: DocumentType
    company_name: str = ""
    company_info_line: str = ""
    company_info: str = ""
    customer_info: str = ""
    transaction_number: str = ""
    order_id: str = ""
    vat_number: str = ""
    doc_number: str = ""
    item_lines: List[LineItem] = field(default_factory=list)
    delivery_tickets: str = ""
    weigh_tickets: str = ""
    totals: List[Amount] = field(default_factory=list)
    payments: List[Amount] = field(default_factory=list)
    amount_due: str = ""
    employee: str = ""
    slogan: str = ""

    @property
    def has_discounts(self) -> bool:
        return any(item.has_discount for item in self.item_lines)

    @property
    def customer_lines(self) -> List[str]:
        return self.customer_info.split("\n") if self.customer_info else []
