from typing import List, Optional

from pydantic import BaseModel

from receiptd.application.services.layout_selector import Layout
from receiptd.domain.models import Document


class LineItemSchema(BaseModel):
    code: str
    description: str
    quantity: str
    price: str
    amount: str
    unit_of_measure: Optional[str] = None
    discount: Optional[str] = None
    taxable: bool = False


class AmountSchema(BaseModel):
    name: str
    value: str


class DocumentSchema(BaseModel):
    title: str
    date: str
    doc_type: str
    layout: str
    company_name: str = ""
    company_info_line: str = ""
    customer_info: str = ""
    transaction_number: str = ""
    order_id: str = ""
    vat_number: str = ""
    doc_number: str = ""
    item_lines: List[LineItemSchema] = []
    delivery_tickets: str = ""
    weigh_tickets: str = ""
    totals: List[AmountSchema] = []
    payments: List[AmountSchema] = []
    amount_due: str = ""
    employee: str = ""
    slogan: str = ""

    @classmethod
    def from_document(cls, document: Document, layout: Layout) -> "DocumentSchema":
        return cls(
            title=document.title,
            date=document.date,
            doc_type=document.doc_type.value,
            layout=layout.variant.value,
            company_name=document.company_name,
            company_info_line=document.company_info_line,
            customer_info=document.customer_info,
            transaction_number=document.transaction_number,
            order_id=document.order_id,
            vat_number=document.vat_number,
            doc_number=document.doc_number,
            item_lines=[
                LineItemSchema(
                    code=item.code,
                    description=item.description,
                    quantity=item.quantity,
                    price=item.price,
                    amount=item.amount,
                    unit_of_measure=item.unit_of_measure,
                    discount=item.discount,
                    taxable=item.taxable,
                )
                for item in document.item_lines
            ],
            delivery_tickets=document.delivery_tickets,
            weigh_tickets=document.weigh_tickets,
            totals=[AmountSchema(name=a.name, value=a.value) for a in document.totals],
            payments=[
                AmountSchema(name=a.name, value=a.value) for a in document.payments
            ],
            amount_due=document.amount_due,
            employee=document.employee,
            slogan=document.slogan,
        )


class RenderError(BaseModel):
    error: str
    error_code: str
