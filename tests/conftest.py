"""Test fixtures for receiptd."""

import os

import pytest

# Builtin fonts and no company overrides unless a test asks for them
for _name in (
    "RECEIPTD_DATA_DIR",
    "RECEIPTD_COMPANY_NAME",
    "RECEIPTD_COMPANY_INFO",
    "RECEIPTD_VAT_NUMBER",
    "RECEIPTD_MAX_FILE_SIZE",
):
    os.environ.pop(_name, None)

from receiptd.api.dependencies import get_resources
from receiptd.domain.models import Amount, Document, DocumentType, LineItem

DEFAULT_ITEMS = [("2050", "Crushed Stone", "5.00", "$120.00", "$600.00")]
DEFAULT_TOTALS = [("Subtotal:", "$600.00"), ("Tax:", "$30.00"), ("Total:", "$630.00")]
DEFAULT_PAYMENTS = [("Cash", "$630.00")]


def _rows(rows):
    return "\n".join(
        "<tr>" + "".join(f"<td>{cell}</td>" for cell in row) + "</tr>" for row in rows
    )


def build_mail(
    title="Customer Invoice",
    date="01/02/2024",
    items=None,
    totals=None,
    payments=None,
    doc_label="Invoice#: ",
    customer_cell="John Smith\n   44 Elm St\n   Springfield IL  62701",
    tables=9,
):
    """Mail file with the point-of-sale HTML template, truncated to `tables`."""
    items = DEFAULT_ITEMS if items is None else items
    totals = DEFAULT_TOTALS if totals is None else totals
    payments = DEFAULT_PAYMENTS if payments is None else payments

    all_tables = [
        f"""<table>
<tr><td>ACME Aggregates
    12 Quarry Road

    Springfield IL</td><td>{customer_cell}</td></tr>
<tr><td></td></tr>
<tr><td>TransactionNumber: T-1001</td><td>OrderId: O-2002</td><td>{doc_label}30003</td></tr>
</table>""",
        "<table><tr><td>Item</td><td>Description</td><td>Qty</td><td>Price</td><td>Amount</td></tr></table>",
        f"<table>{_rows(items)}</table>",
        "<table></table>",
        f"<table>{_rows(totals)}</table>",
        f"<table>{_rows(payments)}</table>",
        "<table><tr><td></td><td>Amount Due</td><td>$0.00</td></tr></table>",
        "<table><tr><td>Employee:</td><td>Jane Clerk</td></tr></table>",
        "<table><tr><td>Thank you for your business!</td></tr></table>",
    ]
    body = "\n".join(all_tables[:tables])
    return f"""From: pos@acme.example
Subject: {title}
Content-Type: text/html; charset=utf-8

<Html><head><title>{title}</title></head>
<Body>
<span><strong>{title}</strong></span>
<span>{date}</span>
{body}
</Body></Html>
"""


@pytest.fixture
def mail_builder():
    return build_mail


@pytest.fixture
def sample_mail():
    return build_mail()


@pytest.fixture
def sample_document():
    return Document(
        title="Customer Invoice",
        date="01/02/2024",
        doc_type=DocumentType.INVOICE,
        company_name="ACME Aggregates",
        company_info_line="12 Quarry Road • Springfield IL",
        customer_info="John Smith\n44 Elm St\nSpringfield IL 62701",
        transaction_number="T-1001",
        order_id="O-2002",
        vat_number="GB123456789",
        doc_number="30003",
        item_lines=[
            LineItem(
                code="2050",
                description="Crushed Stone",
                quantity="5.00",
                price="120.00",
                amount="600.00",
            )
        ],
        delivery_tickets="4821",
        weigh_tickets="77",
        totals=[
            Amount("Subtotal:", "600.00"),
            Amount("Tax:", "30.00"),
            Amount("Total:", "630.00"),
        ],
        payments=[Amount("Cash", "630.00")],
        employee="Jane Clerk",
        slogan="Thank you for your business!",
    )


@pytest.fixture(autouse=True)
def _fresh_resources():
    get_resources.cache_clear()
    yield
    get_resources.cache_clear()
