import logging
from decimal import Decimal

from num2words import num2words

from receiptd.application.services.field_formatter import (
    format_two_places,
    parse_decimal,
)
from receiptd.domain.models import Amount, Document, LineItem

logger = logging.getLogger(__name__)

DEPOSIT_TENDER = "Pay on Account"
TOTAL_LABEL = "Total:"


class DocumentNormalizer:
    """
    Business-rule pass run once over a freshly extracted document.

    A "Pay on Account" tender means the email is a deposit receipt: the
    tender becomes a line item of its own and the totals collapse to the
    deposit, whatever the underlying items add up to.
    """

    def normalize(self, document: Document) -> Document:
        index = self._find_deposit(document)
        if index is None:
            return document

        tender = document.payments[index]
        amount = format_two_places(abs(parse_decimal(tender.value)))
        del document.payments[index]
        logger.info(
            f"Converting '{DEPOSIT_TENDER}' tender of {tender.value} "
            f"into a deposit line of {amount}"
        )

        document.item_lines.append(
            LineItem(
                code="",
                description=self._deposit_description(Decimal(amount)),
                quantity="",
                price="",
                amount=amount,
                discount=None,
                taxable=False,
            )
        )
        document.totals = [Amount(name=TOTAL_LABEL, value=amount)]
        return document

    def _find_deposit(self, document: Document):
        for index, tender in enumerate(document.payments):
            if tender.name == DEPOSIT_TENDER:
                return index
        return None

    def _deposit_description(self, deposit: Decimal) -> str:
        dollars = int(deposit)
        cents = int((deposit - dollars) * 100)

        phrase = f"{_to_words(dollars)} {'dollar' if dollars == 1 else 'dollars'}"
        if cents:
            phrase += f" and {_to_words(cents)} {'cent' if cents == 1 else 'cents'}"
        return f"Received as cash deposit the sum of {phrase} for materials."


def _to_words(number: int) -> str:
    # num2words writes British English ("one hundred and five, ...")
    words = num2words(number, lang="en")
    return words.replace(",", "").replace(" and ", " ")
