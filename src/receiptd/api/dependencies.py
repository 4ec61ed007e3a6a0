import os
from functools import lru_cache

from fastapi import Depends

from receiptd.application.services.document_normalizer import DocumentNormalizer
from receiptd.application.services.typesetter import DEFAULT_LEGAL_TEXT
from receiptd.application.use_cases.render_document import RenderDocumentUseCase
from receiptd.infrastructure.file_handlers.mail_file_handler import MailFileHandler
from receiptd.infrastructure.parsers.html_extractor import MailHtmlExtractor
from receiptd.infrastructure.renderers.resources import PdfResources


@lru_cache(maxsize=1)
def get_resources() -> PdfResources:
    # loaded once per process; a missing font here is fatal
    data_dir = os.getenv("RECEIPTD_DATA_DIR")
    if data_dir:
        return PdfResources.load(data_dir)
    return PdfResources.builtin()


def get_extractor():
    return MailHtmlExtractor(
        company_name=os.getenv("RECEIPTD_COMPANY_NAME", ""),
        company_info_line=os.getenv("RECEIPTD_COMPANY_INFO", ""),
        vat_number=os.getenv("RECEIPTD_VAT_NUMBER", ""),
    )


def get_normalizer():
    return DocumentNormalizer()


def get_file_handler():
    max_file_size = int(os.getenv("RECEIPTD_MAX_FILE_SIZE", "5000000"))
    return MailFileHandler(max_file_size=max_file_size)


def build_use_case() -> RenderDocumentUseCase:
    return RenderDocumentUseCase(
        get_extractor(),
        get_normalizer(),
        get_resources(),
        get_file_handler(),
        legal_text=os.getenv("RECEIPTD_LEGAL_TEXT", DEFAULT_LEGAL_TEXT),
    )


def get_use_case(
    extractor: MailHtmlExtractor = Depends(get_extractor),
    normalizer: DocumentNormalizer = Depends(get_normalizer),
    resources: PdfResources = Depends(get_resources),
    file_handler: MailFileHandler = Depends(get_file_handler),
):
    return RenderDocumentUseCase(
        extractor,
        normalizer,
        resources,
        file_handler,
        legal_text=os.getenv("RECEIPTD_LEGAL_TEXT", DEFAULT_LEGAL_TEXT),
    )
