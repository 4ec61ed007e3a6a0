import logging
import os
from typing import Any, Dict, Optional, Tuple

from receiptd.application.services.document_normalizer import DocumentNormalizer
from receiptd.application.services.layout_selector import select_layout
from receiptd.application.services.typesetter import DEFAULT_LEGAL_TEXT, Typesetter
from receiptd.domain.exceptions import ReceiptError, ResourceLoadError
from receiptd.domain.interfaces import DocumentExtractor
from receiptd.domain.models import Document
from receiptd.infrastructure.file_handlers.mail_file_handler import MailFileHandler
from receiptd.infrastructure.renderers.recording_canvas import RecordingCanvas
from receiptd.infrastructure.renderers.reportlab_canvas import ReportLabCanvas
from receiptd.infrastructure.renderers.resources import PdfResources

logger = logging.getLogger(__name__)


class RenderDocumentUseCase:
    def __init__(
        self,
        extractor: DocumentExtractor,
        normalizer: DocumentNormalizer,
        resources: PdfResources,
        file_handler: Optional[MailFileHandler] = None,
        legal_text: str = DEFAULT_LEGAL_TEXT,
    ):
        self.extractor = extractor
        self.normalizer = normalizer
        self.resources = resources
        self.file_handler = file_handler or MailFileHandler()
        self.legal_text = legal_text

    def prepare(self, raw_text: str) -> Document:
        document = self.extractor.extract(raw_text)
        return self.normalizer.normalize(document)

    def render(self, raw_text: str) -> Tuple[Document, bytes]:
        document = self.prepare(raw_text)
        layout = select_layout(document)
        canvas = ReportLabCanvas(self.resources, title=document.title or "Document")
        Typesetter(canvas, self.legal_text).typeset(document, layout)
        return document, canvas.finish()

    def preview(self, raw_text: str) -> RecordingCanvas:
        """Typeset without producing a PDF, keeping the draw operations."""
        document = self.prepare(raw_text)
        canvas = RecordingCanvas()
        Typesetter(canvas, self.legal_text).typeset(document, select_layout(document))
        return canvas

    def execute(self, raw_text: str, filename: str) -> Dict[str, Any]:
        logger.info(f"Rendering {filename}")
        try:
            document, pdf_bytes = self.render(raw_text)
        except ResourceLoadError:
            raise
        except ReceiptError as e:
            logger.warning(f"Could not render {filename}: {str(e)}")
            return {
                "success": False,
                "error": str(e),
                "error_code": e.code,
                "message": "Failed to render document",
                "filename": filename,
            }

        return {
            "success": True,
            "filename": filename,
            "document_type": document.doc_type.value,
            "doc_number": document.doc_number,
            "layout": select_layout(document).variant.value,
            "pdf": pdf_bytes,
            "message": "Document rendered successfully",
        }

    def process_file(
        self, input_path: str, output_path: str, quarantine: bool = False
    ) -> Dict[str, Any]:
        try:
            raw_text = self.file_handler.read_file(input_path)
        except ReceiptError as e:
            result = {
                "success": False,
                "error": str(e),
                "error_code": e.code,
                "message": "Failed to read input file",
                "filename": input_path,
            }
        else:
            result = self.execute(raw_text, input_path)

        if not result["success"]:
            if quarantine and os.path.exists(input_path):
                result["quarantined_as"] = self.file_handler.quarantine(
                    input_path, result["error_code"]
                )
            return result

        self.file_handler.write_pdf(result.pop("pdf"), output_path)
        result["output_path"] = output_path
        logger.info(f"Wrote {output_path}")
        return result
