import io
import logging

from reportlab.graphics import renderPDF
from reportlab.pdfgen import canvas

from receiptd.application.services.typesetter import PAGE_HEIGHT, PAGE_WIDTH
from receiptd.domain.exceptions import RenderingError
from receiptd.domain.interfaces import FontStyle, PageCanvas
from receiptd.infrastructure.renderers.resources import PdfResources

logger = logging.getLogger(__name__)


class ReportLabCanvas(PageCanvas):
    """One-page PDF backed by a reportlab canvas."""

    def __init__(self, resources: PdfResources, title: str = "Document"):
        self.resources = resources
        self._fonts = {
            FontStyle.REGULAR: resources.font_regular,
            FontStyle.BOLD: resources.font_bold,
            FontStyle.MONO: resources.font_mono,
        }
        self._buffer = io.BytesIO()
        self._canvas = canvas.Canvas(self._buffer, pagesize=(PAGE_WIDTH, PAGE_HEIGHT))
        self._canvas.setTitle(title)

    def draw_text(
        self, text: str, size: float, x: float, y: float, font: FontStyle
    ) -> None:
        font_name = self._fonts[font]
        try:
            self._canvas.setFont(font_name, size)
        except Exception as e:
            raise RenderingError(f"Font `{font_name}` was rejected: {e}") from e
        self._canvas.drawString(x, y, text)

    def draw_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self._canvas.line(x1, y1, x2, y2)

    def draw_box(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self._canvas.rect(x1, y1, x2 - x1, y2 - y1, stroke=1, fill=0)

    def draw_logo(self, x: float, y: float, scale: float) -> None:
        if self.resources.logo is None:
            return
        self._canvas.saveState()
        self._canvas.translate(x, y)
        self._canvas.scale(scale, scale)
        renderPDF.draw(self.resources.logo, self._canvas, 0, 0)
        self._canvas.restoreState()

    def finish(self) -> bytes:
        """Close the page and return the PDF bytes."""
        try:
            self._canvas.showPage()
            self._canvas.save()
        except Exception as e:
            logger.error(f"PDF finalization failed: {str(e)}", exc_info=True)
            raise RenderingError(f"Could not finalize the page: {e}") from e
        return self._buffer.getvalue()
