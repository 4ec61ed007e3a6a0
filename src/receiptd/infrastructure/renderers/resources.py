import io
import logging
import os
from dataclasses import dataclass
from typing import Optional

from reportlab.graphics.shapes import Drawing
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from svglib.svglib import svg2rlg

from receiptd.domain.exceptions import ResourceLoadError

logger = logging.getLogger(__name__)

FONT_FILES = {
    "regular": ("NotoSans-Regular", "fonts/NotoSans-Regular.ttf"),
    "bold": ("NotoSans-Bold", "fonts/NotoSans-Bold.ttf"),
    "mono": ("NotoSansMono-Regular", "fonts/NotoSansMono-Regular.ttf"),
}
LOGO_FILE = "logo.svg"


@dataclass(frozen=True)
class PdfResources:
    """
    Fonts and logo shared by every render in a run.

    Fonts are registered with reportlab once at load time and referenced by
    name afterwards; nothing mutates them after that.
    """

    font_regular: str
    font_bold: str
    font_mono: str
    logo: Optional[Drawing] = None

    @classmethod
    def load(cls, data_dir: str) -> "PdfResources":
        names = {
            style: _register_font(name, os.path.join(data_dir, relative_path))
            for style, (name, relative_path) in FONT_FILES.items()
        }
        logo = _load_logo(os.path.join(data_dir, LOGO_FILE))
        logger.info(f"Loaded fonts and logo from {data_dir}")
        return cls(
            font_regular=names["regular"],
            font_bold=names["bold"],
            font_mono=names["mono"],
            logo=logo,
        )

    @classmethod
    def builtin(cls) -> "PdfResources":
        """Standard PDF fonts, no logo."""
        return cls(
            font_regular="Helvetica",
            font_bold="Helvetica-Bold",
            font_mono="Courier",
        )


def _read_bytes(path: str) -> bytes:
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        raise ResourceLoadError(
            f"Could not read the file: `{path}`. Reason: `{e}`"
        ) from e


def _register_font(name: str, path: str) -> str:
    data = _read_bytes(path)
    try:
        pdfmetrics.registerFont(TTFont(name, io.BytesIO(data)))
    except Exception as e:
        raise ResourceLoadError(
            f"Could not load the font from the file: `{path}`. Reason: `{e}`"
        ) from e
    return name


def _load_logo(path: str) -> Drawing:
    data = _read_bytes(path)
    try:
        drawing = svg2rlg(io.BytesIO(data))
    except Exception as e:
        raise ResourceLoadError(
            f"Could not parse the svg loaded from: `{path}`. Reason: {e}"
        ) from e
    if drawing is None:
        raise ResourceLoadError(f"Could not parse the svg loaded from: `{path}`")
    return drawing
