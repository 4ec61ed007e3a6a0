from abc import ABC, abstractmethod
from enum import Enum

from receiptd.domain.models import Document


class FontStyle(Enum):
    REGULAR = "regular"
    BOLD = "bold"
    MONO = "mono"


class DocumentExtractor(ABC):
    @abstractmethod
    def extract(self, raw_text: str) -> Document:
        pass


class PageCanvas(ABC):
    """Absolute-positioned drawing surface for one page, in points."""

    @abstractmethod
    def draw_text(
        self, text: str, size: float, x: float, y: float, font: FontStyle
    ) -> None:
        pass

    @abstractmethod
    def draw_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        pass

    @abstractmethod
    def draw_box(self, x1: float, y1: float, x2: float, y2: float) -> None:
        pass

    @abstractmethod
    def draw_logo(self, x: float, y: float, scale: float) -> None:
        pass
