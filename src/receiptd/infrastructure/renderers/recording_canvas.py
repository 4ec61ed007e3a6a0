from dataclasses import dataclass
from typing import List, Union

from receiptd.domain.interfaces import FontStyle, PageCanvas


@dataclass(frozen=True)
class DrawText:
    text: str
    size: float
    x: float
    y: float
    font: FontStyle


@dataclass(frozen=True)
class DrawLine:
    x1: float
    y1: float
    x2: float
    y2: float


@dataclass(frozen=True)
class DrawBox:
    x1: float
    y1: float
    x2: float
    y2: float


@dataclass(frozen=True)
class DrawLogo:
    x: float
    y: float
    scale: float


DrawOperation = Union[DrawText, DrawLine, DrawBox, DrawLogo]


class RecordingCanvas(PageCanvas):
    """Keeps draw operations in order instead of producing a PDF."""

    def __init__(self):
        self.operations: List[DrawOperation] = []

    def draw_text(
        self, text: str, size: float, x: float, y: float, font: FontStyle
    ) -> None:
        self.operations.append(DrawText(text, size, x, y, font))

    def draw_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self.operations.append(DrawLine(x1, y1, x2, y2))

    def draw_box(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self.operations.append(DrawBox(x1, y1, x2, y2))

    def draw_logo(self, x: float, y: float, scale: float) -> None:
        self.operations.append(DrawLogo(x, y, scale))

    @property
    def texts(self) -> List[DrawText]:
        return [op for op in self.operations if isinstance(op, DrawText)]

    @property
    def lines(self) -> List[DrawLine]:
        return [op for op in self.operations if isinstance(op, DrawLine)]

    def find_text(self, text: str) -> List[DrawText]:
        return [op for op in self.texts if op.text == text]

    def dump(self) -> str:
        return "\n".join(repr(op) for op in self.operations)
