import re
from abc import abstractmethod
from typing import Iterable, Iterator, List, Sequence, Type, TypeVar

from bs4.element import NavigableString, Tag

from receiptd.domain.exceptions import ExtractionError, MissingFragmentError
from receiptd.domain.interfaces import DocumentExtractor
from receiptd.domain.models import Document

T = TypeVar("T")


class BaseHtmlExtractor(DocumentExtractor):

    def __init__(self):
        self.patterns = {
            "fragment_start": re.compile(r"<html\b[^>]*>", re.IGNORECASE),
            "fragment_end": re.compile(r"</html\s*>", re.IGNORECASE),
        }

    @abstractmethod
    def extract_fields(self, fragment: str) -> Document:
        pass

    def extract(self, raw_text: str) -> Document:
        return self.extract_fields(self.locate_fragment(raw_text))

    def locate_fragment(self, raw_text: str) -> str:
        start = self.patterns["fragment_start"].search(raw_text)
        if not start:
            raise MissingFragmentError("<html> start marker")
        end = self.patterns["fragment_end"].search(raw_text, start.end())
        if not end:
            raise MissingFragmentError("</html> end marker")
        return raw_text[start.start() : end.end()]

    def expect(
        self, items: Iterator[T], error: Type[ExtractionError], checkpoint: str
    ) -> T:
        """Take the next element of a structural sequence or fail naming it."""
        item = next(items, None)
        if item is None:
            raise error(checkpoint)
        return item

    def expect_at(
        self,
        items: Sequence[T],
        index: int,
        error: Type[ExtractionError],
        checkpoint: str,
    ) -> T:
        if index >= len(items):
            raise error(checkpoint, f"found {len(items)}, need {index + 1}")
        return items[index]

    def cleanup(self, element: Tag) -> str:
        return " ".join(" ".join(self._text_nodes(element)).split())

    def cleanup_amount(self, element: Tag) -> str:
        amount = self.cleanup(element)
        if amount.startswith("$"):
            return amount[1:]
        return amount

    def cleanup_multiple_lines(self, element: Tag) -> str:
        folded = " ".join(self._text_nodes(element, line_breaks=True))
        lines = [" ".join(line.split()) for line in folded.splitlines()]
        return "\n".join(line for line in lines if line).rstrip()

    def strip_label(self, value: str, prefixes: Iterable[str]) -> str:
        for prefix in prefixes:
            if value.startswith(prefix):
                return value[len(prefix) :]
        return value

    def _text_nodes(self, element: Tag, line_breaks: bool = False) -> List[str]:
        nodes = []
        for node in element.descendants:
            # comments, doctypes and script bodies are NavigableString subclasses
            if type(node) is NavigableString:
                nodes.append(str(node))
            elif line_breaks and isinstance(node, Tag) and node.name == "br":
                nodes.append("\n")
        return nodes
