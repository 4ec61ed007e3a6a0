class ReceiptError(Exception):
    """Base exception for receiptd errors"""

    code = "error"


class ExtractionError(ReceiptError):
    """Raised when an expected structure is missing from the email HTML"""

    code = "extraction"

    def __init__(self, checkpoint: str, detail: str = ""):
        self.checkpoint = checkpoint
        message = f"{self.describe()}: {checkpoint}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)

    def describe(self) -> str:
        return "expected structure not found"


class MissingFragmentError(ExtractionError):
    """Raised when the <html>...</html> fragment cannot be located"""

    code = "missing-html"

    def describe(self) -> str:
        return "no html fragment found"


class MissingBodyError(ExtractionError):
    """Raised when the fragment has no body tag"""

    code = "missing-body"

    def describe(self) -> str:
        return "no body found"


class MissingSpanError(ExtractionError):
    """Raised when the title or date span is missing"""

    code = "missing-span"

    def describe(self) -> str:
        return "span does not exist"


class MissingTableError(ExtractionError):
    """Raised when one of the nine expected tables is missing"""

    code = "missing-table"

    def describe(self) -> str:
        return "table does not exist"


class MissingRowError(ExtractionError):
    """Raised when an expected table row is missing"""

    code = "missing-row"

    def describe(self) -> str:
        return "row does not exist"


class MissingCellError(ExtractionError):
    """Raised when an expected table cell is missing"""

    code = "missing-cell"

    def describe(self) -> str:
        return "cell does not exist"


class ValueParsingError(ReceiptError):
    """Raised when a field expected to be numeric cannot be parsed"""

    code = "bad-value"


class ResourceLoadError(ReceiptError):
    """Raised when a font or the logo cannot be loaded"""

    code = "resource"


class RenderingError(ReceiptError):
    """Raised when the PDF backend rejects a font or fails to save"""

    code = "rendering"


class InputFileError(ReceiptError):
    """Raised when an input file cannot be read"""

    code = "input-file"


class FileTooLargeError(InputFileError):
    """Raised when file exceeds size limit"""

    code = "too-large"
