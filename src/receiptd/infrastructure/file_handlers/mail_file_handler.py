import logging
import os

from receiptd.domain.exceptions import FileTooLargeError, InputFileError

logger = logging.getLogger(__name__)


class MailFileHandler:
    """Reads notification mail files and writes rendered PDFs"""

    def __init__(self, max_file_size: int = 5_000_000, encoding: str = "utf-8"):
        self.max_file_size = max_file_size
        self.encoding = encoding

    def validate_content(self, file_content: bytes) -> None:
        if len(file_content) > self.max_file_size:
            raise FileTooLargeError(
                f"File size {len(file_content)} exceeds maximum {self.max_file_size}"
            )
        if not file_content.strip():
            raise InputFileError("File is empty")

    def decode(self, file_content: bytes) -> str:
        self.validate_content(file_content)
        return file_content.decode(self.encoding, errors="replace")

    def read_file(self, path: str) -> str:
        try:
            with open(path, "rb") as f:
                file_content = f.read()
        except OSError as e:
            raise InputFileError(f"Could not read `{path}`: {e}") from e
        return self.decode(file_content)

    def output_path(self, input_path: str, output_dir: str) -> str:
        stem = os.path.splitext(os.path.basename(input_path))[0]
        return os.path.join(output_dir, f"{stem}.pdf")

    def write_pdf(self, pdf_bytes: bytes, output_path: str) -> None:
        directory = os.path.dirname(output_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(output_path, "wb") as f:
            f.write(pdf_bytes)

    def quarantine(self, path: str, error_code: str) -> str:
        """Rename a file that failed so it is not picked up again"""
        failed_path = f"{path}.{error_code}.failed"
        os.replace(path, failed_path)
        logger.warning(f"Quarantined {path} as {failed_path}")
        return failed_path
