"""Document loading service for PDF text extraction."""
import logging
import os
from typing import List

import fitz  # PyMuPDF

from config import MAX_FILE_SIZE
from models.document import Document

logger = logging.getLogger(__name__)

NO_TEXT_MESSAGE = "No text found. The PDF may be scanned or image-based."


class DocumentLoadError(Exception):
    """Base error for documents that cannot be turned into analysable text."""


class UnsupportedDocumentError(DocumentLoadError):
    """Raised for files with the wrong type or size."""

    def __init__(self, message: str, too_large: bool = False):
        self.too_large = too_large
        super().__init__(message)


class DocumentExtractionError(DocumentLoadError):
    """Raised when a PDF cannot be read or contains no text."""


def ensure_text(document: Document) -> Document:
    """
    Reject documents whose pages are all blank.

    Raises:
        DocumentExtractionError: If no page contains non-whitespace text
    """
    if not document.full_text.strip():
        logger.warning(f"No extractable text in {document.filename}")
        raise DocumentExtractionError(NO_TEXT_MESSAGE)
    return document


class DocumentLoader:
    """Extracts page-by-page text from PDF files."""

    def __init__(self, max_file_size: int = MAX_FILE_SIZE):
        """
        Initialize DocumentLoader.

        Args:
            max_file_size: Largest accepted file in bytes
        """
        self.max_file_size = max_file_size

    def validate(self, filename: str, file_size: int) -> None:
        """
        Check filename extension and size before extraction.

        Raises:
            UnsupportedDocumentError: For non-PDF names or oversized files
        """
        if not filename.lower().endswith(".pdf"):
            raise UnsupportedDocumentError("Please upload a PDF file.")
        if file_size > self.max_file_size:
            limit_mb = self.max_file_size // (1024 * 1024)
            raise UnsupportedDocumentError(f"File size must be under {limit_mb}MB.", too_large=True)

    def load_bytes(self, data: bytes, filename: str) -> Document:
        """
        Load a PDF from memory.

        Args:
            data: Raw PDF bytes
            filename: Original file name

        Returns:
            Document with one page per PDF page

        Raises:
            UnsupportedDocumentError: If validation fails
            DocumentExtractionError: If the PDF is unreadable or has no text
        """
        self.validate(filename, len(data))

        try:
            pdf_document = fitz.open(stream=data, filetype="pdf")
        except Exception as e:
            logger.error(f"Failed to open PDF {filename}: {str(e)}")
            raise DocumentExtractionError(f"Could not read PDF: {str(e)}") from e

        try:
            texts = self._extract_pages(pdf_document)
        except Exception as e:
            logger.error(f"Failed to extract text from {filename}: {str(e)}", exc_info=True)
            raise DocumentExtractionError(f"Could not extract text: {str(e)}") from e
        finally:
            pdf_document.close()

        document = Document.from_texts(texts, filename=filename, file_size=len(data))
        logger.info(f"Loaded {filename}: {document.total_pages} pages")
        return ensure_text(document)

    def load_file(self, filepath: str) -> Document:
        """Load a PDF from disk."""
        with open(filepath, "rb") as handle:
            data = handle.read()
        return self.load_bytes(data, os.path.basename(filepath))

    def _extract_pages(self, pdf_document) -> List[str]:
        """Page texts with whitespace runs collapsed to single spaces."""
        texts = []
        for page_num in range(len(pdf_document)):
            page = pdf_document[page_num]
            texts.append(" ".join(page.get_text().split()))
        return texts
