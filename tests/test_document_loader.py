"""Unit tests for DocumentLoader."""
import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'backend'))

import fitz  # PyMuPDF
import pytest
from models.document import Document
from services.document_loader import (
    DocumentExtractionError,
    DocumentLoader,
    NO_TEXT_MESSAGE,
    UnsupportedDocumentError,
    ensure_text,
)


def make_pdf(page_texts):
    """Build an in-memory PDF with one page per entry (empty string = blank page)."""
    pdf_document = fitz.open()
    for text in page_texts:
        page = pdf_document.new_page()
        if text:
            page.insert_text((72, 72), text)
    data = pdf_document.tobytes()
    pdf_document.close()
    return data


@pytest.fixture
def loader():
    return DocumentLoader()


class TestLoadBytes:
    """Tests for PDF extraction from memory."""

    def test_extracts_pages_in_order(self, loader):
        data = make_pdf(["Hello world", "Second page text"])
        document = loader.load_bytes(data, "report.pdf")

        assert document.filename == "report.pdf"
        assert document.file_size == len(data)
        assert document.total_pages == 2
        assert document.page_texts == ("Hello world", "Second page text")
        assert [page.page_number for page in document.pages] == [1, 2]
        assert document.full_text == "Hello world\n\nSecond page text"

    def test_blank_page_kept_as_empty_text(self, loader):
        document = loader.load_bytes(make_pdf(["Some content", ""]), "mixed.pdf")
        assert document.page_texts == ("Some content", "")

    def test_extension_is_case_insensitive(self, loader):
        document = loader.load_bytes(make_pdf(["Upper case name"]), "REPORT.PDF")
        assert document.total_pages == 1

    def test_rejects_non_pdf_name(self, loader):
        with pytest.raises(UnsupportedDocumentError) as exc_info:
            loader.load_bytes(make_pdf(["text"]), "notes.txt")
        assert exc_info.value.too_large is False

    def test_rejects_oversized_file(self):
        loader = DocumentLoader(max_file_size=10)
        with pytest.raises(UnsupportedDocumentError) as exc_info:
            loader.load_bytes(b"x" * 11, "big.pdf")
        assert exc_info.value.too_large is True

    def test_corrupt_bytes(self, loader):
        with pytest.raises(DocumentExtractionError):
            loader.load_bytes(b"this is definitely not a pdf", "broken.pdf")

    def test_no_text(self, loader):
        with pytest.raises(DocumentExtractionError, match="No text found"):
            loader.load_bytes(make_pdf(["", ""]), "scanned.pdf")


def test_load_file(loader, tmp_path):
    path = tmp_path / "from_disk.pdf"
    path.write_bytes(make_pdf(["Text on disk"]))

    document = loader.load_file(str(path))

    assert document.filename == "from_disk.pdf"
    assert document.page_texts == ("Text on disk",)


class TestEnsureText:
    """Tests for the no-text guard."""

    def test_passes_document_with_text(self):
        document = Document.from_texts(["", "content"], filename="a.pdf")
        assert ensure_text(document) is document

    def test_rejects_whitespace_only(self):
        with pytest.raises(DocumentExtractionError) as exc_info:
            ensure_text(Document.from_texts(["  ", "\n"], filename="a.pdf"))
        assert str(exc_info.value) == NO_TEXT_MESSAGE
