"""Document data models."""
from dataclasses import dataclass
from typing import Sequence, Tuple

# Separator placed between page texts when building the full document text
PAGE_SEPARATOR = "\n\n"


@dataclass(frozen=True)
class Page:
    """Represents a single page of extracted text."""
    page_number: int  # 1-indexed
    text: str


@dataclass(frozen=True)
class Document:
    """Represents an extracted document, ready for analysis."""
    filename: str
    file_size: int  # bytes
    pages: Tuple[Page, ...]

    @property
    def total_pages(self) -> int:
        return len(self.pages)

    @property
    def page_texts(self) -> Tuple[str, ...]:
        return tuple(page.text for page in self.pages)

    @property
    def full_text(self) -> str:
        """All page texts joined with a blank-line separator."""
        return PAGE_SEPARATOR.join(self.page_texts)

    @classmethod
    def from_texts(cls, texts: Sequence[str], filename: str = "", file_size: int = 0) -> "Document":
        """Build a document from an ordered sequence of page texts."""
        pages = tuple(
            Page(page_number=index + 1, text=text)
            for index, text in enumerate(texts)
        )
        return cls(filename=filename, file_size=file_size, pages=pages)
