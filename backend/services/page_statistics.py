"""Per-page metrics."""
import re
from typing import List, Sequence

from models.analysis import PageStats
from services.segmenter import SENTENCE_BREAK

_WHITESPACE = re.compile(r"\s+")

# Looser than the document-level sentence threshold
MIN_PAGE_SENTENCE_CHARS = 5


class PageStatisticsBuilder:
    """Builds word, character and sentence counts for each page."""

    def build_page(self, page_number: int, text: str) -> PageStats:
        """
        Compute metrics for a single page.

        Words are raw whitespace-delimited chunks (punctuation included), not
        tokenizer output, so page totals need not add up to the document's
        word count.
        """
        words = [chunk for chunk in _WHITESPACE.split(text) if chunk]
        sentences = [
            fragment for fragment in SENTENCE_BREAK.split(text)
            if len(fragment.strip()) > MIN_PAGE_SENTENCE_CHARS
        ]
        return PageStats(
            page=page_number,
            word_count=len(words),
            char_count=len(text),
            sentence_count=len(sentences)
        )

    def build(self, pages: Sequence[str]) -> List[PageStats]:
        """Metrics for every page, in input order, numbered from 1."""
        return [self.build_page(index + 1, text) for index, text in enumerate(pages)]
