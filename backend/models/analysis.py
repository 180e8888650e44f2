"""Analysis result data models."""
from dataclasses import dataclass
from typing import Tuple

POSITIVE = "positive"
NEGATIVE = "negative"
NEUTRAL = "neutral"


@dataclass(frozen=True)
class WordFrequency:
    """A ranked term (single word or space-joined bigram) with its count."""
    word: str
    count: int


@dataclass(frozen=True)
class SentimentScore:
    """
    Coarse sentiment classification of a document.

    Attributes:
        positive: Percentage of sentiment hits that were positive
        negative: Percentage of sentiment hits that were negative
        neutral: Remainder up to 100, never below 0
        overall: One of "positive", "negative" or "neutral"
        positive_count: Raw number of positive lexicon hits
        negative_count: Raw number of negative lexicon hits
    """
    positive: int
    negative: int
    neutral: int
    overall: str
    positive_count: int = 0
    negative_count: int = 0


@dataclass(frozen=True)
class PageStats:
    """Metrics for a single page."""
    page: int  # 1-indexed
    word_count: int
    char_count: int
    sentence_count: int


@dataclass(frozen=True)
class AnalysisReport:
    """Complete statistical profile of one document."""
    file_name: str
    file_size: int
    total_pages: int
    total_words: int
    total_chars: int
    total_sentences: int
    total_paragraphs: int
    avg_words_per_page: int
    avg_sentence_length: int
    reading_time_minutes: int
    top_words: Tuple[WordFrequency, ...]
    top_bigrams: Tuple[WordFrequency, ...]
    sentiment: SentimentScore
    page_stats: Tuple[PageStats, ...]
    key_topics: Tuple[str, ...]
    summary: str
    text_density: int
    unique_words: int
    vocabulary_richness: int
    longest_sentence: str
    extracted_text: str
