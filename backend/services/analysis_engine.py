"""Analysis engine composing tokenization, ranking, sentiment and page metrics."""
import logging
import math
import re
from typing import List, Sequence

from config import (
    EXCERPT_CHARS,
    KEY_TOPICS_LIMIT,
    LONGEST_SENTENCE_CHARS,
    TOP_BIGRAMS_LIMIT,
    TOP_WORDS_LIMIT,
    WORDS_PER_MINUTE,
)
from models.analysis import AnalysisReport, WordFrequency
from models.document import Document
from services.frequency_aggregator import FrequencyAggregator
from services.lexicons import DEFAULT_LEXICON, Lexicon
from services.page_statistics import PageStatisticsBuilder
from services.segmenter import count_words, split_paragraphs, split_sentences
from services.sentiment_scorer import SentimentScorer
from services.tokenizer import tokenize

logger = logging.getLogger(__name__)

_WHITESPACE_CHAR = re.compile(r"\s")

NO_SUMMARY_TEXT = "No substantial text found."
SUMMARY_SENTENCES = 2
# Sentences need more words than this to be used in the extractive summary
SUMMARY_MIN_WORDS = 8


class AnalysisEngine:
    """
    Produces an AnalysisReport from an extracted document.

    The engine holds no per-call state; one instance can analyse any number
    of documents, from any number of threads.
    """

    def __init__(
        self,
        lexicon: Lexicon = DEFAULT_LEXICON,
        word_limit: int = TOP_WORDS_LIMIT,
        bigram_limit: int = TOP_BIGRAMS_LIMIT
    ):
        """
        Initialize AnalysisEngine.

        Args:
            lexicon: Stop words and sentiment word lists
            word_limit: Maximum ranked unigrams in the report
            bigram_limit: Maximum ranked bigrams in the report
        """
        self.lexicon = lexicon
        self.aggregator = FrequencyAggregator(lexicon, word_limit, bigram_limit)
        self.sentiment_scorer = SentimentScorer(lexicon)
        self.page_builder = PageStatisticsBuilder()

    def analyze(self, document: Document) -> AnalysisReport:
        """
        Analyse a document.

        Never raises for any text input; empty documents produce zero counts,
        neutral sentiment and the fallback summary.

        Args:
            document: Extracted page texts with file metadata

        Returns:
            Immutable AnalysisReport
        """
        full_text = document.full_text
        pages = document.page_texts

        # Step 1: Tokens, sentences, paragraphs
        tokens = tokenize(full_text)
        sentences = split_sentences(full_text)
        paragraphs = split_paragraphs(full_text)

        # Step 2: Ranked frequencies
        top_words = self.aggregator.top_words(tokens)
        top_bigrams = self.aggregator.top_bigrams(tokens)

        # Step 3: Sentiment and page metrics
        sentiment = self.sentiment_scorer.score(tokens)
        page_stats = self.page_builder.build(pages)

        # Step 4: Derived figures
        total_words = len(tokens)
        unique_words = len(set(tokens))
        total_chars = len(_WHITESPACE_CHAR.sub("", full_text))

        report = AnalysisReport(
            file_name=document.filename,
            file_size=document.file_size,
            total_pages=len(pages),
            total_words=total_words,
            total_chars=total_chars,
            total_sentences=len(sentences),
            total_paragraphs=len(paragraphs),
            avg_words_per_page=round_half_up(total_words / max(len(pages), 1)),
            avg_sentence_length=round_half_up(total_words / max(len(sentences), 1)),
            reading_time_minutes=max(1, round_half_up(total_words / WORDS_PER_MINUTE)),
            top_words=tuple(top_words),
            top_bigrams=tuple(top_bigrams),
            sentiment=sentiment,
            page_stats=tuple(page_stats),
            key_topics=tuple(key_topics(top_words)),
            summary=extractive_summary(sentences),
            text_density=round_half_up(100 * total_chars / max(len(full_text), 1)),
            unique_words=unique_words,
            vocabulary_richness=round_half_up(100 * unique_words / max(total_words, 1)),
            longest_sentence=longest_sentence(sentences)[:LONGEST_SENTENCE_CHARS],
            extracted_text=full_text[:EXCERPT_CHARS]
        )

        logger.info(
            f"Analysed {document.filename or '<unnamed>'}: pages={report.total_pages}, "
            f"words={total_words}, sentences={report.total_sentences}, "
            f"sentiment={sentiment.overall}"
        )
        return report


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (12.5 -> 13, 2.5 -> 3)."""
    return math.floor(value + 0.5)


def key_topics(top_words: Sequence[WordFrequency], limit: int = KEY_TOPICS_LIMIT) -> List[str]:
    """Leading ranked words with their first letter capitalized."""
    return [entry.word[:1].upper() + entry.word[1:] for entry in top_words[:limit]]


def longest_sentence(sentences: Sequence[str]) -> str:
    """The sentence with the most words; earliest wins ties. Empty if none."""
    longest = ""
    for sentence in sentences:
        if count_words(sentence) > count_words(longest):
            longest = sentence
    return longest


def extractive_summary(sentences: Sequence[str]) -> str:
    """First two sentences with more than SUMMARY_MIN_WORDS words."""
    picked = [s for s in sentences if count_words(s) > SUMMARY_MIN_WORDS][:SUMMARY_SENTENCES]
    if not picked:
        return NO_SUMMARY_TEXT
    return ". ".join(picked) + "."
