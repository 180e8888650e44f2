"""Unit tests for AnalysisEngine."""
import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'backend'))

import dataclasses
import pytest
from models.document import Document
from services.analysis_engine import AnalysisEngine, NO_SUMMARY_TEXT
from services.lexicons import Lexicon


SUMMARY_TEXT = (
    "The quarterly report shows that revenue increased across every major region. "
    "Short one here. "
    "Operating margins improved because the company reduced its overall logistics costs. "
    "A third long sentence that also has more than eight words in it."
)

SAMPLE_TEXTS = [
    [""],
    ["word word word test test example"],
    [SUMMARY_TEXT],
    ["Good news: profits grew. Bad news: risk increased."],
    ["Risk, risk and more risk! The outlook is poor and uncertain.", "Still, growth is strong."],
    ["Profits rose - 42 % & more !!!", "", "Another page with innovative, valuable, robust ideas."],
]


@pytest.fixture
def engine():
    """Create AnalysisEngine with the default lexicon."""
    return AnalysisEngine()


def analyze(engine, *pages, filename="sample.pdf", file_size=0):
    return engine.analyze(Document.from_texts(list(pages), filename=filename, file_size=file_size))


class TestEmptyInput:
    """Empty documents degrade to zero/neutral defaults."""

    def test_empty_page(self, engine):
        report = analyze(engine, "")

        assert report.total_words == 0
        assert report.total_sentences == 0
        assert report.total_paragraphs == 0
        assert report.unique_words == 0
        assert report.vocabulary_richness == 0
        assert report.text_density == 0
        assert report.reading_time_minutes == 1
        assert report.top_words == ()
        assert report.top_bigrams == ()
        assert report.key_topics == ()
        assert report.sentiment.overall == "neutral"
        assert report.sentiment.neutral == 100
        assert report.summary == NO_SUMMARY_TEXT
        assert report.longest_sentence == ""
        assert report.extracted_text == ""
        assert len(report.page_stats) == 1

    def test_no_pages(self, engine):
        report = analyze(engine)
        assert report.total_pages == 0
        assert report.page_stats == ()
        assert report.avg_words_per_page == 0


class TestRankedOutput:
    """Rankings and topics."""

    def test_single_page_word_ranking(self, engine):
        report = analyze(engine, "word word word test test example")

        assert [(w.word, w.count) for w in report.top_words] == [("word", 3), ("test", 2), ("example", 1)]
        assert report.key_topics == ("Word", "Test", "Example")
        assert report.total_words == 6
        assert report.unique_words == 3
        assert report.vocabulary_richness == 50

    def test_unpunctuated_text_has_no_sentences(self, engine):
        report = analyze(engine, "word word word test test example")
        assert report.total_sentences == 0
        assert report.avg_sentence_length == 6
        assert report.summary == NO_SUMMARY_TEXT

    def test_key_topics_capped_at_eight(self, engine):
        text = " ".join(f"topic{chr(97 + i)}" for i in range(12))
        report = analyze(engine, text)
        assert len(report.key_topics) == 8
        assert report.key_topics[0] == "Topica"

    def test_custom_lexicon(self):
        engine = AnalysisEngine(lexicon=Lexicon.from_words(stop_words=["word"]))
        report = analyze(engine, "word word word test test example")
        assert [w.word for w in report.top_words] == ["test", "example"]
        # Stop words still count toward totals
        assert report.total_words == 6


class TestDerivedMetrics:
    """Aggregate figures."""

    def test_page_word_count_differs_from_token_count(self, engine):
        """Punctuation-only chunks count as page words but never become tokens."""
        report = analyze(engine, "Profits rose - 42 % & more !!!")

        assert report.page_stats[0].word_count == 8
        assert report.total_words == 3
        assert report.page_stats[0].word_count != report.total_words

    def test_chars_and_density(self, engine):
        report = analyze(engine, "ab cd", "ef")
        # Full text is "ab cd\n\nef": 6 visible characters out of 9
        assert report.total_chars == 6
        assert report.text_density == 67

    def test_pages_become_paragraphs(self, engine):
        report = analyze(engine, "One.", "Two.")
        assert report.total_paragraphs == 2
        assert report.total_pages == 2

    def test_summary_and_longest_sentence(self, engine):
        report = analyze(engine, SUMMARY_TEXT)

        assert report.total_sentences == 4
        assert report.summary == (
            "The quarterly report shows that revenue increased across every major region. "
            "Operating margins improved because the company reduced its overall logistics costs."
        )
        assert report.longest_sentence == "A third long sentence that also has more than eight words in it"

    def test_longest_sentence_truncated(self, engine):
        sentence = " ".join(["alphabet"] * 60) + "."
        report = analyze(engine, sentence)
        assert len(report.longest_sentence) == 300

    def test_extracted_text_truncated(self, engine):
        report = analyze(engine, "x" * 1500, "y" * 1500)
        assert len(report.extracted_text) == 2000
        assert report.extracted_text == ("x" * 1500 + "\n\n" + "y" * 1500)[:2000]

    def test_reading_time_and_averages(self, engine):
        report = analyze(engine, " ".join(["analysis"] * 476) + ".")
        assert report.total_words == 476
        assert report.reading_time_minutes == 2
        assert report.avg_words_per_page == 476
        assert report.avg_sentence_length == 476

    def test_half_values_round_up(self, engine):
        """1 unique word in 8 is 12.5%; 595 words is 2.5 minutes."""
        report = analyze(engine, "word " * 8)
        assert report.vocabulary_richness == 13
        assert report.avg_sentence_length == 8

        report = analyze(engine, " ".join(["analysis"] * 595) + ".", "")
        assert report.reading_time_minutes == 3
        # 595 words over 2 pages is 297.5
        assert report.avg_words_per_page == 298

    def test_trailing_fragment_counts_as_sentence(self, engine):
        report = analyze(engine, "First full sentence here. Final sentence without a period")
        assert report.total_sentences == 2
        assert report.longest_sentence == "Final sentence without a period"

    def test_file_metadata_is_carried(self, engine):
        report = analyze(engine, "text", filename="q3.pdf", file_size=2048)
        assert report.file_name == "q3.pdf"
        assert report.file_size == 2048

    def test_sentiment_of_mixed_news(self, engine):
        report = analyze(engine, "Good news: profits grew. Bad news: risk increased.")
        assert report.sentiment.positive_count == 1
        assert report.sentiment.negative_count == 2
        assert report.sentiment.overall == "negative"
        assert report.total_sentences == 2


class TestProperties:
    """Invariants that hold for every document."""

    @pytest.mark.parametrize("pages", SAMPLE_TEXTS)
    def test_invariants(self, engine, pages):
        report = analyze(engine, *pages)

        assert 0 <= report.vocabulary_richness <= 100
        assert report.unique_words <= report.total_words
        sentiment = report.sentiment
        assert sentiment.positive + sentiment.negative + sentiment.neutral == 100
        assert min(sentiment.positive, sentiment.negative, sentiment.neutral) >= 0

        assert len(report.top_words) <= 20
        assert len(report.top_bigrams) <= 10
        for ranked in (report.top_words, report.top_bigrams):
            counts = [entry.count for entry in ranked]
            assert counts == sorted(counts, reverse=True)

        assert [stat.page for stat in report.page_stats] == list(range(1, len(pages) + 1))

    @pytest.mark.parametrize("pages", SAMPLE_TEXTS)
    def test_idempotent(self, engine, pages):
        first = analyze(engine, *pages)
        second = analyze(engine, *pages)
        assert first == second
        assert dataclasses.asdict(first) == dataclasses.asdict(second)

    def test_report_is_immutable(self, engine):
        report = analyze(engine, "some text")
        with pytest.raises(dataclasses.FrozenInstanceError):
            report.total_words = 10
