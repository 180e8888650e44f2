"""Services for DocLens."""
from .tokenizer import tokenize, clean_token
from .segmenter import split_sentences, split_paragraphs
from .lexicons import Lexicon, DEFAULT_LEXICON
from .frequency_aggregator import FrequencyAggregator
from .sentiment_scorer import SentimentScorer
from .page_statistics import PageStatisticsBuilder
from .analysis_engine import AnalysisEngine
from .document_loader import DocumentLoader, DocumentLoadError, DocumentExtractionError, UnsupportedDocumentError
from .summary_client import SummaryClient, SummaryRequest, LLMResponse, LLMError, LLMClientError, SummaryParseError, build_summary_request, parse_summary
from .formatting import format_file_size

__all__ = ['tokenize', 'clean_token', 'split_sentences', 'split_paragraphs', 'Lexicon', 'DEFAULT_LEXICON', 'FrequencyAggregator', 'SentimentScorer', 'PageStatisticsBuilder', 'AnalysisEngine', 'DocumentLoader', 'DocumentLoadError', 'DocumentExtractionError', 'UnsupportedDocumentError', 'SummaryClient', 'SummaryRequest', 'LLMResponse', 'LLMError', 'LLMClientError', 'SummaryParseError', 'build_summary_request', 'parse_summary', 'format_file_size']
