"""Data models for DocLens."""
from .document import Document, Page
from .analysis import AnalysisReport, PageStats, SentimentScore, WordFrequency
from .api import (
    AnalyzeRequest,
    AnalysisResponse,
    DocumentSummary,
    SummaryResponse,
    SummarySection,
    TokenUsage,
)

__all__ = [
    "Document",
    "Page",
    "AnalysisReport",
    "PageStats",
    "SentimentScore",
    "WordFrequency",
    "AnalyzeRequest",
    "AnalysisResponse",
    "DocumentSummary",
    "SummaryResponse",
    "SummarySection",
    "TokenUsage",
]
