"""API request/response schemas."""
from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field

DocumentType = Literal[
    "Research Paper",
    "Report",
    "Contract",
    "Manual",
    "Article",
    "Book",
    "Presentation",
    "Invoice",
    "Resume",
    "Other",
]

Complexity = Literal["Beginner", "Intermediate", "Advanced", "Technical"]


class AnalyzeRequest(BaseModel):
    """Pre-extracted page texts to analyse."""
    filename: str = Field(..., min_length=1)
    file_size: int = Field(0, ge=0)
    pages: List[str] = Field(..., min_length=1)


class WordFrequencyModel(BaseModel):
    word: str
    count: int


class SentimentModel(BaseModel):
    positive: int
    negative: int
    neutral: int
    overall: Literal["positive", "negative", "neutral"]
    positive_count: int
    negative_count: int


class PageStatsModel(BaseModel):
    page: int
    word_count: int
    char_count: int
    sentence_count: int


class AnalysisResponse(BaseModel):
    """Serialized AnalysisReport."""
    file_name: str
    file_size: int
    file_size_label: str
    total_pages: int
    total_words: int
    total_chars: int
    total_sentences: int
    total_paragraphs: int
    avg_words_per_page: int
    avg_sentence_length: int
    reading_time_minutes: int
    top_words: List[WordFrequencyModel]
    top_bigrams: List[WordFrequencyModel]
    sentiment: SentimentModel
    page_stats: List[PageStatsModel]
    key_topics: List[str]
    summary: str
    text_density: int
    unique_words: int
    vocabulary_richness: int
    longest_sentence: str
    extracted_text: str


class SummarySection(BaseModel):
    title: str
    summary: str


class DocumentSummary(BaseModel):
    """Structured summary returned by the language model."""
    model_config = ConfigDict(populate_by_name=True)

    tldr: str
    overview: str
    document_type: DocumentType = Field(..., alias="documentType")
    complexity: Complexity
    audience: str
    key_points: List[str] = Field(default_factory=list, alias="keyPoints")
    sections: List[SummarySection] = Field(default_factory=list)
    action_items: List[str] = Field(default_factory=list, alias="actionItems")
    tags: List[str] = Field(default_factory=list)


class TokenUsage(BaseModel):
    input: int
    output: int


class SummaryResponse(BaseModel):
    """Summary plus generation metadata."""
    summary: DocumentSummary
    model_used: str
    tokens: TokenUsage
    latency_ms: int
    keywords: List[str]
    excerpt_chars: int
