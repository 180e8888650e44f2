"""Summarization client for Groq API integration."""
import json
import re
import time
from dataclasses import dataclass
from typing import List, Optional, Dict, Any
from groq import Groq
from groq import RateLimitError, AuthenticationError, APIError, APITimeoutError
from pydantic import ValidationError
import logging

from config import (
    GROQ_API_KEY,
    SUMMARY_EXCERPT_CHARS,
    SUMMARY_KEYWORDS_LIMIT,
    SUMMARY_MAX_TOKENS,
    SUMMARY_MODEL,
)
from models.analysis import AnalysisReport
from models.api import DocumentSummary

logger = logging.getLogger(__name__)

_CODE_FENCE = re.compile(r"```json|```")


@dataclass(frozen=True)
class SummaryRequest:
    """Excerpt and metadata handed to the summarization model."""
    excerpt: str
    file_name: str
    total_pages: int
    total_words: int
    keywords: List[str]


@dataclass
class LLMResponse:
    """Response from LLM generation."""
    text: str
    tokens_input: int
    tokens_output: int
    latency_ms: int
    model_used: str


@dataclass
class LLMError:
    """Structured error response from LLM operations."""
    code: str
    message: str
    details: Dict[str, Any]


class LLMClientError(Exception):
    """Custom exception for LLM client errors with structured error information."""

    def __init__(self, error: LLMError):
        self.error = error
        super().__init__(error.message)


class SummaryParseError(Exception):
    """Raised when the model reply is not a valid summary object."""


def build_summary_request(
    report: AnalysisReport,
    full_text: str,
    excerpt_chars: int = SUMMARY_EXCERPT_CHARS,
    keywords_limit: int = SUMMARY_KEYWORDS_LIMIT
) -> SummaryRequest:
    """
    Select the excerpt and keyword metadata for a summary request.

    Args:
        report: Completed analysis of the document
        full_text: Complete joined page text (not the short preview excerpt)
        excerpt_chars: Maximum characters of text to send
        keywords_limit: Maximum number of ranked keywords to send

    Returns:
        SummaryRequest
    """
    return SummaryRequest(
        excerpt=full_text[:excerpt_chars],
        file_name=report.file_name,
        total_pages=report.total_pages,
        total_words=report.total_words,
        keywords=[entry.word for entry in report.top_words[:keywords_limit]]
    )


def parse_summary(raw: str) -> DocumentSummary:
    """
    Parse a model reply into a DocumentSummary.

    Markdown code fences around the JSON are tolerated.

    Raises:
        SummaryParseError: If the reply is not JSON or misses required fields
    """
    cleaned = _CODE_FENCE.sub("", raw).strip()
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise SummaryParseError(f"Summary is not valid JSON: {e.msg}") from e

    try:
        return DocumentSummary.model_validate(data)
    except ValidationError as e:
        raise SummaryParseError(f"Summary has unexpected structure: {e.error_count()} errors") from e


class SummaryClient:
    """Client for generating structured document summaries through the Groq API."""

    def __init__(self, api_key: Optional[str] = None, model: str = SUMMARY_MODEL):
        """
        Initialize summary client with Groq API key.

        Args:
            api_key: Groq API key (defaults to GROQ_API_KEY from environment)
            model: Model used for summaries
        """
        self.api_key = api_key or GROQ_API_KEY
        if not self.api_key:
            raise ValueError("GROQ_API_KEY must be provided or set in environment")

        self.model = model
        self.client = Groq(api_key=self.api_key)
        logger.info("SummaryClient initialized successfully")

    def generate(
        self,
        prompt: str,
        max_tokens: int = SUMMARY_MAX_TOKENS
    ) -> LLMResponse:
        """
        Generate a summary reply using Groq API.

        Args:
            prompt: Complete summary prompt
            max_tokens: Maximum tokens to generate

        Returns:
            LLMResponse with text, token counts, and latency

        Raises:
            LLMClientError: Structured error with code, message, and details
        """
        model = self.model
        start_time = time.time()

        try:
            logger.debug(f"Generating summary with model: {model}")

            response = self.client.chat.completions.create(
                model=model,
                messages=[
                    {
                        "role": "user",
                        "content": prompt
                    }
                ],
                max_tokens=max_tokens,
                temperature=0.3
            )

            latency_ms = int((time.time() - start_time) * 1000)
            text = response.choices[0].message.content
            tokens_input = response.usage.prompt_tokens
            tokens_output = response.usage.completion_tokens

            logger.info(
                f"Generated summary: model={model}, "
                f"input_tokens={tokens_input}, output_tokens={tokens_output}, "
                f"latency={latency_ms}ms"
            )

            return LLMResponse(
                text=text,
                tokens_input=tokens_input,
                tokens_output=tokens_output,
                latency_ms=latency_ms,
                model_used=model
            )

        except RateLimitError as e:
            raise self._client_error(
                e, start_time, "RATE_LIMIT_ERROR",
                "Rate limit exceeded. Please try again in a few moments.",
                retry_after=60
            )
        except AuthenticationError as e:
            raise self._client_error(
                e, start_time, "AUTHENTICATION_ERROR",
                "Authentication failed. Please check your API key."
            )
        except APITimeoutError as e:
            raise self._client_error(
                e, start_time, "TIMEOUT_ERROR",
                "Request timed out. Please try again."
            )
        except APIError as e:
            raise self._client_error(
                e, start_time, "API_ERROR",
                f"Groq API error: {str(e)}"
            )
        except Exception as e:
            raise self._client_error(
                e, start_time, "UNKNOWN_ERROR",
                f"Unexpected error during generation: {str(e)}",
                error_type=type(e).__name__
            )

    def _client_error(
        self,
        exc: Exception,
        start_time: float,
        code: str,
        message: str,
        **extra_details: Any
    ) -> LLMClientError:
        """Build and log a structured LLMClientError for a failed call."""
        latency_ms = int((time.time() - start_time) * 1000)
        details: Dict[str, Any] = {
            "model": self.model,
            "latency_ms": latency_ms,
            "original_error": str(exc),
        }
        details.update(extra_details)
        error = LLMError(code=code, message=message, details=details)
        logger.error(
            f"{code}: model={self.model}, latency={latency_ms}ms, error={exc}",
            exc_info=True,
            extra={"error_code": error.code, "error_details": error.details}
        )
        return LLMClientError(error)

    @staticmethod
    def build_prompt(request: SummaryRequest) -> str:
        """
        Build the analyst prompt for a summary request.

        Args:
            request: Excerpt plus document metadata

        Returns:
            Complete prompt string
        """
        keywords = ", ".join(request.keywords)

        prompt = f"""You are an expert document analyst. Analyse the following PDF document text and return a structured JSON summary that helps someone quickly understand what this document is about.

Document filename: "{request.file_name}"
Total pages: {request.total_pages}
Total words: {request.total_words}
Top keywords: {keywords}

Document text (may be truncated):
\"\"\"
{request.excerpt}
\"\"\"

Return ONLY valid JSON (no markdown, no backticks, no preamble) in this exact structure:
{{
  "tldr": "One sentence (max 25 words) capturing the absolute essence of this document.",
  "overview": "2-3 sentence paragraph explaining what this document is, its purpose, and key context.",
  "documentType": "One of: Research Paper, Report, Contract, Manual, Article, Book, Presentation, Invoice, Resume, Other",
  "complexity": "One of: Beginner, Intermediate, Advanced, Technical",
  "audience": "Who this document is written for (1 sentence)",
  "keyPoints": [
    "Most important insight or finding #1",
    "Most important insight or finding #2",
    "Most important insight or finding #3",
    "Most important insight or finding #4",
    "Most important insight or finding #5"
  ],
  "sections": [
    {{ "title": "Section or theme name", "summary": "1-2 sentence summary of this section" }},
    {{ "title": "Section or theme name", "summary": "1-2 sentence summary of this section" }},
    {{ "title": "Section or theme name", "summary": "1-2 sentence summary of this section" }}
  ],
  "actionItems": [
    "Concrete takeaway or action item from this document",
    "Another key takeaway"
  ],
  "tags": ["tag1", "tag2", "tag3", "tag4", "tag5"]
}}"""

        return prompt
