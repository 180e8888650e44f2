"""Main entry point for DocLens document analysis API."""
import logging
from dataclasses import asdict
from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware

from config import CORS_ORIGINS, LOG_FORMAT, LOG_LEVEL, PORT
from logger import setup_logging
from models.analysis import AnalysisReport
from models.api import AnalyzeRequest, AnalysisResponse, SummaryResponse, TokenUsage
from models.document import Document
from services.analysis_engine import AnalysisEngine
from services.document_loader import (
    DocumentExtractionError,
    DocumentLoader,
    DocumentLoadError,
    UnsupportedDocumentError,
    ensure_text,
)
from services.formatting import format_file_size
from services.summary_client import (
    LLMClientError,
    SummaryClient,
    SummaryParseError,
    build_summary_request,
    parse_summary,
)

if LOG_FORMAT == "json":
    setup_logging(LOG_LEVEL)

# Initialize logging
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="DocLens",
    description="Statistical profiling and summarization of PDF documents",
    version="1.0.0"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Initialize services (will be done on startup)
analysis_engine: AnalysisEngine = None
document_loader: DocumentLoader = None
summary_client: SummaryClient = None


@app.on_event("startup")
async def startup_event():
    """Initialize services on startup."""
    global analysis_engine, document_loader, summary_client

    logger.info("Initializing DocLens services...")

    try:
        analysis_engine = AnalysisEngine()
        logger.info("Initialized AnalysisEngine")

        document_loader = DocumentLoader()
        logger.info("Initialized DocumentLoader")
    except Exception as e:
        logger.error(f"Failed to initialize services: {e}", exc_info=True)
        raise

    # Summaries are optional; analysis still works without an API key
    try:
        summary_client = SummaryClient()
        logger.info("Initialized SummaryClient")
    except ValueError as e:
        summary_client = None
        logger.warning(f"Summaries disabled: {e}")

    logger.info("All services initialized successfully")


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "message": "DocLens API"}


@app.get("/health")
async def health():
    """Detailed health check."""
    return {
        "status": "healthy",
        "service": "doclens",
        "version": "1.0.0",
        "summaries_enabled": summary_client is not None
    }


@app.post("/analyze", response_model=AnalysisResponse)
def analyze_endpoint(request: AnalyzeRequest) -> AnalysisResponse:
    """
    Analyse pre-extracted page texts.

    Args:
        request: AnalyzeRequest with filename, file size and page texts

    Returns:
        AnalysisResponse with counts, rankings, sentiment and page metrics

    Raises:
        HTTPException: 422 when no page contains text
    """
    document = Document.from_texts(request.pages, filename=request.filename, file_size=request.file_size)
    report = _run_analysis(document)
    return _to_response(report)


@app.post("/analyze/pdf", response_model=AnalysisResponse)
async def analyze_pdf_endpoint(
    request: Request,
    filename: str = Query(..., min_length=1)
) -> AnalysisResponse:
    """
    Extract and analyse a PDF sent as the raw request body.

    Args:
        request: Request whose body is the PDF file
        filename: Original file name (must end in .pdf)

    Returns:
        AnalysisResponse for the extracted document

    Raises:
        HTTPException: 415/413 for unsupported files, 422 for unreadable or empty PDFs
    """
    data = await request.body()
    logger.info(f"Received PDF upload: {filename} ({format_file_size(len(data))})")

    try:
        document = document_loader.load_bytes(data, filename)
    except DocumentLoadError as e:
        raise _load_error_to_http(e)

    report = _run_analysis(document)
    return _to_response(report)


@app.post("/summarise", response_model=SummaryResponse)
def summarise_endpoint(request: AnalyzeRequest) -> SummaryResponse:
    """
    Generate a structured summary of pre-extracted page texts.

    The document is analysed first so the model receives the top keywords
    alongside a truncated text excerpt.

    Raises:
        HTTPException: 503 when summaries are disabled or the LLM call fails,
            502 when the model reply cannot be parsed
    """
    if summary_client is None:
        raise HTTPException(status_code=503, detail="Summaries are disabled: GROQ_API_KEY is not configured")

    document = Document.from_texts(request.pages, filename=request.filename, file_size=request.file_size)
    report = _run_analysis(document)

    summary_request = build_summary_request(report, document.full_text)
    prompt = SummaryClient.build_prompt(summary_request)

    try:
        llm_response = summary_client.generate(prompt)
        summary = parse_summary(llm_response.text)
    except LLMClientError as e:
        logger.error(f"LLM client error: {e.error.message}")
        raise HTTPException(
            status_code=503,
            detail={
                "error": {
                    "code": e.error.code,
                    "message": e.error.message,
                    "details": e.error.details
                }
            }
        )
    except SummaryParseError as e:
        logger.error(f"Could not parse summary for {request.filename}: {e}")
        raise HTTPException(status_code=502, detail=str(e))

    return SummaryResponse(
        summary=summary,
        model_used=llm_response.model_used,
        tokens=TokenUsage(
            input=llm_response.tokens_input,
            output=llm_response.tokens_output
        ),
        latency_ms=llm_response.latency_ms,
        keywords=summary_request.keywords,
        excerpt_chars=len(summary_request.excerpt)
    )


def _run_analysis(document: Document) -> AnalysisReport:
    """Reject text-less documents, then analyse."""
    try:
        ensure_text(document)
    except DocumentExtractionError as e:
        raise _load_error_to_http(e)

    try:
        return analysis_engine.analyze(document)
    except Exception as e:
        logger.error(f"Unexpected error analysing {document.filename}: {e}", exc_info=True)
        raise HTTPException(
            status_code=500,
            detail=f"Internal server error: {str(e)}"
        )


def _to_response(report: AnalysisReport) -> AnalysisResponse:
    return AnalysisResponse(
        **asdict(report),
        file_size_label=format_file_size(report.file_size)
    )


def _load_error_to_http(error: DocumentLoadError) -> HTTPException:
    """Map document loading failures to HTTP status codes."""
    if isinstance(error, UnsupportedDocumentError):
        status_code = 413 if error.too_large else 415
    else:
        status_code = 422
    return HTTPException(status_code=status_code, detail=str(error))


if __name__ == "__main__":
    import uvicorn
    logger.info(f"Starting DocLens API on port {PORT}")
    uvicorn.run(app, host="0.0.0.0", port=PORT)
