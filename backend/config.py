"""Configuration management for DocLens document analysis service."""
import os
import logging
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# API Keys
GROQ_API_KEY = os.getenv("GROQ_API_KEY")

# Server Configuration
PORT = int(os.getenv("PORT", "8000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("LOG_FORMAT", "text")  # "text" or "json"

# CORS Configuration
CORS_ORIGINS = os.getenv(
    "CORS_ORIGINS",
    "http://localhost:3000,http://localhost:3001"
).split(",")

# Summarization Configuration
SUMMARY_MODEL = os.getenv("SUMMARY_MODEL", "llama-3.3-70b-versatile")
SUMMARY_MAX_TOKENS = int(os.getenv("SUMMARY_MAX_TOKENS", "1000"))
SUMMARY_EXCERPT_CHARS = 24000
SUMMARY_KEYWORDS_LIMIT = 10

# Analysis Configuration
TOP_WORDS_LIMIT = 20
TOP_BIGRAMS_LIMIT = 10
KEY_TOPICS_LIMIT = 8
WORDS_PER_MINUTE = 238
LONGEST_SENTENCE_CHARS = 300
EXCERPT_CHARS = 2000

# Upload Configuration
MAX_FILE_SIZE = 50 * 1024 * 1024  # bytes

# Logging Configuration
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
