"""Word tokenization for document analysis."""
import re
from typing import List

_NON_WORD_CHARS = re.compile(r"[^a-z\s'-]")
_WHITESPACE = re.compile(r"\s+")
# One leading and one trailing apostrophe/hyphen
_EDGE_PUNCTUATION = re.compile(r"^['-]|['-]$")


def tokenize(text: str) -> List[str]:
    """
    Split text into normalized word tokens.

    Lowercases the text, replaces anything that is not a letter, whitespace,
    apostrophe or hyphen with a space, then splits on whitespace runs.
    Tokens of a single character are dropped. Edge apostrophes/hyphens are
    kept here; see clean_token().

    Args:
        text: Raw document text

    Returns:
        Tokens in document order (empty for empty input)
    """
    normalized = _NON_WORD_CHARS.sub(" ", text.lower())
    return [token for token in _WHITESPACE.split(normalized) if len(token) > 1]


def clean_token(token: str) -> str:
    """Strip one leading and one trailing apostrophe or hyphen."""
    return _EDGE_PUNCTUATION.sub("", token)
