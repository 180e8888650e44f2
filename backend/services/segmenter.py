"""Sentence and paragraph segmentation."""
import re
from typing import List

SENTENCE_BREAK = re.compile(r"[.!?]+")
PARAGRAPH_BREAK = re.compile(r"\n\n+")

# Fragments this short or shorter are not treated as sentences
MIN_SENTENCE_CHARS = 10


def split_sentences(text: str) -> List[str]:
    """
    Split text into trimmed sentences on runs of '.', '!' or '?'.

    Text with no terminal punctuation anywhere yields no sentences at all.
    Otherwise every fragment counts, including an unterminated trailing one.
    Fragments of MIN_SENTENCE_CHARS characters or fewer are discarded.
    """
    if not SENTENCE_BREAK.search(text):
        return []
    fragments = (fragment.strip() for fragment in SENTENCE_BREAK.split(text))
    return [fragment for fragment in fragments if len(fragment) > MIN_SENTENCE_CHARS]


def split_paragraphs(text: str) -> List[str]:
    """Split text on two or more consecutive newlines, dropping blank parts."""
    return [part for part in PARAGRAPH_BREAK.split(text) if part.strip()]


def count_words(sentence: str) -> int:
    """Number of single-space separated chunks in a sentence."""
    return len(sentence.split(" "))
