"""Unigram and bigram frequency ranking."""
import logging
from collections import Counter
from typing import Dict, List, Sequence

from config import TOP_BIGRAMS_LIMIT, TOP_WORDS_LIMIT
from models.analysis import WordFrequency
from services.lexicons import DEFAULT_LEXICON, Lexicon
from services.tokenizer import clean_token

logger = logging.getLogger(__name__)

# Cleaned terms must be longer than this to be ranked
MIN_TERM_LENGTH = 2


class FrequencyAggregator:
    """Counts and ranks informative words and word pairs."""

    def __init__(
        self,
        lexicon: Lexicon = DEFAULT_LEXICON,
        word_limit: int = TOP_WORDS_LIMIT,
        bigram_limit: int = TOP_BIGRAMS_LIMIT
    ):
        """
        Initialize FrequencyAggregator.

        Args:
            lexicon: Word lists; only the stop words are used here
            word_limit: Maximum number of ranked unigrams
            bigram_limit: Maximum number of ranked bigrams
        """
        self.lexicon = lexicon
        self.word_limit = word_limit
        self.bigram_limit = bigram_limit

    def _is_rankable(self, term: str) -> bool:
        return len(term) > MIN_TERM_LENGTH and term not in self.lexicon.stop_words

    def count_words(self, tokens: Sequence[str]) -> Dict[str, int]:
        """
        Count cleaned, non-stop-word tokens.

        Returns:
            Mapping of term to count, in first-seen order
        """
        counts: Counter = Counter()
        for token in tokens:
            term = clean_token(token)
            if self._is_rankable(term):
                counts[term] += 1
        return counts

    def count_bigrams(self, tokens: Sequence[str]) -> Dict[str, int]:
        """
        Count adjacent token pairs where both members pass the filter.

        Pairs are taken over the unfiltered token stream, so a stop word
        between two content words prevents them from forming a bigram.

        Returns:
            Mapping of "first second" to count, in first-seen order
        """
        counts: Counter = Counter()
        for first, second in zip(tokens, tokens[1:]):
            left = clean_token(first)
            right = clean_token(second)
            if self._is_rankable(left) and self._is_rankable(right):
                counts[f"{left} {right}"] += 1
        return counts

    @staticmethod
    def rank(counts: Dict[str, int], limit: int) -> List[WordFrequency]:
        """
        Order terms by descending count, keeping first-seen order on ties.

        Args:
            counts: Insertion-ordered term counts
            limit: Maximum entries to return

        Returns:
            Ranked WordFrequency list of length <= limit
        """
        # sorted() is stable, so equal counts keep their insertion order
        ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
        return [WordFrequency(word=word, count=count) for word, count in ranked[:limit]]

    def top_words(self, tokens: Sequence[str]) -> List[WordFrequency]:
        """Ranked unigrams, capped at word_limit."""
        counts = self.count_words(tokens)
        logger.debug(f"Counted {len(counts)} distinct rankable words")
        return self.rank(counts, self.word_limit)

    def top_bigrams(self, tokens: Sequence[str]) -> List[WordFrequency]:
        """Ranked bigrams, capped at bigram_limit."""
        counts = self.count_bigrams(tokens)
        logger.debug(f"Counted {len(counts)} distinct bigrams")
        return self.rank(counts, self.bigram_limit)
