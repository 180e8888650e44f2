"""
Lexicon-based sentiment scoring.

Counts hits against the positive and negative word lists and converts them
to percentages plus an overall label. The label only leaves "neutral" when
one side outweighs the other by more than DOMINANCE_RATIO.
"""

import logging
from typing import Sequence, Tuple

from models.analysis import NEGATIVE, NEUTRAL, POSITIVE, SentimentScore
from services.lexicons import DEFAULT_LEXICON, Lexicon

logger = logging.getLogger(__name__)

DOMINANCE_RATIO = 1.2


class SentimentScorer:
    """Classifies the overall tone of a token stream."""

    def __init__(self, lexicon: Lexicon = DEFAULT_LEXICON):
        self.lexicon = lexicon

    def count_hits(self, tokens: Sequence[str]) -> Tuple[int, int]:
        """
        Count positive and negative lexicon hits.

        Each list is checked independently.

        Returns:
            (positive_count, negative_count)
        """
        positive_count = 0
        negative_count = 0
        for token in tokens:
            if token in self.lexicon.positive_words:
                positive_count += 1
            if token in self.lexicon.negative_words:
                negative_count += 1
        return positive_count, negative_count

    def score(self, tokens: Sequence[str]) -> SentimentScore:
        """
        Score the tokens.

        Args:
            tokens: Unfiltered tokens from the tokenizer

        Returns:
            SentimentScore whose three percentages sum to 100
        """
        positive_count, negative_count = self.count_hits(tokens)
        total = (positive_count + negative_count) or 1

        positive_pct = round(100 * positive_count / total)
        negative_pct = round(100 * negative_count / total)
        neutral_pct = max(0, 100 - positive_pct - negative_pct)

        if positive_count > negative_count * DOMINANCE_RATIO:
            overall = POSITIVE
        elif negative_count > positive_count * DOMINANCE_RATIO:
            overall = NEGATIVE
        else:
            overall = NEUTRAL

        logger.debug(
            f"Sentiment: positive_hits={positive_count}, negative_hits={negative_count}, "
            f"overall={overall}"
        )

        return SentimentScore(
            positive=positive_pct,
            negative=negative_pct,
            neutral=neutral_pct,
            overall=overall,
            positive_count=positive_count,
            negative_count=negative_count
        )
