"""Static word lists used for frequency filtering and sentiment scoring."""
from dataclasses import dataclass
from typing import FrozenSet, Iterable, Optional

# Common function words suppressed from ranked frequency lists
STOP_WORDS: FrozenSet[str] = frozenset([
    "the", "be", "to", "of", "and", "a", "in", "that", "have", "it", "for", "not", "on", "with",
    "he", "as", "you", "do", "at", "this", "but", "his", "by", "from", "they", "we", "say", "her",
    "she", "or", "an", "will", "my", "one", "all", "would", "there", "their", "what", "so", "up",
    "out", "if", "about", "who", "get", "which", "go", "me", "when", "make", "can", "like", "time",
    "no", "just", "him", "know", "take", "people", "into", "year", "your", "good", "some", "could",
    "them", "see", "other", "than", "then", "now", "look", "only", "come", "its", "over", "think",
    "also", "back", "after", "use", "two", "how", "our", "work", "first", "well", "way", "even",
    "new", "want", "because", "any", "these", "give", "day", "most", "us", "is", "was", "are",
    "were", "been", "being", "has", "had", "did", "does", "doing", "until", "while", "against",
    "between", "through", "during", "before", "above", "below", "down", "off", "under", "again",
    "further", "once", "here", "where", "why", "both", "each", "few", "more", "such", "nor",
    "same", "too", "very", "should", "i", "myself", "ours", "ourselves", "yours", "yourself",
    "himself", "hers", "herself", "itself", "theirs", "themselves", "whom", "those", "am",
    "having",
])

POSITIVE_WORDS: FrozenSet[str] = frozenset([
    "good", "great", "excellent", "outstanding", "positive", "success", "successful", "improve",
    "improvement", "benefit", "beneficial", "effective", "efficient", "achieve", "achievement",
    "growth", "increase", "gain", "profit", "opportunity", "strong", "best", "better", "high",
    "superior", "advantage", "innovation", "innovative", "progress", "valuable", "value",
    "significant", "remarkable", "exceptional", "impressive", "robust", "sustainable", "leading",
])

NEGATIVE_WORDS: FrozenSet[str] = frozenset([
    "bad", "poor", "negative", "fail", "failure", "problem", "issue", "challenge", "risk", "concern",
    "decrease", "decline", "loss", "deficit", "weak", "low", "inferior", "disadvantage", "threat",
    "crisis", "difficult", "difficulty", "complex", "complexity", "costly", "expensive", "limited",
    "uncertain", "uncertainty", "adverse", "critical", "serious", "severe", "obstacle", "barrier",
    "constraint", "shortage", "delay", "reduce", "reduction",
])


@dataclass(frozen=True)
class Lexicon:
    """
    Bundle of the three word sets consumed by the analysis services.

    Tests and callers can substitute alternate word lists without touching
    the scoring or ranking logic.
    """
    stop_words: FrozenSet[str] = STOP_WORDS
    positive_words: FrozenSet[str] = POSITIVE_WORDS
    negative_words: FrozenSet[str] = NEGATIVE_WORDS

    @classmethod
    def from_words(
        cls,
        stop_words: Optional[Iterable[str]] = None,
        positive_words: Optional[Iterable[str]] = None,
        negative_words: Optional[Iterable[str]] = None,
    ) -> "Lexicon":
        """Build a lexicon from arbitrary iterables, lowercasing every entry."""
        def normalize(words: Optional[Iterable[str]], default: FrozenSet[str]) -> FrozenSet[str]:
            if words is None:
                return default
            return frozenset(word.lower() for word in words)

        return cls(
            stop_words=normalize(stop_words, STOP_WORDS),
            positive_words=normalize(positive_words, POSITIVE_WORDS),
            negative_words=normalize(negative_words, NEGATIVE_WORDS),
        )


DEFAULT_LEXICON = Lexicon()
