from .lexicon import DEFAULT_LEXICON, load_lexicon, validate_lexicon
from .scorer import (
    LineScore,
    SentimentResult,
    SentimentScorer,
    analyze,
    classify,
    split_lines,
    tokenize,
)

__all__ = [
    "DEFAULT_LEXICON",
    "load_lexicon",
    "validate_lexicon",
    "LineScore",
    "SentimentResult",
    "SentimentScorer",
    "analyze",
    "classify",
    "split_lines",
    "tokenize",
]
