#ai_lab/features/sentiment/scorer.py
"""
Sentiment Scorer Module

This module defines the SentimentScorer class responsible for scoring
independent lines of text against a word polarity lexicon.

Features:
    - Splits raw text into trimmed, non-empty lines (one tweet per line).
    - Integer score = sum of the polarity of every token in the line.
    - Comparative score = score / total token count (all tokens, not only
      polarity-bearing ones).
    - Discrete labels (positive, neutral, negative) thresholded at +/-1.
    - Lexicon is injected, so tables can be swapped or localised.

Directory Context:
    ai_lab/features/sentiment/
"""

import re
from dataclasses import dataclass
from typing import List, Literal, Mapping, Optional, Tuple

from ai_lab.features.sentiment.lexicon import DEFAULT_LEXICON
from ai_lab.utils.logger import get_logger

logger = get_logger(__name__)

Label = Literal["positive", "neutral", "negative"]

_LINE_BREAK = re.compile(r"\r?\n")
_TOKEN = re.compile(r"[^\W_]+(?:'[^\W_]+)*")


@dataclass(frozen=True)
class LineScore:
    score: int
    comparative: float
    tokens: Tuple[str, ...] = ()


@dataclass(frozen=True)
class SentimentResult:
    """Scored line, in input order."""
    text: str
    score: int
    comparative: float
    label: Label

    def to_dict(self) -> dict:
        return {
            "text": self.text,
            "score": self.score,
            "comparative": self.comparative,
            "label": self.label,
        }


def split_lines(raw: str) -> List[str]:
    """
    Split raw text on line breaks, trim each piece and drop empty ones.

    Args:
        raw (str): Multi-line text as typed or pasted. `\\r\\n` and `\\n`
            are equivalent separators.

    Returns:
        List[str]: Non-empty trimmed lines, order preserved.
    """
    if not raw:
        return []
    return [line.strip() for line in _LINE_BREAK.split(raw) if line.strip()]


def tokenize(line: str) -> List[str]:
    """Lowercase word tokens of a line; punctuation separates tokens."""
    return _TOKEN.findall(line.lower())


def classify(score: int) -> Label:
    """
    Map an integer polarity score to a discrete label.

    Args:
        score (int): Summed lexicon polarity.

    Returns:
        Label: "positive" for score >= 1, "negative" for score <= -1,
        otherwise "neutral".
    """
    if score >= 1:
        return "positive"
    if score <= -1:
        return "negative"
    return "neutral"


class SentimentScorer:
    """
    Lexicon-based sentiment scorer for short independent lines (tweets).

    The lexicon is read-only after construction, so one scorer can be shared
    between callers.

    Example:
        scorer = SentimentScorer()
        scorer.analyze("I love this product!\\nWorst experience ever.")
    """

    def __init__(self, lexicon: Optional[Mapping[str, int]] = None):
        """
        Args:
            lexicon (Mapping[str, int], optional): word -> integer polarity.
                Keys are matched against lowercased tokens. Defaults to the
                bundled DEFAULT_LEXICON.
        """
        self.lexicon: Mapping[str, int] = DEFAULT_LEXICON if lexicon is None else lexicon
        logger.debug(f"SentimentScorer initialized with {len(self.lexicon)} lexicon entries.")

    def score_line(self, line: str) -> LineScore:
        """
        Score a single line.

        Args:
            line (str): One line of text.

        Returns:
            LineScore: integer score, comparative score and the tokens used.
            A line with no tokens scores 0 with comparative 0.0.
        """
        tokens = tokenize(line)
        score = sum(int(self.lexicon.get(token, 0)) for token in tokens)
        comparative = score / len(tokens) if tokens else 0.0
        return LineScore(score=score, comparative=comparative, tokens=tuple(tokens))

    def analyze_line(self, line: str) -> SentimentResult:
        scored = self.score_line(line)
        return SentimentResult(
            text=line,
            score=scored.score,
            comparative=scored.comparative,
            label=classify(scored.score),
        )

    def analyze(self, raw: str) -> List[SentimentResult]:
        """
        Split raw text into lines and score each one.

        Args:
            raw (str): Multi-line text.

        Returns:
            List[SentimentResult]: One result per non-empty trimmed line, in
            input order. Blank input gives [].
        """
        lines = split_lines(raw)
        results = [self.analyze_line(line) for line in lines]

        if results:
            counts = {label: 0 for label in ("positive", "neutral", "negative")}
            for r in results:
                counts[r.label] += 1
            logger.info(
                f"Sentiment analysis completed for {len(results)} lines: "
                f"{counts['positive']} positive, {counts['neutral']} neutral, "
                f"{counts['negative']} negative"
            )
        return results


def analyze(raw: str, lexicon: Optional[Mapping[str, int]] = None) -> List[SentimentResult]:
    """Score every non-empty line of `raw` with a one-off scorer."""
    return SentimentScorer(lexicon=lexicon).analyze(raw)
