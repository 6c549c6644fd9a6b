"""Shared FastAPI dependencies."""

from functools import lru_cache

from ai_lab.features.sentiment import SentimentScorer, load_lexicon
from ai_lab.utils.config_loader import FullConfig, load_typed_config
from ai_lab.utils.logger import get_logger

logger = get_logger(__name__)


@lru_cache(maxsize=1)
def get_settings() -> FullConfig:
    return load_typed_config()


@lru_cache(maxsize=1)
def get_scorer() -> SentimentScorer:
    """One scorer per process; the lexicon is read-only once loaded."""
    lexicon_path = get_settings().sentiment.lexicon_path
    if lexicon_path:
        logger.info(f"Using lexicon from {lexicon_path}")
        return SentimentScorer(lexicon=load_lexicon(lexicon_path))
    return SentimentScorer()
