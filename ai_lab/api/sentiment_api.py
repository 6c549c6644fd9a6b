"""
Sentiment API router.

Scores each line of the posted text against the configured polarity lexicon.
"""

import logging
from fastapi import APIRouter, Depends, HTTPException

from ai_lab.api.dependencies import get_scorer, get_settings
from ai_lab.config.api_models import SentimentRequest, SentimentResponse
from ai_lab.features.sentiment import SentimentScorer
from ai_lab.utils.config_loader import FullConfig
from ai_lab.validation import InputSanitizer

# ------------------------------------------------------------
# Router & Logger Setup
# ------------------------------------------------------------
router = APIRouter()
logger = logging.getLogger("ai_lab.api.sentiment")


# ------------------------------------------------------------
# Endpoints
# ------------------------------------------------------------
@router.post("/analyze", response_model=SentimentResponse)
async def analyze_sentiment(
    request: SentimentRequest,
    scorer: SentimentScorer = Depends(get_scorer),
    settings: FullConfig = Depends(get_settings),
) -> SentimentResponse:
    """
    Perform sentiment analysis on every non-empty line of the text.

    Args:
        request (SentimentRequest): Raw multi-line text.

    Returns:
        SentimentResponse: Per-line results in input order plus label counts.

    Raises:
        HTTPException: 422 if the text exceeds sentiment.max_input_chars.
    """
    limit = settings.sentiment.max_input_chars
    text = InputSanitizer.sanitize_text(request.text, max_chars=limit)
    if text is None:
        raise HTTPException(status_code=422, detail=f"Text exceeds {limit} characters")

    logger.info(f"Sentiment request received: {len(text)} chars")
    results = scorer.analyze(text)
    return SentimentResponse.from_results(results)
