# ai_lab/dashboard/sentiment_panel.py

from typing import List, Optional

import streamlit as st

from ai_lab.dashboard.utils import SAMPLE_TWEETS, get_ui_logger, label_style, results_to_frame
from ai_lab.features.sentiment import SentimentResult, SentimentScorer
from ai_lab.monitoring.error_logging import ErrorComponent, ErrorLogger, FallbackReason
from ai_lab.utils.config_loader import SentimentConfig
from ai_lab.validation import InputSanitizer

# -------------------------------
# Logging configuration
# -------------------------------
logger = get_ui_logger(__name__)

INPUT_KEY = "sentiment_input"
RESULTS_KEY = "sentiment_results"


# -------------------------------
# Sentiment Panel Class
# -------------------------------
class SentimentPanel:
    """
    Tweet sentiment analysis: paste lines, score them, show a results table.

    Results are only recomputed when the Analyze button is pressed; typing
    in the text area does not re-score.
    """

    def __init__(self, scorer: SentimentScorer, config: SentimentConfig):
        self.scorer = scorer
        self.config = config
        self.errors = ErrorLogger(component=ErrorComponent.SENTIMENT_PANEL)
        if INPUT_KEY not in st.session_state:
            st.session_state[INPUT_KEY] = SAMPLE_TWEETS
        if RESULTS_KEY not in st.session_state:
            st.session_state[RESULTS_KEY] = None

    @property
    def results(self) -> Optional[List[SentimentResult]]:
        return st.session_state[RESULTS_KEY]

    def analyze(self, raw: str) -> Optional[List[SentimentResult]]:
        text = InputSanitizer.sanitize_text(raw, max_chars=self.config.max_input_chars)
        if text is None:
            self.errors.log_fallback(
                reason=FallbackReason.INVALID_INPUT,
                context={"chars": len(raw), "limit": self.config.max_input_chars},
                fallback_action="Keeping previous results",
            )
            st.warning(f"Input is too long (limit {self.config.max_input_chars} characters).")
            return None
        results = self.scorer.analyze(text)
        st.session_state[RESULTS_KEY] = results
        return results

    def render_table(self) -> None:
        if self.results is None:
            return
        if not self.results:
            st.info("No non-empty lines to analyze.")
            return

        frame = results_to_frame(self.results, decimals=self.config.comparative_decimals)
        styled = frame.style.map(label_style, subset=["Label"])
        st.dataframe(styled, use_container_width=True, hide_index=True)

    def render_sentiment(self) -> Optional[List[SentimentResult]]:
        """
        Render the sentiment panel.

        Returns:
            Optional[List[SentimentResult]]: Latest results, None before the
            first analysis.
        """
        st.subheader("Twitter Sentiment Analysis")
        raw = st.text_area(
            "Paste tweets (one per line)",
            key=INPUT_KEY,
            height=160,
            placeholder="Paste tweets here, one per line",
        )
        if st.button("Analyze Sentiment", type="primary"):
            self.analyze(raw)
            logger.info("Sentiment analysis triggered from dashboard.")

        self.render_table()
        st.caption("Tip: Lines are treated independently to mimic individual tweets.")
        return self.results
