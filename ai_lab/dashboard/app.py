# ai_lab/dashboard/app.py
"""
Streamlit entrypoint.

Usage:
    streamlit run ai_lab/dashboard/app.py
"""

from typing import Optional

import streamlit as st

from ai_lab.dashboard.forecast_panel import ForecastPanel
from ai_lab.dashboard.sentiment_panel import SentimentPanel
from ai_lab.dashboard.ui_components import render_sidebar
from ai_lab.dashboard.utils import get_ui_logger
from ai_lab.features.sentiment import SentimentScorer, load_lexicon
from ai_lab.utils.config_loader import FullConfig, load_typed_config

logger = get_ui_logger("app")


@st.cache_resource
def get_config() -> FullConfig:
    return load_typed_config()


@st.cache_resource
def get_scorer(lexicon_path: Optional[str] = None) -> SentimentScorer:
    if lexicon_path:
        return SentimentScorer(lexicon=load_lexicon(lexicon_path))
    return SentimentScorer()


def main():
    st.set_page_config(page_title="AI Lab: Stock Predictor & Tweet Sentiment", layout="wide")

    st.markdown(
        "<h2 style='text-align:center; margin-bottom:20px;'>AI Lab</h2>",
        unsafe_allow_html=True,
    )

    config = get_config()
    panel_option = render_sidebar()

    if panel_option == "Stock Predictor":
        ForecastPanel(config.forecast).render_forecast()
    else:
        scorer = get_scorer(config.sentiment.lexicon_path)
        SentimentPanel(scorer, config.sentiment).render_sentiment()

    logger.info("Dashboard render complete.")


if __name__ == "__main__":
    main()
