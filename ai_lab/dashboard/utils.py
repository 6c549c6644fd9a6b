# ai_lab/dashboard/utils.py

import logging
from typing import List, Optional

import pandas as pd

from ai_lab.features.sentiment import SentimentResult


# -------------------------------
# Logger Function
# -------------------------------
def get_ui_logger(name: Optional[str] = "dashboard") -> logging.Logger:
    """
    Returns a configured logger for the dashboard module.

    Args:
        name (str): Logger name. Defaults to 'dashboard'.

    Returns:
        logging.Logger: Configured logger instance
    """
    logger = logging.getLogger(name)
    if not logger.hasHandlers():
        logger.setLevel(logging.INFO)
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        ch = logging.StreamHandler()
        ch.setLevel(logging.INFO)
        ch.setFormatter(formatter)
        logger.addHandler(ch)
        logger.propagate = False
    return logger


# -------------------------------
# Helper Functions
# -------------------------------
def results_to_frame(results: List[SentimentResult], decimals: int = 3) -> pd.DataFrame:
    """
    Tabulate sentiment results for display.

    Args:
        results (List[SentimentResult]): Scored lines in input order.
        decimals (int): Decimal places for the comparative column.

    Returns:
        pd.DataFrame: Columns Tweet, Label, Score, Comparative. The
        comparative column is pre-formatted text, e.g. "0.750".
    """
    return pd.DataFrame(
        {
            "Tweet": [r.text for r in results],
            "Label": [r.label.capitalize() for r in results],
            "Score": [r.score for r in results],
            "Comparative": [f"{r.comparative:.{decimals}f}" for r in results],
        },
        columns=["Tweet", "Label", "Score", "Comparative"],
    )


def label_style(label: str) -> str:
    """CSS for a label badge cell."""
    color = LABEL_COLORS.get(label.lower(), LABEL_COLORS["neutral"])
    return f"background-color: {color}; color: white; font-weight: 600;"


# -------------------------------
# Dashboard Constants
# -------------------------------
DEFAULT_CHART_HEIGHT = 360
LABEL_COLORS = {"positive": "green", "negative": "red", "neutral": "gray"}
SAMPLE_TWEETS = "I love this product!\nThis is okay.\nWorst experience ever."
