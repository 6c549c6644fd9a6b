"""
Central CLI entrypoint for AI Lab.

This module parses command-line arguments to run the trend forecaster or
the sentiment scorer directly, or to start the API server or dashboard.

Usage:
    python main.py <command> [options]

Supported commands:
    forecast        Fit a trend on a CSV (or the sample series) and extrapolate it
    sentiment       Score each line of text as positive / neutral / negative
    serve           Start the API server
    dashboard       Start the Streamlit dashboard

Examples:
    python main.py forecast --csv prices.csv --horizon 30 --output forecast.csv
    python main.py sentiment --text "I love this\nI hate this"
    python main.py sentiment --file tweets.txt
    python main.py serve --host 0.0.0.0 --port 8000
"""

import argparse
import importlib.util
import os
import subprocess
import sys
from typing import List, Optional

from ai_lab.api.main_api import start_api
from ai_lab.dashboard.utils import results_to_frame
from ai_lab.data import PriceHistory
from ai_lab.features.sentiment import SentimentScorer, load_lexicon
from ai_lab.forecasting import forecast
from ai_lab.utils.config_loader import FullConfig, load_typed_config
from ai_lab.utils.logger import configure_package_logging, get_logger
from ai_lab.validation import InputSanitizer

logger = get_logger(__name__)


def validate_file_path(path: str) -> None:
    """
    Validates whether the given path exists and is a file.

    Args:
        path (str): Path to an input file.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    if not os.path.isfile(path):
        logger.error(f"File not found: {path}")
        raise FileNotFoundError(f"File not found: {path}")


def run_forecast(args: argparse.Namespace, config: FullConfig) -> int:
    horizon = InputSanitizer.sanitize_horizon(
        args.horizon if args.horizon is not None else config.forecast.default_horizon,
        min_days=0,
        max_days=config.forecast.max_horizon,
    )
    if horizon is None:
        logger.error(f"Horizon must be between 0 and {config.forecast.max_horizon} days")
        return 2

    history = PriceHistory()
    if args.csv:
        validate_file_path(args.csv)
        if not history.load_csv(args.csv):
            logger.error(f"No valid date/close rows in {args.csv}")
            return 1

    result = forecast(history.observations, horizon)
    frame = result.to_frame(date_format=config.forecast.date_format)

    if args.output:
        frame.to_csv(args.output, index=False)
        logger.info(f"Forecast written to {args.output}")
    else:
        print(frame.to_string(index=False, na_rep="", float_format=lambda v: f"{v:.4f}"))
    print(result.model_summary())
    return 0


def run_sentiment(args: argparse.Namespace, config: FullConfig) -> int:
    if args.file:
        validate_file_path(args.file)
        with open(args.file, "r", encoding="utf-8") as f:
            raw = f.read()
    else:
        # Literal "\n" separates lines only when the text has no real newline
        raw = args.text if "\n" in args.text else args.text.replace("\\n", "\n")

    text = InputSanitizer.sanitize_text(raw, max_chars=config.sentiment.max_input_chars)
    if text is None:
        logger.error(f"Input exceeds {config.sentiment.max_input_chars} characters")
        return 2

    lexicon_path = args.lexicon or config.sentiment.lexicon_path
    scorer = SentimentScorer(lexicon=load_lexicon(lexicon_path)) if lexicon_path else SentimentScorer()
    results = scorer.analyze(text)

    if not results:
        print("No non-empty lines to analyze.")
        return 0
    frame = results_to_frame(results, decimals=config.sentiment.comparative_decimals)
    print(frame.to_string(index=False))
    return 0


def run_dashboard() -> int:
    app_path = importlib.util.find_spec("ai_lab.dashboard.app").origin
    logger.info(f"Launching Streamlit dashboard from {app_path}")
    return subprocess.call([sys.executable, "-m", "streamlit", "run", app_path])


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="AI Lab CLI")
    parser.add_argument("--config", "-c", default=None, help="Path to config YAML")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # --- Forecast ---
    forecast_parser = subparsers.add_parser("forecast", help="Forecast a price series")
    forecast_parser.add_argument("--csv", help="CSV with date and close/price columns (default: sample data)")
    forecast_parser.add_argument("--horizon", type=int, default=None, help="Days to extrapolate")
    forecast_parser.add_argument("--output", "-o", help="Write the combined series to this CSV")

    # --- Sentiment ---
    sentiment_parser = subparsers.add_parser("sentiment", help="Score lines of text")
    source = sentiment_parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--text", "-t",
        help="Text to score, one item per line. Without real newlines, a literal \\n is a line break (C:\\new splits)",
    )
    source.add_argument("--file", "-f", help="Text file, one line per item")
    sentiment_parser.add_argument("--lexicon", help="YAML word -> polarity table")

    # --- Serve ---
    serve_parser = subparsers.add_parser("serve", help="Start the API server")
    serve_parser.add_argument("--host", default=None, help="Host to bind the server")
    serve_parser.add_argument("--port", type=int, default=None, help="Port for the API")

    # --- Dashboard ---
    subparsers.add_parser("dashboard", help="Start the Streamlit dashboard")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse CLI arguments and dispatch commands.
    """
    args = build_parser().parse_args(argv)

    try:
        if args.config:
            validate_file_path(args.config)
        config = load_typed_config(args.config)
        configure_package_logging(config.logging.level, config.logging.file)

        if args.command == "forecast":
            return run_forecast(args, config)

        elif args.command == "sentiment":
            return run_sentiment(args, config)

        elif args.command == "serve":
            host = args.host or config.api.host
            port = args.port or config.api.port
            logger.info(f"Launching API server on {host}:{port}")
            start_api(host=host, port=port)
            return 0

        elif args.command == "dashboard":
            return run_dashboard()

    except Exception as e:
        logger.exception(f"Fatal error during execution: {e}")
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
