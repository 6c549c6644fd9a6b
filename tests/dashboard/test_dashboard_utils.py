"""Tests for dashboard helpers that do not need a running Streamlit session."""

import plotly.graph_objects as go
import pytest

from ai_lab.dashboard.forecast_panel import build_forecast_figure
from ai_lab.dashboard.utils import SAMPLE_TWEETS, label_style, results_to_frame
from ai_lab.features.sentiment import SentimentScorer
from ai_lab.forecasting import ForecastResult, forecast


class TestResultsToFrame:
    def test_columns_and_formatting(self):
        results = SentimentScorer().analyze(SAMPLE_TWEETS)
        frame = results_to_frame(results)

        assert list(frame.columns) == ["Tweet", "Label", "Score", "Comparative"]
        assert frame["Label"].tolist() == ["Positive", "Neutral", "Negative"]
        assert frame["Comparative"].tolist()[0] == "0.750"
        assert frame["Tweet"].tolist()[2] == "Worst experience ever."

    def test_decimals(self):
        results = SentimentScorer(lexicon={"good": 1}).analyze("good good bad")
        frame = results_to_frame(results, decimals=1)
        assert frame["Comparative"].iloc[0] == "0.7"

    def test_empty(self):
        frame = results_to_frame([])
        assert frame.empty
        assert list(frame.columns) == ["Tweet", "Label", "Score", "Comparative"]


@pytest.mark.parametrize(
    "label, color",
    [("Positive", "green"), ("negative", "red"), ("Neutral", "gray"), ("other", "gray")],
)
def test_label_style(label, color):
    assert f"background-color: {color};" in label_style(label)


class TestForecastFigure:
    def test_traces(self, linear_observations):
        fig = build_forecast_figure(forecast(linear_observations, 3))

        assert isinstance(fig, go.Figure)
        assert [t.name for t in fig.data] == ["Actual", "Predicted"]
        actual, predicted = fig.data
        assert len(actual.x) == len(predicted.x) == 8
        assert predicted.line.dash == "dash"
        assert list(predicted.y[-3:]) == pytest.approx([6.0, 7.0, 8.0])

    def test_empty_result(self):
        fig = build_forecast_figure(ForecastResult())
        assert len(fig.data[0].x) == 0
