"""Endpoint tests for the FastAPI app using TestClient."""

import pytest
from fastapi.testclient import TestClient

from ai_lab import __version__
from ai_lab.api.dependencies import get_scorer, get_settings
from ai_lab.api.main_api import app
from ai_lab.features.sentiment import SentimentScorer
from ai_lab.utils.config_loader import FullConfig, SentimentConfig


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["version"] == __version__


class TestForecastEndpoint:
    """POST /forecast"""

    def test_forecast_json(self, client):
        payload = {
            "observations": [
                {"timestamp": "2024-01-01", "value": 1},
                {"timestamp": "2024-01-02", "value": 2},
                {"timestamp": "2024-01-03", "value": 3},
            ],
            "horizon": 2,
        }
        response = client.post("/forecast", json=payload)

        assert response.status_code == 200
        body = response.json()
        assert len(body["combined"]) == 5
        assert body["combined"][-1] == {"date": "2024-01-05", "actual": None, "predicted": pytest.approx(5.0)}
        assert body["slope"] == pytest.approx(1.0)
        assert body["intercept"] == pytest.approx(1.0)

    def test_forecast_empty_series(self, client):
        response = client.post("/forecast", json={"observations": [], "horizon": 10})
        assert response.status_code == 200
        assert response.json()["combined"] == []

    def test_forecast_negative_horizon_rejected(self, client):
        response = client.post("/forecast", json={"observations": [], "horizon": -1})
        assert response.status_code == 422

    def test_forecast_bad_value_rejected(self, client):
        payload = {"observations": [{"timestamp": "2024-01-01", "value": "abc"}]}
        response = client.post("/forecast", json=payload)
        assert response.status_code == 422


class TestForecastUploadEndpoint:
    """POST /forecast/upload"""

    def test_upload_csv(self, client):
        csv = b"Date,Close\n2024-01-01,10\n2024-01-02,12\nbad,1\n"
        response = client.post(
            "/forecast/upload",
            params={"horizon": 1},
            files={"file": ("prices.csv", csv, "text/csv")},
        )
        assert response.status_code == 200
        body = response.json()
        assert [p["date"] for p in body["combined"]] == ["2024-01-01", "2024-01-02", "2024-01-03"]
        assert body["combined"][-1]["predicted"] == pytest.approx(14.0)

    def test_upload_without_valid_rows(self, client):
        response = client.post(
            "/forecast/upload",
            files={"file": ("prices.csv", b"date,volume\n2024-01-01,100\n", "text/csv")},
        )
        assert response.status_code == 400

    def test_upload_empty_file(self, client):
        response = client.post("/forecast/upload", files={"file": ("empty.csv", b"", "text/csv")})
        assert response.status_code == 400

    def test_upload_invalid_utf8_skips_bad_rows(self, client):
        csv = b"date,close\n2024-01-01,10\n\xff\xfe\xfa,11\n2024-01-02,12\n"
        response = client.post(
            "/forecast/upload",
            params={"horizon": 0},
            files={"file": ("prices.csv", csv, "text/csv")},
        )
        assert response.status_code == 200
        assert [p["date"] for p in response.json()["combined"]] == ["2024-01-01", "2024-01-02"]

    def test_upload_only_undecodable_rows(self, client):
        response = client.post(
            "/forecast/upload",
            files={"file": ("prices.csv", b"date,close\n\xff\xfe,\xfa\n", "text/csv")},
        )
        assert response.status_code == 400

    def test_upload_horizon_out_of_range(self, client):
        response = client.post(
            "/forecast/upload",
            params={"horizon": 1000},
            files={"file": ("prices.csv", b"date,close\n2024-01-01,1\n", "text/csv")},
        )
        assert response.status_code == 422


class TestSentimentEndpoint:
    """POST /sentiment/analyze"""

    def test_analyze(self, client):
        response = client.post("/sentiment/analyze", json={"text": "I love this\n\nI hate this"})
        assert response.status_code == 200
        body = response.json()
        assert [r["label"] for r in body["results"]] == ["positive", "negative"]
        assert body["counts"] == {"positive": 1, "neutral": 0, "negative": 1}

    def test_analyze_blank_text(self, client):
        response = client.post("/sentiment/analyze", json={"text": "  \n "})
        assert response.status_code == 200
        assert response.json()["results"] == []

    def test_analyze_with_injected_lexicon(self, client, tiny_lexicon):
        app.dependency_overrides[get_scorer] = lambda: SentimentScorer(lexicon=tiny_lexicon)
        try:
            response = client.post("/sentiment/analyze", json={"text": "good\nbad\nmeh"})
        finally:
            app.dependency_overrides.clear()
        body = response.json()
        assert [r["score"] for r in body["results"]] == [1, -1, 0]
        assert [r["label"] for r in body["results"]] == ["positive", "negative", "neutral"]

    def test_analyze_missing_text(self, client):
        assert client.post("/sentiment/analyze", json={}).status_code == 422

    def test_analyze_respects_configured_length_limit(self, client):
        app.dependency_overrides[get_settings] = lambda: FullConfig(sentiment=SentimentConfig(max_input_chars=10))
        try:
            too_long = client.post("/sentiment/analyze", json={"text": "I love this a lot"})
            at_limit = client.post("/sentiment/analyze", json={"text": "I love it!"})
        finally:
            app.dependency_overrides.clear()
        assert too_long.status_code == 422
        assert at_limit.status_code == 200
        assert at_limit.json()["results"][0]["label"] == "positive"
