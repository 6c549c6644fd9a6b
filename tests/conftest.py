# tests/conftest.py

from datetime import date, timedelta

import pytest

from ai_lab.forecasting import Observation


@pytest.fixture
def linear_observations():
    """Five daily observations lying exactly on y = t + 1."""
    start = date(2024, 1, 1)
    return [Observation(timestamp=start + timedelta(days=i), value=float(i + 1)) for i in range(5)]


@pytest.fixture
def tiny_lexicon():
    """Injected lexicon with weights chosen to engineer exact line scores."""
    return {"love": 3, "good": 1, "bad": -1, "hate": -3, "meh": 0}


@pytest.fixture
def price_csv(tmp_path):
    content = "date,close\n2024-01-01,100\n2024-01-02,102\n2024-01-03,104\n"
    path = tmp_path / "prices.csv"
    path.write_text(content)
    return str(path)
