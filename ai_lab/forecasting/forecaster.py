# ai_lab/forecasting/forecaster.py
"""
Trend Forecaster Module

Fits y = slope * t + intercept by ordinary least squares over the position
index of an ordered price series, reproduces a fitted value for every
historical observation and extrapolates `horizon` further points spaced one
calendar day apart after the last observed date.

Features:
    - Pure, synchronous, one-shot: no state survives between calls.
    - Total over its inputs: empty series and horizon = 0 are valid.
    - Calendar-day arithmetic only (weekends and holidays are not skipped).

Directory Context:
    ai_lab/forecasting/
"""

import numbers
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import List, Optional, Sequence

import pandas as pd

from ai_lab.models.linear_trend_model import LinearTrendModel
from ai_lab.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Observation:
    """One (timestamp, value) pair of a time series."""
    timestamp: date
    value: float


@dataclass(frozen=True)
class RegressionModel:
    slope: float
    intercept: float


@dataclass(frozen=True)
class ForecastPoint:
    """
    A point on the forecast chart.

    Historical points carry both `actual` and `predicted`; future points
    carry `predicted` only (`actual` is None).
    """
    timestamp: date
    predicted: float
    actual: Optional[float] = None

    @property
    def is_future(self) -> bool:
        return self.actual is None


@dataclass(frozen=True)
class ForecastResult:
    combined: List[ForecastPoint] = field(default_factory=list)
    slope: float = 0.0
    intercept: float = 0.0

    @property
    def history(self) -> List[ForecastPoint]:
        return [p for p in self.combined if not p.is_future]

    @property
    def future(self) -> List[ForecastPoint]:
        return [p for p in self.combined if p.is_future]

    def to_frame(self, date_format: str = "%Y-%m-%d") -> pd.DataFrame:
        """
        Flatten the combined series into a DataFrame for charts and export.

        Args:
            date_format (str): strftime pattern for the `date` column.

        Returns:
            pd.DataFrame: Columns `date`, `actual`, `predicted`. Future rows
            hold NaN in `actual`.
        """
        return pd.DataFrame(
            {
                "date": [p.timestamp.strftime(date_format) for p in self.combined],
                "actual": [p.actual for p in self.combined],
                "predicted": [p.predicted for p in self.combined],
            },
            columns=["date", "actual", "predicted"],
        ).astype({"actual": float, "predicted": float})

    def model_summary(self) -> str:
        return f"Model: y = a·t + b (slope {self.slope:.4f})"


def fit(values: Sequence[float]) -> RegressionModel:
    """
    Fit the least-squares trend line over position indices 0..n-1.

    Args:
        values (Sequence[float]): values[i] is the value at position i.

    Returns:
        RegressionModel: slope and intercept. An empty series gives (0, 0);
        a single value v gives (0, v).
    """
    model = LinearTrendModel()
    model.train(values)
    return RegressionModel(slope=model.slope, intercept=model.intercept)


def forecast(observations: Sequence[Observation], horizon: int) -> ForecastResult:
    """
    Fit the trend on `observations` and extrapolate `horizon` days past the last one.

    Args:
        observations (Sequence[Observation]): Series ordered by time ascending.
            Never mutated.
        horizon (int): Number of future calendar days to emit. 0 is valid.

    Returns:
        ForecastResult: `combined` holds len(observations) + horizon points,
        historical first. An empty series yields an empty result with zero
        slope and intercept.

    Raises:
        ValueError: If horizon is negative or not an integer.
    """
    if isinstance(horizon, bool) or not isinstance(horizon, numbers.Integral) or horizon < 0:
        raise ValueError(f"horizon must be a non-negative integer, got {horizon!r}")

    if not observations:
        logger.info("Forecast requested on an empty series; returning empty result.")
        return ForecastResult(combined=[], slope=0.0, intercept=0.0)

    model = LinearTrendModel()
    model.train([o.value for o in observations])

    combined: List[ForecastPoint] = [
        ForecastPoint(timestamp=o.timestamp, actual=o.value, predicted=model.predict_at(i))
        for i, o in enumerate(observations)
    ]

    n = len(observations)
    start = observations[-1].timestamp
    for h in range(1, horizon + 1):
        combined.append(
            ForecastPoint(timestamp=start + timedelta(days=h), predicted=model.predict_at(n - 1 + h))
        )

    logger.info(
        f"Forecast built: {n} historical + {horizon} future points "
        f"(slope={model.slope:.4f}, intercept={model.intercept:.4f})"
    )
    return ForecastResult(combined=combined, slope=model.slope, intercept=model.intercept)
