# ai_lab/models/linear_trend_model.py

from typing import Any, Dict, Sequence
import numpy as np

from ai_lab.models.base_model import BaseModel
from ai_lab.utils.logger import get_logger

logger = get_logger(__name__)


class LinearTrendModel(BaseModel):
    """
    Closed-form ordinary least squares over position indices.

    The independent variable is the 0-based position of each value in the
    series, never its timestamp. Degenerate inputs (no values, one value)
    fall back to a zero slope and never raise.
    """

    def __init__(self, **params: Any):
        super().__init__(params)
        self.slope: float = 0.0
        self.intercept: float = 0.0
        self.n_samples: int = 0

    def train(self, y: Sequence[float]) -> None:
        values = np.asarray(y, dtype=float)
        n = len(values)
        logger.debug("Fitting trend line on %d samples", n)

        xs = np.arange(n, dtype=float)
        sum_x = float(xs.sum())
        sum_y = float(values.sum())
        sum_xy = float((xs * values).sum())
        sum_x2 = float((xs * xs).sum())

        denom = n * sum_x2 - sum_x * sum_x
        slope = (n * sum_xy - sum_x * sum_y) / denom if denom != 0 else 0.0
        intercept = (sum_y - slope * sum_x) / n if n != 0 else 0.0

        self.slope = float(slope)
        self.intercept = float(intercept)
        self.n_samples = n
        logger.debug("Fit complete: slope=%.6f intercept=%.6f", self.slope, self.intercept)

    def predict(self, x: Sequence[float]) -> np.ndarray:
        positions = np.asarray(x, dtype=float)
        return self.slope * positions + self.intercept

    def predict_at(self, position: int) -> float:
        """Evaluate the fitted line at a single position index."""
        return self.slope * position + self.intercept

    def get_params(self) -> Dict[str, Any]:
        params = super().get_params()
        params.update({"slope": self.slope, "intercept": self.intercept, "n_samples": self.n_samples})
        return params
