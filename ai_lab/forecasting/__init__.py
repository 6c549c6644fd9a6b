from .forecaster import (
    Observation,
    RegressionModel,
    ForecastPoint,
    ForecastResult,
    fit,
    forecast,
)

__all__ = [
    "Observation",
    "RegressionModel",
    "ForecastPoint",
    "ForecastResult",
    "fit",
    "forecast",
]
