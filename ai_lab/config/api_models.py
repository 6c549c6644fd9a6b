"""Pydantic models for API request validation and responses."""

import math
from datetime import date
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ai_lab.features.sentiment import SentimentResult
from ai_lab.forecasting import ForecastResult, Observation

MAX_API_HORIZON = 365


class ObservationIn(BaseModel):
    """One observed price."""

    timestamp: date = Field(..., description="Observation date (YYYY-MM-DD)")
    value: float = Field(..., description="Observed value, e.g. closing price")

    @field_validator("value")
    @classmethod
    def validate_finite(cls, v):
        """Reject NaN and infinities."""
        if not math.isfinite(v):
            raise ValueError("value must be a finite number")
        return v

    def to_observation(self) -> Observation:
        return Observation(timestamp=self.timestamp, value=self.value)


class ForecastRequest(BaseModel):
    """Request model for forecast endpoint."""

    observations: List[ObservationIn] = Field(
        default_factory=list,
        description="Series ordered by date ascending; may be empty"
    )
    horizon: int = Field(
        default=14,
        ge=0,
        le=MAX_API_HORIZON,
        description=f"Number of calendar days to extrapolate (0-{MAX_API_HORIZON})"
    )

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "observations": [
                {"timestamp": "2025-05-01", "value": 182.1},
                {"timestamp": "2025-05-02", "value": 183.5},
            ],
            "horizon": 14,
        }
    })


class ForecastPointOut(BaseModel):
    date: str
    actual: Optional[float] = None
    predicted: float


class ForecastResponse(BaseModel):
    """Response model for forecast endpoints."""

    combined: List[ForecastPointOut]
    slope: float
    intercept: float
    summary: str
    status: str = "success"

    @classmethod
    def from_result(cls, result: ForecastResult, date_format: str = "%Y-%m-%d") -> "ForecastResponse":
        return cls(
            combined=[
                ForecastPointOut(
                    date=p.timestamp.strftime(date_format),
                    actual=p.actual,
                    predicted=p.predicted,
                )
                for p in result.combined
            ],
            slope=result.slope,
            intercept=result.intercept,
            summary=result.model_summary(),
        )


class SentimentRequest(BaseModel):
    """Request model for sentiment endpoint."""

    text: str = Field(
        ...,
        description="Lines of text, one tweet per line; length limited by sentiment.max_input_chars"
    )

    model_config = ConfigDict(json_schema_extra={
        "example": {"text": "I love this product!\nThis is okay.\nWorst experience ever."}
    })


class SentimentResultOut(BaseModel):
    text: str
    score: int
    comparative: float
    label: Literal["positive", "neutral", "negative"]


class SentimentResponse(BaseModel):
    """Response model for sentiment endpoint."""

    results: List[SentimentResultOut]
    counts: Dict[str, int]
    status: str = "success"

    @classmethod
    def from_results(cls, results: List[SentimentResult]) -> "SentimentResponse":
        counts = {"positive": 0, "neutral": 0, "negative": 0}
        for r in results:
            counts[r.label] += 1
        return cls(
            results=[SentimentResultOut(**r.to_dict()) for r in results],
            counts=counts,
        )

