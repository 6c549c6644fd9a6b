# ai_lab/api/forecasting_api.py
"""
Forecasting API router.

Exposes the trend forecaster over JSON observations or an uploaded CSV.
The router holds no state between requests.
"""

import logging

import pandas as pd
from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile

from ai_lab.api.dependencies import get_settings
from ai_lab.config.api_models import MAX_API_HORIZON, ForecastRequest, ForecastResponse
from ai_lab.data import CSVLoader, parse_observations
from ai_lab.forecasting import forecast
from ai_lab.monitoring.error_logging import ErrorComponent, ErrorLogger
from ai_lab.utils.config_loader import FullConfig

router = APIRouter()
logger = logging.getLogger("ai_lab.api.forecasting")


@router.post("", response_model=ForecastResponse)
async def forecast_series(
    request: ForecastRequest,
    settings: FullConfig = Depends(get_settings),
) -> ForecastResponse:
    """
    Fit a trend line on the posted observations and extrapolate it.

    An empty observation list returns an empty series with zero slope.
    """
    observations = [o.to_observation() for o in request.observations]
    logger.info(f"Forecast request received: {len(observations)} observations, horizon={request.horizon}")
    result = forecast(observations, request.horizon)
    return ForecastResponse.from_result(result, date_format=settings.forecast.date_format)


@router.post("/upload", response_model=ForecastResponse)
async def forecast_upload(
    file: UploadFile = File(..., description="CSV with a date and a close/price column"),
    horizon: int = Query(14, ge=0, le=MAX_API_HORIZON, description="Days to extrapolate"),
    settings: FullConfig = Depends(get_settings),
) -> ForecastResponse:
    """
    Forecast from an uploaded CSV.

    Rows that cannot be parsed are skipped; a file with no usable row is
    rejected with 400.
    """
    errors = ErrorLogger(component=ErrorComponent.FORECASTING_API)
    try:
        df = CSVLoader(file.file).load_csv()
    except (pd.errors.EmptyDataError, pd.errors.ParserError) as e:
        errors.log_error("Uploaded CSV could not be parsed", exception=e, context={"file": file.filename})
        raise HTTPException(status_code=400, detail=f"Could not parse CSV: {e}")

    observations = parse_observations(df, errors=errors)
    if not observations:
        raise HTTPException(status_code=400, detail="No valid date/close rows found in upload")

    result = forecast(observations, horizon)
    return ForecastResponse.from_result(result, date_format=settings.forecast.date_format)
