"""
Main-API entrypoint for AI Lab.

This module initializes the FastAPI app, configures middleware for
request logging, and registers the forecasting and sentiment routers.

Usage:
    uvicorn ai_lab.api.main_api:app --reload --port 8000
"""

import time
from typing import Dict

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ai_lab import __version__
from ai_lab.api.forecasting_api import router as forecasting_router
from ai_lab.api.sentiment_api import router as sentiment_router
from ai_lab.utils.logger import get_logger

logger = get_logger("ai_lab.api")


# ------------------------------------------------------------
# FastAPI App Initialization
# ------------------------------------------------------------
app = FastAPI(
    title="AI Lab API",
    description="Trend forecasting and line sentiment scoring.",
    version=__version__,
)


# ------------------------------------------------------------
# Middleware
# ------------------------------------------------------------
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """
    Middleware to log each incoming request and its response time.
    """
    start_time = time.time()
    logger.info(f"Incoming request: {request.method} {request.url}")

    try:
        response = await call_next(request)
    except Exception as e:
        logger.error(f"Request failed: {e}")
        return JSONResponse(status_code=500, content={"detail": "Internal Server Error"})

    process_time = time.time() - start_time
    logger.info(
        f"Completed request: {request.method} {request.url} "
        f"Status: {response.status_code} Time: {process_time:.2f}s"
    )
    return response


# Allow the dashboard to call the API from another origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ------------------------------------------------------------
# Health Check Endpoint
# ------------------------------------------------------------
@app.get("/health", response_model=Dict[str, str])
async def health_check() -> Dict[str, str]:
    """
    Health check endpoint for monitoring systems.
    """
    return {
        "status": "ok",
        "version": __version__,
        "timestamp": str(time.time()),
    }


# ------------------------------------------------------------
# Register Routers
# ------------------------------------------------------------
app.include_router(forecasting_router, prefix="/forecast", tags=["Forecasting"])
app.include_router(sentiment_router, prefix="/sentiment", tags=["Sentiment"])


def start_api(host: str = "0.0.0.0", port: int = 8000, reload: bool = False) -> None:
    """
    Starts the FastAPI server using Uvicorn.

    Args:
        host (str): Host address to bind.
        port (int): Port number to listen on.
        reload (bool): Enable auto-reload for development.
    """
    logger.info(f"Starting API server on {host}:{port}")
    uvicorn.run("ai_lab.api.main_api:app", host=host, port=port, reload=reload)
