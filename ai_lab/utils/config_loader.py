# ai_lab/utils/config_loader.py

from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, Field, model_validator

from ai_lab.utils.config import load_config

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config" / "config.yaml"


# -------------------
# Pydantic Configs
# -------------------
class ForecastConfig(BaseModel):
    default_horizon: int = Field(default=14, ge=0)
    min_horizon: int = Field(default=7, ge=0)
    max_horizon: int = Field(default=60, ge=0)
    date_format: str = "%Y-%m-%d"

    @model_validator(mode="after")
    def check_horizon_range(self):
        if self.min_horizon > self.max_horizon:
            raise ValueError("min_horizon must not exceed max_horizon")
        if not self.min_horizon <= self.default_horizon <= self.max_horizon:
            raise ValueError("default_horizon must lie within [min_horizon, max_horizon]")
        return self


class SentimentConfig(BaseModel):
    lexicon_path: Optional[str] = None
    comparative_decimals: int = Field(default=3, ge=0)
    max_input_chars: int = Field(default=100_000, ge=1)


class LoggingConfig(BaseModel):
    level: str = "INFO"
    file: Optional[str] = None


class ApiConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = Field(default=8000, ge=1, le=65535)


class FullConfig(BaseModel):
    forecast: ForecastConfig = ForecastConfig()
    sentiment: SentimentConfig = SentimentConfig()
    logging: LoggingConfig = LoggingConfig()
    api: ApiConfig = ApiConfig()


# -------------------
# Functions
# -------------------
def load_typed_config(config_path: Optional[Union[str, Path]] = None) -> FullConfig:
    """
    Load and validate the full config as a typed Pydantic model.

    Sections missing from the YAML fall back to their defaults.

    Args:
        config_path (str | Path, optional): Path to main YAML config file.
            Defaults to the bundled ai_lab/config/config.yaml.

    Returns:
        FullConfig: Typed configuration object.
    """
    raw_config = load_config(config_path or DEFAULT_CONFIG_PATH)
    return FullConfig(**raw_config)
