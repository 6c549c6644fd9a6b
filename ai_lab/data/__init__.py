from .load_csv import CSVLoader
from .ingestion import (
    DATE_COLUMNS,
    VALUE_COLUMNS,
    SAMPLE_PRICES,
    PriceHistory,
    parse_observations,
    resolve_columns,
    sample_observations,
)

__all__ = [
    "CSVLoader",
    "DATE_COLUMNS",
    "VALUE_COLUMNS",
    "SAMPLE_PRICES",
    "PriceHistory",
    "parse_observations",
    "resolve_columns",
    "sample_observations",
]
