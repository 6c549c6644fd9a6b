# ai_lab/data/ingestion.py
"""
Price history ingestion.

Turns tabular input (CSV rows with a date-like and a price-like column) into
a validated list of Observations for the forecaster, and holds the
"current" observation set the dashboard works on.

Rules:
    - Date column: first non-empty of date / Date / DATE / timestamp / Timestamp,
      then any other column whose name matches case-insensitively.
    - Value column: first non-null of close / Close / CLOSE / price / Price,
      then any case-insensitive match.
    - Rows without a parseable date or a finite numeric value are skipped.
    - A load that yields no valid rows leaves the previous set untouched.
"""

from datetime import date
from typing import List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from ai_lab.data.load_csv import CSVLoader, CSVSource
from ai_lab.forecasting.forecaster import Observation
from ai_lab.monitoring.error_logging import ErrorComponent, ErrorLogger, FallbackReason
from ai_lab.utils.logger import get_logger

logger = get_logger(__name__)

DATE_COLUMNS: Tuple[str, ...] = ("date", "Date", "DATE", "timestamp", "Timestamp")
VALUE_COLUMNS: Tuple[str, ...] = ("close", "Close", "CLOSE", "price", "Price")

SAMPLE_PRICES: Tuple[Tuple[str, float], ...] = (
    ("2025-05-01", 182.1), ("2025-05-02", 183.5), ("2025-05-05", 181.9),
    ("2025-05-06", 184.2), ("2025-05-07", 186.0), ("2025-05-08", 185.2),
    ("2025-05-09", 187.4), ("2025-05-12", 188.1), ("2025-05-13", 189.0),
    ("2025-05-14", 188.6), ("2025-05-15", 190.2), ("2025-05-16", 191.1),
    ("2025-05-19", 192.4), ("2025-05-20", 193.0), ("2025-05-21", 192.2),
    ("2025-05-22", 193.8), ("2025-05-23", 194.5), ("2025-05-27", 195.3),
    ("2025-05-28", 196.1), ("2025-05-29", 196.9),
)


def sample_observations() -> List[Observation]:
    """The bundled 20-day demo series."""
    return [Observation(timestamp=date.fromisoformat(d), value=v) for d, v in SAMPLE_PRICES]


def resolve_columns(columns: Sequence[str], candidates: Sequence[str]) -> List[str]:
    """
    Order the DataFrame columns that can supply a field.

    Exact candidate names come first, in candidate order; then any remaining
    column whose stripped, lowercased name matches a candidate.

    Args:
        columns (Sequence[str]): DataFrame column names.
        candidates (Sequence[str]): Accepted names, highest priority first.

    Returns:
        List[str]: Matching column names in priority order (may be empty).
    """
    exact = [c for c in candidates if c in columns]
    wanted = {c.lower() for c in candidates}
    loose = [
        c for c in columns
        if isinstance(c, str) and c not in exact and c.strip().lower() in wanted
    ]
    return exact + loose


def _coalesce(df: pd.DataFrame, columns: List[str]) -> pd.Series:
    """First non-null, non-blank value across `columns`, row by row."""
    merged: Optional[pd.Series] = None
    for col in columns:
        series = df[col]
        if not pd.api.types.is_numeric_dtype(series):
            series = series.mask(series.astype(str).str.strip() == "")
        merged = series if merged is None else merged.combine_first(series)
    return merged


def _to_naive(value) -> pd.Timestamp:
    if pd.isna(value):
        return pd.NaT
    ts = pd.to_datetime(value, errors="coerce")
    if pd.isna(ts):
        return pd.NaT
    return ts.tz_localize(None) if ts.tzinfo is not None else ts


def _parse_dates(raw: pd.Series) -> pd.Series:
    """
    Parse a date column into naive timestamps, NaT where unparseable.

    Offset-aware values keep their own wall-clock date. A column mixing
    naive and offset values (or several offsets) is parsed row by row.
    """
    text = raw.astype("string")
    try:
        dates = pd.to_datetime(text, errors="coerce", format="mixed")
    except ValueError:
        dates = None

    if dates is None or not pd.api.types.is_datetime64_any_dtype(dates):
        logger.warning("Date column mixes time zones; parsing row by row.")
        return pd.Series([_to_naive(v) for v in text], index=raw.index, dtype="datetime64[ns]")
    if dates.dt.tz is not None:
        dates = dates.dt.tz_localize(None)
    return dates


def parse_observations(df: pd.DataFrame, errors: Optional[ErrorLogger] = None) -> List[Observation]:
    """
    Convert raw tabular rows into Observations.

    Args:
        df (pd.DataFrame): Raw rows, typically from CSVLoader.
        errors (ErrorLogger, optional): Sink for skipped-row records.

    Returns:
        List[Observation]: Valid rows in input order. Empty when a required
        column is absent or no row survives validation.
    """
    errors = errors or ErrorLogger(component=ErrorComponent.INGESTION)

    if df is None or df.empty:
        logger.warning("No rows to ingest.")
        return []

    date_cols = resolve_columns(list(df.columns), DATE_COLUMNS)
    value_cols = resolve_columns(list(df.columns), VALUE_COLUMNS)
    if not date_cols or not value_cols:
        errors.log_fallback(
            reason=FallbackReason.MISSING_COLUMN,
            context={"columns": list(df.columns), "date_found": bool(date_cols), "value_found": bool(value_cols)},
            fallback_action="No observations produced",
        )
        return []

    raw_dates = _coalesce(df, date_cols)
    raw_values = _coalesce(df, value_cols)

    dates = _parse_dates(raw_dates)
    values = pd.to_numeric(raw_values, errors="coerce").astype(float)

    valid = dates.notna() & np.isfinite(values)
    skipped = int((~valid).sum())
    if skipped:
        errors.log_error(
            f"Skipped {skipped} of {len(df)} rows with an unparseable date or non-numeric value",
            context={"first_bad_row": int(np.flatnonzero(~valid.to_numpy())[0])},
        )

    observations = [
        Observation(timestamp=ts.date(), value=float(v))
        for ts, v in zip(dates[valid], values[valid])
    ]

    if len(observations) > 1 and not pd.Series([o.timestamp for o in observations]).is_monotonic_increasing:
        logger.warning("Observations are not in ascending date order; using file order as given.")

    logger.info(f"Parsed {len(observations)} observations from {len(df)} rows.")
    return observations


class PriceHistory:
    """
    In-memory holder of the current observation set.

    Starts from the bundled sample series. Loading an empty or fully invalid
    batch is a no-op: the previous observations stay in place.
    """

    def __init__(self, observations: Optional[Sequence[Observation]] = None):
        self._observations: Tuple[Observation, ...] = tuple(
            sample_observations() if observations is None else observations
        )
        self.errors = ErrorLogger(component=ErrorComponent.INGESTION)

    @property
    def observations(self) -> List[Observation]:
        return list(self._observations)

    def __len__(self) -> int:
        return len(self._observations)

    def load(self, observations: Sequence[Observation]) -> bool:
        """
        Replace the current set if `observations` is non-empty.

        Returns:
            bool: True if the set was replaced, False if the previous one was kept.
        """
        if not observations:
            self.errors.log_fallback(
                reason=FallbackReason.INSUFFICIENT_DATA,
                context={"current_size": len(self._observations)},
                fallback_action="Keeping previously loaded observations",
            )
            return False
        self._observations = tuple(observations)
        logger.info(f"Loaded {len(self._observations)} observations.")
        return True

    def load_frame(self, df: pd.DataFrame) -> bool:
        return self.load(parse_observations(df, errors=self.errors))

    def load_csv(self, source: CSVSource) -> bool:
        """
        Read a CSV file or upload buffer and load its valid rows.

        Raises:
            FileNotFoundError: If a path is given and does not exist.
        """
        try:
            df = CSVLoader(source).load_csv()
        except (pd.errors.EmptyDataError, pd.errors.ParserError) as e:
            self.errors.log_fallback(
                reason=FallbackReason.CORRUPT_DATA,
                exception=e,
                fallback_action="Keeping previously loaded observations",
            )
            return False
        return self.load_frame(df)

    def reset_to_sample(self) -> None:
        self._observations = tuple(sample_observations())
        logger.info("Observations reset to sample data.")

    def clear(self) -> None:
        self._observations = ()
        logger.info("Observations cleared.")
