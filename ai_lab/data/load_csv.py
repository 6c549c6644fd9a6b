# ai_lab/data/load_csv.py

import os
import pandas as pd
from pathlib import Path
from typing import IO, Optional, Union
from ai_lab.utils.logger import get_logger

CSVSource = Union[str, Path, IO]


class CSVLoader:
    """
    A class to load CSV files into pandas DataFrames with error handling and logging.

    Attributes:
        source (str | Path | file-like): Path to the CSV file, or an open
            file-like object such as a dashboard upload.
        data (Optional[pd.DataFrame]): Loaded DataFrame, defaults to None.
        logger: Logger instance for logging events and errors.
    """

    def __init__(self, source: CSVSource):
        """
        Initializes the CSVLoader with a path or file-like object.

        Args:
            source (str | Path | file-like): CSV location or buffer.

        Raises:
            TypeError: If the source is neither a path nor readable.
        """
        if not isinstance(source, (str, Path)) and not hasattr(source, "read"):
            raise TypeError("source must be a file path or a readable file-like object.")
        self.source = source
        self.data: Optional[pd.DataFrame] = None
        self.logger = get_logger(__name__)

    @property
    def name(self) -> str:
        if isinstance(self.source, (str, Path)):
            return str(self.source)
        return getattr(self.source, "name", "<buffer>")

    def load_csv(self) -> pd.DataFrame:
        """
        Loads the CSV into a pandas DataFrame with a header row.

        Undecodable bytes are replaced rather than raised, so they surface as
        unparseable values in the affected rows.

        Returns:
            pd.DataFrame: The loaded DataFrame.

        Raises:
            FileNotFoundError: If the file path does not exist.
            pd.errors.EmptyDataError: If the file has no content at all.
            pd.errors.ParserError: If the CSV is malformed.
        """
        if isinstance(self.source, (str, Path)) and not os.path.exists(self.source):
            self.logger.error(f"File not found: {self.name}")
            raise FileNotFoundError(f"File not found: {self.name}")

        try:
            self.data = pd.read_csv(self.source, skip_blank_lines=True, encoding_errors="replace")
            self.logger.info(f"Loaded data from {self.name}, shape: {self.data.shape}")
        except pd.errors.EmptyDataError:
            self.logger.error(f"Empty CSV: {self.name}")
            raise
        except pd.errors.ParserError as e:
            self.logger.error(f"Malformed CSV: {e}")
            raise

        return self.data
