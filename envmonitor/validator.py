#file: envmonitor/validator.py

import logging

import pandas as pd

from envmonitor.errors import EmptyDatasetError, SchemaError
from envmonitor.models import REQUIRED_COLUMNS


def validate_dataset(frame: pd.DataFrame) -> pd.DataFrame:
    """Reject an empty dataset or one whose first record lacks required columns.

    Only the header shape is checked; individual rows may still hold nulls.
    """
    if frame is None or frame.empty:
        raise EmptyDatasetError("No data found in CSV file")

    first_row = frame.iloc[0]
    missing = [col for col in REQUIRED_COLUMNS if col not in first_row.index]
    if missing:
        raise SchemaError(missing)

    logging.info(f"CSV parsed successfully: {len(frame)} rows loaded")
    return frame
