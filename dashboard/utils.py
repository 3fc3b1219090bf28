#file: dashboard/utils.py

import pandas as pd

from envmonitor.models import REQUIRED_COLUMNS, to_records

PLACEHOLDER = "N/A"


def format_cell(value) -> str :
    """Display text for one table cell."""
    if value is None or pd.isna(value) :
        return PLACEHOLDER
    if isinstance(value, float) and value.is_integer() :
        return str(int(value))
    return str(value)


def format_table(dataset: pd.DataFrame) -> pd.DataFrame :
    """Convert the dataset into display rows, in source order, with fixed columns."""
    rows = [
        [format_cell(value) for value in record.model_dump().values()]
        for record in to_records(dataset)
    ]
    return pd.DataFrame(rows, columns = REQUIRED_COLUMNS)
