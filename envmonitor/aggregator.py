#file: envmonitor/aggregator.py

import logging

import pandas as pd

from envmonitor.errors import EmptyDatasetError
from envmonitor.models import Summary


def column_mean(frame: pd.DataFrame, column: str) -> float:
    """Naive average: missing values count as zero and the divisor is the full row count."""
    return float(frame[column].fillna(0).sum()) / len(frame)


def summarize(frame: pd.DataFrame) -> Summary:
    """Compute the statistic cards' values for a validated dataset."""
    if len(frame) == 0:
        raise EmptyDatasetError("No data available to summarize.")

    summary = Summary(
        temperature=round(column_mean(frame, "Temperature"), 1),
        co2=round(column_mean(frame, "CO2")),
        water_quality=round(column_mean(frame, "Water_Quality")),
        air_quality=round(column_mean(frame, "Air_Quality")),
    )
    logging.info(f"Statistics updated: {summary.model_dump()}")
    return summary
