#file: envmonitor/pipeline.py

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

import pandas as pd

from envmonitor.aggregator import summarize
from envmonitor.data_fetch import fetch_csv_text
from envmonitor.errors import EmptyDatasetError
from envmonitor.models import Diagnostic, ParseResult, Summary
from envmonitor.parser import parse_csv_async
from envmonitor.report import ErrorReport, build_error_report
from envmonitor.validator import validate_dataset


class LoadState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


async def load_dataset(source: str) -> ParseResult:
    """Fetch, parse and validate the CSV file at ``source``."""
    text = await fetch_csv_text(source)
    result = await parse_csv_async(text)
    validate_dataset(result.frame)
    return result


@dataclass
class LoadCycle:
    """One pass of the dashboard load: Idle -> Loading -> Ready | Failed.

    Ready and Failed are terminal; reloading means starting a new cycle.
    """

    source: str
    state: LoadState = LoadState.IDLE
    dataset: Optional[pd.DataFrame] = None
    summary: Optional[Summary] = None
    diagnostics: Tuple[Diagnostic, ...] = field(default_factory=tuple)
    error: Optional[ErrorReport] = None

    async def run(self, presenter) -> "LoadCycle":
        if self.state is not LoadState.IDLE:
            raise RuntimeError(f"Load cycle is already {self.state.value}; start a new cycle to reload")
        self.state = LoadState.LOADING
        logging.info(f"Initializing dashboard from {self.source}...")

        try:
            result = await load_dataset(self.source)
            dataset = result.frame
            if dataset is None or dataset.empty:
                raise EmptyDatasetError("No data available to display.")
            summary = summarize(dataset)
            presenter.render(dataset, summary)
        except Exception as e:
            self.error = build_error_report(e)
            self.state = LoadState.FAILED
            return self

        self.dataset = dataset
        self.summary = summary
        self.diagnostics = result.diagnostics
        self.state = LoadState.READY
        logging.info("Dashboard initialized successfully!")
        return self
