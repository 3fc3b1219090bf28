# file: envmonitor/errors.py

from typing import Sequence


class DashboardError(Exception):
    """Base class for every failure the load pipeline reports."""


class FetchFailure(DashboardError):
    """The data file is unreachable or the server answered with a non-success status."""


class ParseFailure(DashboardError):
    """The CSV reader rejected the input as structurally corrupt."""


class EmptyDatasetError(DashboardError):
    """Parsing produced zero data rows."""


class SchemaError(DashboardError):
    """One or more required columns are absent."""

    def __init__(self, missing: Sequence[str]):
        self.missing = list(missing)
        super().__init__(f"Missing required columns: {', '.join(self.missing)}")
