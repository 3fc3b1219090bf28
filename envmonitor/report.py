#file: envmonitor/report.py

import logging
from dataclasses import dataclass
from typing import Tuple

from envmonitor.errors import DashboardError

TROUBLESHOOTING_HINTS = (
    "Make sure the data file exists at the configured location (DASHBOARD_DATA_SOURCE, default 'data.csv').",
    "When the data source is a URL, make sure it is served by a running web server.",
    "Check the application log for more details.",
)


@dataclass(frozen=True)
class ErrorReport:
    kind: str
    message: str
    hints: Tuple[str, ...] = TROUBLESHOOTING_HINTS

    def as_markdown(self) -> str:
        tips = "\n".join(f"- {hint}" for hint in self.hints)
        return f"**Error:** {self.message}\n\n**Troubleshooting tips:**\n{tips}"


def build_error_report(error: BaseException) -> ErrorReport:
    """Map any pipeline failure to a user-facing message with the fixed hints."""
    kind = type(error).__name__ if isinstance(error, DashboardError) else "UnexpectedError"
    message = str(error) or "An unknown error occurred."
    logging.error(f"Dashboard error ({kind}): {message}")
    return ErrorReport(kind=kind, message=message)
