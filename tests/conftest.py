import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

HEADER = "Date,Temperature,CO2,Water_Quality,Air_Quality"

WELL_FORMED_CSV = "\n".join([
    HEADER,
    "2024-01-03,10.0,410,80,40",
    "2024-01-01,20.0,420,90,50",
    "2024-01-02,30.0,430,100,60",
]) + "\n"


class FakeTarget:
    """Records the streamlit placeholder calls made against it."""

    def __init__(self, name, events):
        self.name = name
        self.events = events
        self.figure = None
        self.data = None

    def metric(self, label, value):
        self.events.append((self.name, "metric", label, value))

    def dataframe(self, data, **kwargs):
        self.data = data
        self.events.append((self.name, "dataframe"))

    def plotly_chart(self, figure, **kwargs):
        if self.figure is not None:
            raise RuntimeError(f"{self.name} already holds a chart")
        self.figure = figure
        self.events.append((self.name, "plotly_chart"))

    def empty(self):
        self.figure = None
        self.events.append((self.name, "empty"))


@pytest.fixture
def events():
    return []


@pytest.fixture
def targets(events):
    return {
        "stats": [FakeTarget(f"stat{i}", events) for i in range(4)],
        "table": FakeTarget("table", events),
        "main": FakeTarget("main", events),
        "quality": FakeTarget("quality", events),
    }


@pytest.fixture
def presenter(targets):
    from dashboard.presenter import Presenter

    return Presenter(targets["stats"], targets["table"], targets["main"], targets["quality"])


@pytest.fixture
def write_csv(tmp_path):
    def _write(text, name="data.csv"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)

    return _write
