#file: dashboard/presenter.py

import logging
from typing import Sequence

import pandas as pd

from dashboard.ui_elements import build_main_chart, build_quality_chart
from dashboard.utils import format_table
from envmonitor.models import Summary, series


class ChartSlot :
    """A render target holding at most one live chart.

    ``target`` is a streamlit placeholder (``st.empty()``) or anything exposing
    ``plotly_chart`` and ``empty``.
    """

    def __init__(self, target) :
        self.target = target
        self.figure = None

    def destroy(self) -> None :
        if self.figure is None :
            return
        self.target.empty()
        self.figure = None

    def replace(self, figure) -> None :
        """Release the current chart, then draw ``figure`` in its place."""
        self.destroy()
        self.target.plotly_chart(figure)
        self.figure = figure


class Presenter :
    """Maps a validated dataset and its summary onto the dashboard's render targets."""

    def __init__(self, stat_targets: Sequence, table_target, main_target, quality_target) :
        if len(stat_targets) != 4 :
            raise ValueError(f"Expected 4 statistic targets, got {len(stat_targets)}")
        self.stat_targets = list(stat_targets)
        self.table_target = table_target
        self.main_chart = ChartSlot(main_target)
        self.quality_chart = ChartSlot(quality_target)

    def show_statistics(self, summary: Summary) -> None :
        for target, (label, value) in zip(self.stat_targets, summary.display().items()) :
            target.metric(label, value)

    def populate_table(self, dataset: pd.DataFrame) -> None :
        self.table_target.dataframe(format_table(dataset), hide_index = True)

    def create_charts(self, dataset: pd.DataFrame) -> None :
        labels = series(dataset, "Date")
        self.main_chart.replace(build_main_chart(labels, series(dataset, "Temperature"), series(dataset, "CO2")))
        self.quality_chart.replace(
            build_quality_chart(labels, series(dataset, "Water_Quality"), series(dataset, "Air_Quality"))
        )
        logging.info("Charts created successfully.")

    def render(self, dataset: pd.DataFrame, summary: Summary) -> None :
        self.show_statistics(summary)
        self.populate_table(dataset)
        self.create_charts(dataset)
