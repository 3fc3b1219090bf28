from __future__ import annotations

import pytest

from dashboard.presenter import ChartSlot, Presenter
from dashboard.utils import PLACEHOLDER, format_cell, format_table
from envmonitor.aggregator import summarize
from envmonitor.parser import parse_csv

from conftest import HEADER, WELL_FORMED_CSV, FakeTarget


@pytest.fixture
def dataset():
    return parse_csv(WELL_FORMED_CSV).frame


def test_format_cell():
    assert format_cell(None) == PLACEHOLDER
    assert format_cell(float("nan")) == PLACEHOLDER
    assert format_cell(415.0) == "415"
    assert format_cell(12.5) == "12.5"
    assert format_cell(0.0) == "0"
    assert format_cell("2024-01-01") == "2024-01-01"


def test_table_mirrors_dataset_order_with_fixed_columns():
    text = "CO2,Date,Air_Quality,Temperature,Water_Quality\n410,2024-01-02,40,10.5,80\n420,2024-01-01,50,11,90\n"
    table = format_table(parse_csv(text).frame)
    assert list(table.columns) == HEADER.split(",")
    assert table.values.tolist() == [
        ["2024-01-02", "10.5", "410", "80", "40"],
        ["2024-01-01", "11", "420", "90", "50"],
    ]


def test_table_substitutes_placeholder_for_missing_values():
    table = format_table(parse_csv(f"{HEADER}\n,12.0,abc,,40\n2024-01-02,13.0,411\n").frame)
    assert table.values.tolist() == [
        [PLACEHOLDER, "12", PLACEHOLDER, PLACEHOLDER, "40"],
        ["2024-01-02", "13", "411", PLACEHOLDER, PLACEHOLDER],
    ]


def test_statistics_cards(presenter, dataset, events):
    presenter.show_statistics(summarize(dataset))
    assert [e for e in events if e[1] == "metric"] == [
        ("stat0", "metric", "Temperature", "20.0 °C"),
        ("stat1", "metric", "CO₂", "420 ppm"),
        ("stat2", "metric", "Water Quality", "90 %"),
        ("stat3", "metric", "Air Quality", "50"),
    ]


def test_presenter_needs_four_statistic_targets(targets):
    with pytest.raises(ValueError):
        Presenter(targets["stats"][:3], targets["table"], targets["main"], targets["quality"])


def test_main_chart_overlays_temperature_and_co2_on_two_axes(presenter, dataset, targets):
    presenter.create_charts(dataset)
    figure = targets["main"].figure
    temperature, co2 = figure.data
    assert list(temperature.x) == ["2024-01-03", "2024-01-01", "2024-01-02"]
    assert list(temperature.y) == [10.0, 20.0, 30.0]
    assert temperature.yaxis == "y"
    assert co2.yaxis == "y2"
    assert figure.layout.xaxis.type == "category"


def test_quality_chart_is_grouped_bars_from_zero(presenter, dataset, targets):
    presenter.create_charts(dataset)
    figure = targets["quality"].figure
    assert [trace.type for trace in figure.data] == ["bar", "bar"]
    assert list(figure.data[0].y) == [80.0, 90.0, 100.0]
    assert list(figure.data[1].x) == ["2024-01-03", "2024-01-01", "2024-01-02"]
    assert figure.layout.barmode == "group"
    assert figure.layout.yaxis.rangemode == "tozero"


def test_rerender_releases_previous_charts_first(presenter, dataset, events):
    summary = summarize(dataset)
    presenter.render(dataset, summary)
    first_figure = presenter.main_chart.figure
    events.clear()

    presenter.render(dataset, summary)

    main_events = [e[1] for e in events if e[0] == "main"]
    quality_events = [e[1] for e in events if e[0] == "quality"]
    assert main_events == ["empty", "plotly_chart"]
    assert quality_events == ["empty", "plotly_chart"]
    assert presenter.main_chart.figure is not first_figure


def test_destroy_on_empty_slot_is_a_noop(events):
    slot = ChartSlot(FakeTarget("slot", events))
    slot.destroy()
    assert events == []
