#file: dashboard/ui_elements.py

import plotly.graph_objects as go
from plotly.subplots import make_subplots

TEMPERATURE_COLOR = "rgba(239, 68, 68, 0.8)"
CO2_COLOR = "rgba(16, 185, 129, 0.8)"
WATER_COLOR = "rgba(59, 130, 246, 0.7)"
AIR_COLOR = "rgba(139, 92, 246, 0.7)"

LEGEND = dict(orientation = "h", yanchor = "top", y = -0.2, xanchor = "center", x = 0.5)


def build_main_chart(labels, temperature, co2) :
    """Dual-axis line chart: temperature on the left axis, CO2 on the right."""
    fig = make_subplots(specs = [[{"secondary_y" : True}]])
    fig.add_trace(go.Scatter(
        x = labels,
        y = temperature,
        name = "Temperature (°C)",
        mode = "lines",
        line = dict(color = TEMPERATURE_COLOR, shape = "spline"),
        fill = "tozeroy",
        fillcolor = "rgba(239, 68, 68, 0.1)",
    ), secondary_y = False)
    fig.add_trace(go.Scatter(
        x = labels,
        y = co2,
        name = "CO₂ (ppm)",
        mode = "lines",
        line = dict(color = CO2_COLOR, shape = "spline"),
        fill = "tozeroy",
        fillcolor = "rgba(16, 185, 129, 0.1)",
    ), secondary_y = True)

    # Dates are category labels; keep the order they appear in the file
    fig.update_xaxes(type = "category", categoryorder = "trace")
    fig.update_yaxes(title_text = "Temperature (°C)", secondary_y = False)
    fig.update_yaxes(title_text = "CO₂ (ppm)", secondary_y = True, showgrid = False)
    fig.update_layout(hovermode = "x unified", legend = LEGEND)
    return fig


def build_quality_chart(labels, water_quality, air_quality) :
    """Grouped bar chart of water and air quality on a shared zero-based axis."""
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x = labels,
        y = water_quality,
        name = "Water Quality (%)",
        marker = dict(color = WATER_COLOR, line = dict(color = "rgba(59, 130, 246, 1)", width = 1)),
    ))
    fig.add_trace(go.Bar(
        x = labels,
        y = air_quality,
        name = "Air Quality Index",
        marker = dict(color = AIR_COLOR, line = dict(color = "rgba(139, 92, 246, 1)", width = 1)),
    ))
    fig.update_xaxes(type = "category", categoryorder = "trace")
    fig.update_yaxes(rangemode = "tozero")
    fig.update_layout(barmode = "group", hovermode = "x unified", legend = LEGEND)
    return fig


def show_loading(status) :
    status.info("Loading data...")


def hide_loading(status) :
    status.empty()


def display_error(status, report) :
    """Replace the loading indicator with the error panel."""
    status.error(report.as_markdown())
