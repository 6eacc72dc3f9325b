#file: frontend/charts.py

import plotly.graph_objects as go

INDIGO = "rgb(99, 102, 241)"
PALETTE = [
    "rgba(99, 102, 241, 0.7)",
    "rgba(244, 114, 182, 0.7)",
    "rgba(234, 179, 8, 0.7)",
    "rgba(239, 68, 68, 0.7)",
    "rgba(168, 85, 247, 0.7)",
    "rgba(34, 197, 94, 0.7)",
]
GAS_COLORS = {"NO2" : "rgb(239, 68, 68)", "SO2" : "rgb(234, 179, 8)", "O3" : "rgb(34, 197, 94)"}
BAR_COLORS = ["rgba(99, 102, 241, 0.5)", "rgba(244, 114, 182, 0.5)"]


def _layout(fig, height = 350) :
    fig.update_layout(
        height = height,
        margin = {"r" : 10, "t" : 30, "l" : 10, "b" : 10},
        hovermode = "x unified",
        legend = dict(orientation = "h", yanchor = "bottom", y = 1.02, xanchor = "right", x = 1)
    )
    return fig


def timeline_figure(chart) :
    """Filled AQI line over the window."""
    dataset = chart["datasets"][0]
    fig = go.Figure(go.Scatter(
        x = chart["labels"],
        y = dataset["data"],
        name = dataset["label"],
        mode = "lines",
        fill = "tozeroy",
        line = dict(color = INDIGO, shape = "spline")
    ))
    return _layout(fig)


def radar_figure(chart) :
    """Window averages per pollutant."""
    dataset = chart["datasets"][0]
    labels = chart["labels"]
    # close the polygon
    fig = go.Figure(go.Scatterpolar(
        r = dataset["data"] + dataset["data"][:1],
        theta = labels + labels[:1],
        name = dataset["label"],
        fill = "toself",
        line = dict(color = INDIGO)
    ))
    return _layout(fig)


def polar_area_figure(chart) :
    """First-hour value per pollutant as polar area segments."""
    dataset = chart["datasets"][0]
    fig = go.Figure(go.Barpolar(
        r = dataset["data"],
        theta = chart["labels"],
        name = dataset["label"],
        marker_color = PALETTE[:len(chart["labels"])]
    ))
    return _layout(fig)


def particulate_bar_figure(chart) :
    fig = go.Figure([
        go.Bar(x = chart["labels"], y = dataset["data"], name = dataset["label"], marker_color = color)
        for dataset, color in zip(chart["datasets"], BAR_COLORS)
    ])
    fig.update_layout(barmode = "group")
    return _layout(fig)


def gas_line_figure(chart) :
    fig = go.Figure([
        go.Scatter(
            x = chart["labels"],
            y = dataset["data"],
            name = dataset["label"],
            mode = "lines",
            line = dict(color = GAS_COLORS.get(dataset["label"]), shape = "spline")
        )
        for dataset in chart["datasets"]
    ])
    return _layout(fig)
