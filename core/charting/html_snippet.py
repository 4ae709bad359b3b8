"""Render a ChartConfig into a standalone Chart.js HTML document.

The document embeds the full Chart.js configuration (type, labels, datasets
and options) as a JSON data block and loads Chart.js from a pinned CDN URL.
Rendering is pure templating: the same ChartConfig always yields the same
bytes.
"""

from __future__ import annotations

from typing import Any, Final, NotRequired, TypedDict

from django.template.loader import render_to_string

from analysis.chart_config import ChartConfig, Dataset

CHART_JS_CDN_URL: Final[str] = "https://cdnjs.cloudflare.com/ajax/libs/Chart.js/4.4.1/chart.umd.js"
CHART_DOCUMENT_TEMPLATE: Final[str] = "core/chart_document.html"
CHART_CONFIG_ELEMENT_ID: Final[str] = "chart-config"

AXISLESS_CHART_TYPES: Final[frozenset[str]] = frozenset({"pie", "doughnut", "radar", "polarArea"})

_TICK_COLOR: Final[str] = "#6b7280"


class ChartJsDataset(TypedDict):
    """A Chart.js dataset payload embedded in the generated document."""

    label: str
    data: list[int | float]
    backgroundColor: str
    borderColor: str
    borderWidth: int
    tension: NotRequired[float]


class ChartJsPayload(TypedDict):
    """The full configuration object read by the document's inline script."""

    type: str
    title: str
    labels: list[str]
    datasets: list[ChartJsDataset]
    options: dict[str, Any]


def chart_options(chart_type: str) -> dict[str, Any]:
    """Return Chart.js options for a chart type.

    Args:
        chart_type: Chart kind from the ChartConfig.

    Returns:
        Options dict. Pie, doughnut, radar and polar area charts carry no
        `scales` entry; every other kind gets x/y axes with a zero-based y axis.
    """

    options: dict[str, Any] = {
        "responsive": True,
        "maintainAspectRatio": True,
        "plugins": {
            "legend": {
                "position": "top",
                "labels": {"usePointStyle": True, "padding": 20},
            },
            "title": {"display": False},
            "tooltip": {
                "backgroundColor": "rgba(0,0,0,0.8)",
                "titleColor": "#fff",
                "bodyColor": "#fff",
                "borderColor": "rgba(255,255,255,0.2)",
                "borderWidth": 1,
                "cornerRadius": 6,
                "displayColors": True,
            },
        },
    }
    if chart_type not in AXISLESS_CHART_TYPES:
        options["scales"] = {
            "y": {
                "beginAtZero": True,
                "grid": {"color": "rgba(0,0,0,0.05)"},
                "ticks": {"color": _TICK_COLOR},
            },
            "x": {
                "grid": {"display": False},
                "ticks": {"color": _TICK_COLOR},
            },
        }
    return options


def chart_payload(config: ChartConfig) -> ChartJsPayload:
    """Convert a ChartConfig into the Chart.js payload embedded in the document."""

    return {
        "type": config.chart_type,
        "title": config.title,
        "labels": list(config.labels),
        "datasets": [_dataset_payload(dataset) for dataset in config.datasets],
        "options": chart_options(config.chart_type),
    }


def render_chart_document(config: ChartConfig) -> str:
    """Render a complete, self-contained HTML document for a chart.

    Args:
        config: ChartConfig produced by `build_chart_config`.

    Returns:
        HTML document string. Fields are embedded as given; validation is the
        builder's job.
    """

    return render_to_string(
        CHART_DOCUMENT_TEMPLATE,
        {
            "title": config.title,
            "payload": chart_payload(config),
            "chart_config_id": CHART_CONFIG_ELEMENT_ID,
            "chart_js_url": CHART_JS_CDN_URL,
        },
    )


def _dataset_payload(dataset: Dataset) -> ChartJsDataset:
    """Convert one Dataset into its Chart.js form."""

    payload: ChartJsDataset = {
        "label": dataset.label,
        "data": list(dataset.data),
        "backgroundColor": dataset.background_color,
        "borderColor": dataset.border_color,
        "borderWidth": dataset.border_width,
    }
    if dataset.tension is not None:
        payload["tension"] = dataset.tension
    return payload
