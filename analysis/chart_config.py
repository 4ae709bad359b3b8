"""Derive a library-agnostic chart description from a parsed table.

The first column supplies the labels; every later column that holds at least
one numeric value becomes a dataset. Colors depend only on a dataset's
position, so the same column order always yields the same colors.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Final, Literal

from .errors import DataError
from .input_parser import ParsedTable
from .numeric import Number, is_numeric_value, numeric_or_zero

ChartType = Literal["bar", "line", "pie", "doughnut", "radar", "bubble", "scatter", "polarArea"]

CHART_TYPE_CHOICES: Final[tuple[tuple[str, str], ...]] = (
    ("bar", "Bar Chart"),
    ("line", "Line Chart"),
    ("pie", "Pie Chart"),
    ("doughnut", "Doughnut Chart"),
    ("radar", "Radar Chart"),
    ("bubble", "Bubble Chart"),
    ("scatter", "Scatter Chart"),
    ("polarArea", "Polar Area Chart"),
)
CHART_TYPES: Final[frozenset[str]] = frozenset(value for value, _label in CHART_TYPE_CHOICES)

DEFAULT_CHART_TYPE: Final[str] = "bar"
DEFAULT_CHART_TITLE: Final[str] = "My Chart"

GOLDEN_ANGLE_DEGREES: Final[float] = 137.5
LINE_TENSION: Final[float] = 0.4

NO_DATA_MESSAGE: Final[str] = "No data found."
TOO_FEW_COLUMNS_MESSAGE: Final[str] = "Data must have at least 2 columns (labels and values)."
NO_NUMERIC_COLUMNS_MESSAGE: Final[str] = (
    "No numeric columns found. At least one column must contain numeric values."
)


@dataclass(frozen=True, slots=True)
class DatasetColors:
    """Background/border color pair for one dataset.

    Args:
        hue: Hue in degrees, in `[0, 360)`.
        background: Translucent fill color as an `hsla()` string.
        border: Opaque outline color as an `hsla()` string.
    """

    hue: float
    background: str
    border: str


@dataclass(frozen=True, slots=True)
class Dataset:
    """A named numeric series within a chart.

    Args:
        label: Source column name.
        data: One value per record; non-numeric cells are 0.
        background_color: Fill color.
        border_color: Outline color.
        border_width: Outline width in pixels.
        tension: Bezier curve tension, set for line charts only.
    """

    label: str
    data: tuple[Number, ...]
    background_color: str
    border_color: str
    border_width: int = 2
    tension: float | None = None


@dataclass(frozen=True, slots=True)
class ChartConfig:
    """Abstract chart description consumed by the HTML generator.

    Args:
        chart_type: Chart kind, passed through from the caller.
        title: Chart title, passed through from the caller.
        labels: One label per record, from the first column.
        datasets: One dataset per numeric column, in column order.
    """

    chart_type: str
    title: str
    labels: tuple[str, ...]
    datasets: tuple[Dataset, ...]


def dataset_color(index: int) -> DatasetColors:
    """Return the deterministic color pair for the dataset at `index`.

    Hues advance by the golden angle, which keeps neighbouring series far
    apart on the color wheel for any number of series.
    """

    hue = (index * GOLDEN_ANGLE_DEGREES) % 360
    hue_text = _format_hue(hue)
    return DatasetColors(
        hue=hue,
        background=f"hsla({hue_text}, 70%, 60%, 0.6)",
        border=f"hsla({hue_text}, 70%, 50%, 1)",
    )


def generate_colors(count: int) -> tuple[DatasetColors, ...]:
    """Return color pairs for the first `count` datasets."""

    return tuple(dataset_color(idx) for idx in range(count))


def build_chart_config(table: ParsedTable, *, chart_type: str, title: str) -> ChartConfig:
    """Build a ChartConfig from a parsed table.

    Args:
        table: Parsed input records.
        chart_type: Chart kind chosen by the user (not validated here).
        title: Chart title chosen by the user.

    Returns:
        ChartConfig with one label per record and one dataset per numeric column.

    Raises:
        DataError: When there are no records, fewer than two columns, or no
            column after the first holds a numeric value.
    """

    records = table.records
    if not records:
        raise DataError(NO_DATA_MESSAGE)

    keys = list(records[0].keys())
    if len(keys) < 2:
        raise DataError(TOO_FEW_COLUMNS_MESSAGE)

    label_key = keys[0]
    numeric_keys = [
        key for key in keys[1:] if any(is_numeric_value(record.get(key)) for record in records)
    ]
    if not numeric_keys:
        raise DataError(NO_NUMERIC_COLUMNS_MESSAGE)

    labels = tuple(_label_text(record.get(label_key)) for record in records)
    colors = generate_colors(len(numeric_keys))
    tension = LINE_TENSION if chart_type == "line" else None
    datasets = tuple(
        Dataset(
            label=key,
            data=tuple(numeric_or_zero(record.get(key)) for record in records),
            background_color=colors[idx].background,
            border_color=colors[idx].border,
            tension=tension,
        )
        for idx, key in enumerate(numeric_keys)
    )
    return ChartConfig(chart_type=chart_type, title=title, labels=labels, datasets=datasets)


def _format_hue(hue: float) -> str:
    """Format a hue without a trailing `.0` for whole degrees."""

    if float(hue).is_integer():
        return str(int(hue))
    return str(hue)


def _label_text(value: object) -> str:
    """Stringify a label cell the way the browser's `String()` would."""

    if value is None:
        return ""
    if isinstance(value, list):
        return ",".join(_label_text(item) for item in value)
    if isinstance(value, dict):
        return "[object Object]"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and math.isfinite(value) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return str(value)
