"""Tests for deriving chart configurations from parsed tables."""

from __future__ import annotations

import pytest

from analysis.chart_config import (
    LINE_TENSION,
    NO_DATA_MESSAGE,
    NO_NUMERIC_COLUMNS_MESSAGE,
    TOO_FEW_COLUMNS_MESSAGE,
    build_chart_config,
    dataset_color,
    generate_colors,
)
from analysis.errors import DataError
from analysis.input_parser import ParsedTable, parse_input

pytestmark = pytest.mark.unit


def test_build_chart_config_from_monthly_csv(monthly_csv: str) -> None:
    """Use the first column as labels and each numeric column as a dataset."""

    config = build_chart_config(parse_input(monthly_csv), chart_type="bar", title="Budget")

    assert config.chart_type == "bar"
    assert config.title == "Budget"
    assert config.labels == ("Jan", "Feb")
    assert [dataset.label for dataset in config.datasets] == ["sales", "expenses"]
    assert config.datasets[0].data == (120, 150)
    assert config.datasets[1].data == (80, 90)
    assert all(dataset.border_width == 2 for dataset in config.datasets)
    assert all(dataset.tension is None for dataset in config.datasets)


def test_build_chart_config_passes_kind_and_title_verbatim() -> None:
    """Carry the caller's chart kind and title through unchanged."""

    table = parse_input("a,b\nx,1")
    config = build_chart_config(table, chart_type="not-a-kind", title="  spaced  ")

    assert config.chart_type == "not-a-kind"
    assert config.title == "  spaced  "


def test_build_chart_config_sets_tension_for_line_charts(monthly_csv: str) -> None:
    """Smooth line chart datasets with a fixed curve tension."""

    config = build_chart_config(parse_input(monthly_csv), chart_type="line", title="t")

    assert {dataset.tension for dataset in config.datasets} == {LINE_TENSION}


def test_build_chart_config_skips_columns_without_numbers() -> None:
    """Drop candidate columns that never hold a numeric value."""

    table = parse_input("name,team,score,note\nA,red,10,\nB,blue,,x")
    config = build_chart_config(table, chart_type="bar", title="t")

    assert [dataset.label for dataset in config.datasets] == ["score"]
    assert config.datasets[0].data == (10, 0)


def test_build_chart_config_empty_cells_do_not_qualify_column() -> None:
    """Require an actual number; empty cells alone never qualify a column."""

    table = parse_input("name,blank,score\nA,,1\nB,,2")
    config = build_chart_config(table, chart_type="bar", title="t")

    assert [dataset.label for dataset in config.datasets] == ["score"]


def test_build_chart_config_coerces_json_strings_and_missing_values() -> None:
    """Coerce numeric JSON strings and use 0 for missing or non-numeric values."""

    table = parse_input('[{"k": "a", "v": "1.5"}, {"k": "b", "v": "n/a"}, {"k": "c"}, {"k": "d", "v": 4}]')
    config = build_chart_config(table, chart_type="line", title="t")

    assert config.datasets[0].data == (1.5, 0, 0, 4)


def test_build_chart_config_stringifies_labels() -> None:
    """Stringify label values, using an empty string for missing or null labels."""

    table = ParsedTable(
        source="json",
        records=(
            {"k": 2021, "v": 1},
            {"k": 3.0, "v": 2},
            {"k": None, "v": 3},
            {"v": 4},
            {"k": True, "v": 5},
        ),
    )
    config = build_chart_config(table, chart_type="bar", title="t")

    assert config.labels == ("2021", "3", "", "", "true")


def test_build_chart_config_uses_first_record_keys_only() -> None:
    """Ignore keys that appear only in later records."""

    table = parse_input('[{"k": "a", "v": 1}, {"k": "b", "v": 2, "extra": 9}]')
    config = build_chart_config(table, chart_type="bar", title="t")

    assert [dataset.label for dataset in config.datasets] == ["v"]


def test_build_chart_config_rejects_empty_table() -> None:
    """Raise DataError when there are no records."""

    with pytest.raises(DataError) as excinfo:
        build_chart_config(ParsedTable(source="json", records=()), chart_type="bar", title="t")
    assert str(excinfo.value) == NO_DATA_MESSAGE


def test_build_chart_config_rejects_single_column() -> None:
    """Raise DataError when only a label column exists."""

    with pytest.raises(DataError) as excinfo:
        build_chart_config(parse_input('[{"a":"x"}]'), chart_type="bar", title="t")
    assert str(excinfo.value) == TOO_FEW_COLUMNS_MESSAGE


def test_build_chart_config_rejects_tables_without_numeric_columns() -> None:
    """Raise DataError when no value column holds a number."""

    with pytest.raises(DataError) as excinfo:
        build_chart_config(parse_input("name,team\nA,red\nB,blue"), chart_type="bar", title="t")
    assert str(excinfo.value) == NO_NUMERIC_COLUMNS_MESSAGE


@pytest.mark.parametrize("index", [0, 1, 2, 3, 7, 50])
def test_dataset_color_hue_follows_golden_angle(index: int) -> None:
    """Assign hue `(index * 137.5) % 360` regardless of dataset content."""

    colors = dataset_color(index)

    assert colors.hue == (index * 137.5) % 360
    assert colors == dataset_color(index)


def test_dataset_color_formats_hsla_strings() -> None:
    """Format translucent backgrounds and opaque borders for the same hue."""

    assert dataset_color(0).background == "hsla(0, 70%, 60%, 0.6)"
    assert dataset_color(0).border == "hsla(0, 70%, 50%, 1)"
    assert dataset_color(1).background == "hsla(137.5, 70%, 60%, 0.6)"
    assert dataset_color(2).border == "hsla(275, 70%, 50%, 1)"
    assert dataset_color(3).border == "hsla(52.5, 70%, 50%, 1)"


def test_generate_colors_matches_per_index_colors(monthly_csv: str) -> None:
    """Give each dataset the color of its position."""

    config = build_chart_config(parse_input(monthly_csv), chart_type="bar", title="t")
    colors = generate_colors(len(config.datasets))

    assert [dataset.background_color for dataset in config.datasets] == [c.background for c in colors]
    assert [dataset.border_color for dataset in config.datasets] == [c.border for c in colors]


def test_build_chart_config_stringifies_structured_labels_like_the_browser() -> None:
    """Join list labels with commas and render object labels as `[object Object]`."""

    table = ParsedTable(
        source="json",
        records=(
            {"k": [1, 2], "v": 1},
            {"k": [1, [2, None], "x"], "v": 2},
            {"k": {"a": 1}, "v": 3},
        ),
    )
    config = build_chart_config(table, chart_type="bar", title="t")

    assert config.labels == ("1,2", "1,2,,x", "[object Object]")
