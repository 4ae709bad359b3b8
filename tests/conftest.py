"""Pytest fixtures shared across chartSnippet tests."""

from __future__ import annotations

from collections.abc import Sequence

import pytest

MONTHLY_CSV = "month,sales,expenses\nJan,120,80\nFeb,150,90"


@pytest.fixture
def monthly_csv() -> str:
    """Return the two-month sales/expenses CSV sample."""

    return MONTHLY_CSV


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test has exactly one speed marker.

    The suite is runnable by intent:
    - `unit`: pure, fast tests that do not go through Django views or commands.
    - `integration`: tests touching Django views, templates, commands, or IO.

    Each test must have exactly one of these markers.
    """

    invalid: list[str] = []
    for item in items:
        has_unit = item.get_closest_marker("unit") is not None
        has_integration = item.get_closest_marker("integration") is not None
        if has_unit == has_integration:
            markers = []
            if has_unit:
                markers.append("unit")
            if has_integration:
                markers.append("integration")
            invalid.append(f"{item.nodeid} (markers={markers or 'none'})")

    if invalid:
        joined = "\n".join(f"- {nodeid}" for nodeid in invalid)
        raise pytest.UsageError(
            "Each test must have exactly one speed marker: `@pytest.mark.unit` or "
            "`@pytest.mark.integration`.\n"
            f"Offending tests:\n{joined}"
        )
