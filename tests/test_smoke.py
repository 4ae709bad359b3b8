"""Minimal smoke tests for project scaffolding."""

from __future__ import annotations

import pytest

pytestmark = pytest.mark.unit


def test_analysis_package_imports() -> None:
    """Import the analysis package and verify the public entry points exist."""

    from analysis import build_chart_config, parse_input

    assert callable(parse_input)
    assert callable(build_chart_config)


def test_django_project_loads() -> None:
    """Verify the configured settings install the core app."""

    from django.conf import settings

    assert "core.apps.CoreConfig" in settings.INSTALLED_APPS
