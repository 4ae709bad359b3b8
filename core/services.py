"""Service-layer functions for the core app.

`generate_chart_document` is the single entry point that turns a submitted
request into a chart document. It coordinates the pure `analysis` modules
with Django template rendering and converts pipeline errors into a failed
result instead of raising.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Final

from analysis.chart_config import ChartConfig, build_chart_config
from analysis.errors import ChartSnippetError
from analysis.input_parser import parse_input
from core.charting.html_snippet import render_chart_document

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE: Final[str] = "Chart HTML generated successfully!"


@dataclass(frozen=True, slots=True)
class ChartRequest:
    """Inputs for one chart generation.

    Args:
        raw_text: CSV or JSON text as pasted by the user.
        chart_type: Chart kind.
        title: Chart title.
    """

    raw_text: str
    chart_type: str
    title: str


@dataclass(frozen=True, slots=True)
class ChartResult:
    """Outcome of one chart generation.

    Args:
        ok: Whether a document was produced.
        message: Human-readable success or error message.
        document: Generated HTML document; None on failure.
        config: ChartConfig the document was rendered from; None on failure.
    """

    ok: bool
    message: str
    document: str | None = None
    config: ChartConfig | None = None


def generate_chart_document(request: ChartRequest) -> ChartResult:
    """Parse input, build the chart config and render the HTML document.

    Args:
        request: Raw text plus the chart kind and title chosen by the user.

    Returns:
        ChartResult. Failures carry the error message and no document, so
        callers never see a partial result.
    """

    try:
        table = parse_input(request.raw_text)
        config = build_chart_config(table, chart_type=request.chart_type, title=request.title)
    except ChartSnippetError as exc:
        logger.info("Chart generation rejected (%s): %s", type(exc).__name__, exc)
        return ChartResult(ok=False, message=str(exc))

    document = render_chart_document(config)
    logger.info(
        "Generated %s chart from %s input: %d record(s), %d dataset(s).",
        config.chart_type,
        table.source,
        len(table.records),
        len(config.datasets),
    )
    return ChartResult(ok=True, message=SUCCESS_MESSAGE, document=document, config=config)
