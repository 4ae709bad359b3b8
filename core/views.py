"""Views for the chart generator page and the chart download endpoint."""

from __future__ import annotations

import logging
from typing import Final

from django.contrib import messages
from django.http import HttpRequest, HttpResponse
from django.shortcuts import render
from django.views.decorators.http import require_http_methods, require_POST

from core.examples import EXAMPLE_INPUTS
from core.forms import ChartSnippetForm
from core.services import ChartResult, generate_chart_document

logger = logging.getLogger(__name__)

DOWNLOAD_FILENAME: Final[str] = "chart.html"
DOWNLOAD_CONTENT_TYPE: Final[str] = "text/html; charset=utf-8"


@require_http_methods(["GET", "POST"])
def generator(request: HttpRequest) -> HttpResponse:
    """Render the generator page and handle generation submissions.

    GET renders an empty form; `?example=csv` or `?example=json` pre-fills the
    data box with sample input. POST runs the generation service and renders
    the preview and generated code on success. Failures show only the error
    message, never a stale preview.
    """

    result: ChartResult | None = None
    if request.method == "POST":
        form = ChartSnippetForm(request.POST)
        if form.is_valid():
            result = generate_chart_document(form.to_chart_request())
            if result.ok:
                messages.success(request, result.message)
            else:
                messages.error(request, result.message)
        else:
            messages.error(request, form.first_error_message())
    else:
        initial: dict[str, str] = {}
        example_key = (request.GET.get("example") or "").strip().lower()
        if example_key in EXAMPLE_INPUTS:
            initial["raw_text"] = EXAMPLE_INPUTS[example_key]
        form = ChartSnippetForm(initial=initial)

    document = result.document if result is not None and result.ok else None
    return render(
        request,
        "core/generator.html",
        {
            "form": form,
            "result": result,
            "document": document,
            "example_keys": tuple(EXAMPLE_INPUTS),
            "download_filename": DOWNLOAD_FILENAME,
        },
    )


@require_POST
def download_chart(request: HttpRequest) -> HttpResponse:
    """Return the generated chart document as a `chart.html` attachment.

    The document is regenerated from the submitted fields; nothing is kept
    between requests.
    """

    form = ChartSnippetForm(request.POST)
    if not form.is_valid():
        return HttpResponse(
            f"{form.first_error_message()}\n",
            content_type="text/plain; charset=utf-8",
            status=400,
        )

    result = generate_chart_document(form.to_chart_request())
    if not result.ok or result.document is None:
        return HttpResponse(
            f"{result.message}\n",
            content_type="text/plain; charset=utf-8",
            status=400,
        )

    logger.debug("Serving %s (%d characters).", DOWNLOAD_FILENAME, len(result.document))
    response = HttpResponse(result.document, content_type=DOWNLOAD_CONTENT_TYPE)
    response["Content-Disposition"] = f'attachment; filename="{DOWNLOAD_FILENAME}"'
    return response
