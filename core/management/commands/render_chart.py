"""Render a chart document from a CSV or JSON file."""

from __future__ import annotations

import sys
from pathlib import Path

from django.core.management.base import BaseCommand, CommandError

from analysis.chart_config import CHART_TYPE_CHOICES, DEFAULT_CHART_TITLE, DEFAULT_CHART_TYPE
from core.services import ChartRequest, generate_chart_document


class Command(BaseCommand):
    """Generate a standalone chart HTML document from a data file."""

    help = "Render CSV or JSON data into a standalone chart HTML document."

    def add_arguments(self, parser) -> None:
        """Add command arguments."""

        parser.add_argument(
            "input",
            help="Path to a CSV or JSON file, or '-' to read from stdin.",
        )
        parser.add_argument(
            "--type",
            dest="chart_type",
            choices=[value for value, _label in CHART_TYPE_CHOICES],
            default=DEFAULT_CHART_TYPE,
            help=f"Chart type (default: {DEFAULT_CHART_TYPE}).",
        )
        parser.add_argument(
            "--title",
            default=DEFAULT_CHART_TITLE,
            help=f"Chart title (default: {DEFAULT_CHART_TITLE!r}).",
        )
        parser.add_argument(
            "-o",
            "--output",
            default=None,
            help="Write the document to this path instead of stdout.",
        )

    def handle(self, *args, **options) -> str | None:
        """Run the command."""

        input_path: str = options["input"]
        output_path: str | None = options["output"]

        raw_text = self._read_input(input_path)
        result = generate_chart_document(
            ChartRequest(raw_text=raw_text, chart_type=options["chart_type"], title=options["title"])
        )
        if not result.ok or result.document is None:
            raise CommandError(result.message)

        if output_path is None:
            self.stdout.write(result.document, ending="")
            return None

        target = Path(output_path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(result.document, encoding="utf-8")
        self.stderr.write(f"Wrote {target}")
        return None

    def _read_input(self, input_path: str) -> str:
        """Read raw input text from a file path or stdin."""

        if input_path == "-":
            return sys.stdin.read()
        try:
            return Path(input_path).read_text(encoding="utf-8")
        except OSError as exc:
            raise CommandError(f"Could not read {input_path}: {exc}") from exc
