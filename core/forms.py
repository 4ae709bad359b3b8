"""Forms for the chart generator page."""

from __future__ import annotations

from django import forms

from analysis.chart_config import CHART_TYPE_CHOICES, DEFAULT_CHART_TITLE, DEFAULT_CHART_TYPE
from core.services import ChartRequest

TITLE_MAX_LENGTH = 200


class ChartSnippetForm(forms.Form):
    """Collect pasted data and chart options for one generation request.

    `raw_text` is optional at the form level so that blank input reaches the
    generation service and is reported with the same message as any other
    input error.
    """

    raw_text = forms.CharField(
        required=False,
        strip=False,
        label="Data",
        widget=forms.Textarea(
            attrs={
                "rows": 14,
                "cols": 80,
                "placeholder": "Paste CSV (header row first) or a JSON array of objects.",
                "spellcheck": "false",
            }
        ),
        help_text="The first column becomes the labels; numeric columns become datasets.",
    )
    chart_type = forms.ChoiceField(
        choices=CHART_TYPE_CHOICES,
        initial=DEFAULT_CHART_TYPE,
        label="Chart type",
    )
    title = forms.CharField(
        required=False,
        max_length=TITLE_MAX_LENGTH,
        initial=DEFAULT_CHART_TITLE,
        label="Chart title",
    )

    def to_chart_request(self) -> ChartRequest:
        """Return the validated form values as a ChartRequest.

        Returns:
            ChartRequest built from `cleaned_data`.
        """

        return ChartRequest(
            raw_text=self.cleaned_data.get("raw_text") or "",
            chart_type=self.cleaned_data["chart_type"],
            title=self.cleaned_data.get("title") or "",
        )

    def first_error_message(self) -> str:
        """Return a single message summarizing the form errors."""

        for field_name, errors in self.errors.items():
            label = self.fields[field_name].label if field_name in self.fields else field_name
            return f"{label}: {errors[0]}"
        return "Invalid chart options."
