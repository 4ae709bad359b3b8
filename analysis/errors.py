"""Error types raised by the pure chart pipeline.

Every error carries a user-facing message. The generation service catches
`ChartSnippetError` and turns it into a failed result rather than letting it
escape to the web layer.
"""

from __future__ import annotations


class ChartSnippetError(ValueError):
    """Base class for errors that should be shown to the user verbatim."""


class InputError(ChartSnippetError):
    """Raised when the pasted text cannot be read as CSV or JSON."""


class DataError(ChartSnippetError):
    """Raised when parsed data cannot be turned into a chart configuration."""
