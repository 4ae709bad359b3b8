"""Pure parsing and chart configuration package for chartSnippet.

This package turns pasted text into library-agnostic chart descriptions. It
must not import Django or perform any I/O.
"""

from .chart_config import ChartConfig, Dataset, build_chart_config
from .errors import ChartSnippetError, DataError, InputError
from .input_parser import ParsedTable, parse_input

__all__ = [
    "ChartConfig",
    "ChartSnippetError",
    "DataError",
    "Dataset",
    "InputError",
    "ParsedTable",
    "build_chart_config",
    "parse_input",
]
