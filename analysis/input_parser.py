"""Parse pasted CSV or JSON text into a normalized table of records.

JSON is tried first. Anything that is not a non-empty array of objects falls
through to CSV parsing without reporting a JSON-specific error, so the user
sees the CSV message when neither format fits.

The CSV dialect is deliberately simple:
- a double quote toggles "inside quotes" mode (no `""` escapes),
- a comma separates fields only outside quotes,
- quote characters are dropped and every field is trimmed.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from typing import Any, Final, Literal

from .errors import InputError
from .numeric import coerce_number

logger = logging.getLogger(__name__)

TableSource = Literal["csv", "json"]
CellValue = int | float | str
Record = dict[str, Any]

EMPTY_INPUT_MESSAGE: Final[str] = "Please provide data in CSV or JSON format."
CSV_TOO_SHORT_MESSAGE: Final[str] = "CSV must have at least a header row and one data row."

_LINE_BREAK_RE: Final[re.Pattern[str]] = re.compile(r"\r?\n")


@dataclass(frozen=True, slots=True)
class ParsedTable:
    """Normalized records derived from raw input text.

    Args:
        source: Which format the text was read as.
        records: Records in input order. Only the first record's keys decide
            which columns a chart uses.
    """

    source: TableSource
    records: tuple[Record, ...]

    @property
    def columns(self) -> tuple[str, ...]:
        """Column names taken from the first record."""

        if not self.records:
            return ()
        return tuple(self.records[0].keys())


def parse_input(text: str) -> ParsedTable:
    """Parse raw pasted text as JSON records or CSV.

    Args:
        text: Raw text exactly as pasted by the user.

    Returns:
        ParsedTable tagged with the format that matched.

    Raises:
        InputError: When the text is blank, or is not JSON records and has
            fewer than two non-blank CSV lines.
    """

    text = text.strip()
    if not text:
        raise InputError(EMPTY_INPUT_MESSAGE)

    table = _parse_json_records(text)
    if table is not None:
        return table
    return _parse_csv(text)


def parse_csv_line(line: str) -> list[str]:
    """Split one CSV line into trimmed fields.

    Args:
        line: A single line without its line terminator.

    Returns:
        Field values with quote characters removed.
    """

    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    for char in line:
        if char == '"':
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(char)
    fields.append("".join(current).strip())
    return fields


def coerce_cell(raw_value: str) -> CellValue:
    """Return the numeric form of a CSV cell, or the cell text unchanged."""

    number = coerce_number(raw_value)
    if number is None:
        return raw_value
    return number


def _parse_json_records(text: str) -> ParsedTable | None:
    """Return a JSON table, or None when the text is not an array of objects."""

    try:
        parsed = json.loads(text, parse_constant=_reject_json_constant)
    except (ValueError, RecursionError):
        logger.debug("Input is not valid JSON; falling back to CSV.")
        return None

    if not isinstance(parsed, list) or not parsed or not isinstance(parsed[0], dict):
        logger.debug("JSON input is not a non-empty array of objects; falling back to CSV.")
        return None

    records = tuple(dict(item) if isinstance(item, dict) else {} for item in parsed)
    return ParsedTable(source="json", records=records)


def _reject_json_constant(name: str) -> float:
    """Reject `NaN`/`Infinity` literals, which strict JSON does not allow."""

    raise ValueError(f"Unsupported JSON constant: {name}")


def _parse_csv(text: str) -> ParsedTable:
    """Parse CSV text with a header row into coerced records."""

    lines = [line for line in _LINE_BREAK_RE.split(text) if line.strip()]
    if len(lines) < 2:
        raise InputError(CSV_TOO_SHORT_MESSAGE)

    headers = parse_csv_line(lines[0])
    records: list[Record] = []
    for line in lines[1:]:
        cells = parse_csv_line(line)
        record: Record = {}
        for idx, header in enumerate(headers):
            raw_value = cells[idx] if idx < len(cells) else ""
            record[header] = coerce_cell(raw_value)
        records.append(record)
    return ParsedTable(source="csv", records=tuple(records))
