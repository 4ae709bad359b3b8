"""Sample inputs offered on the generator page."""

from __future__ import annotations

from typing import Final

EXAMPLE_CSV: Final[str] = """month,sales,expenses
Jan,120,80
Feb,150,90
Mar,90,70
Apr,180,95"""

EXAMPLE_JSON: Final[str] = """[
  {"month": "Jan", "sales": 120, "expenses": 80},
  {"month": "Feb", "sales": 150, "expenses": 90},
  {"month": "Mar", "sales": 90, "expenses": 70},
  {"month": "Apr", "sales": 180, "expenses": 95}
]"""

EXAMPLE_INPUTS: Final[dict[str, str]] = {
    "csv": EXAMPLE_CSV,
    "json": EXAMPLE_JSON,
}
