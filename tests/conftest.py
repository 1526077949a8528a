"""Shared test configuration and fixtures."""

from pathlib import Path

import pytest
from dotenv import load_dotenv

from md_sheet.tables.schema import Table

# Load .env from project root for all tests
root = Path(__file__).parent.parent.resolve()
load_dotenv(root / ".env")


SAMPLE_DOCUMENT = """\
# Inventory

Stock levels for the week.

| Item | Qty | Price |
|:-----|----:|:-----:|
| apple | 3 | 1.20 |
| pear | 12 |
| plum | 7 | 0.80 | extra |

## Suppliers

| Name | City |
| --- | --- |
| Acme | Leeds |

Closing notes.
"""


def make_table(
    headers: list[str],
    rows: list[list[str]],
    alignments: list[str] | None = None,
    start_line: int = 0,
    heading: str | None = None,
) -> Table:
    """Build a Table spanning header + separator + rows starting at *start_line*."""
    return Table(
        heading=heading,
        headers=headers,
        alignments=alignments if alignments is not None else ["none"] * len(headers),
        rows=rows,
        start_line=start_line,
        end_line=start_line + 1 + len(rows),
    )


@pytest.fixture
def sample_document() -> str:
    return SAMPLE_DOCUMENT


@pytest.fixture
def two_by_two() -> Table:
    return make_table(["A", "B"], [["1", "2"], ["3", "4"]])


@pytest.fixture
def table_factory():
    """Factory for tables with a consistent line span."""
    return make_table
