"""Document parser: extract pipe tables from Markdown while keeping every line verbatim.

Scans the document line by line, tracking the most recent heading, and
recognises (header row, separator row, body rows*) runs.  Each run becomes a
Table anchored to its original line span; all other lines are left untouched
in ParsedDocument.lines.

Boundary policy
---------------
- A heading line ('#' after trimming) is never table content, even if it
  contains a pipe.  It only updates the heading context.
- A table body ends at the first line that is not a pipe row OR that is
  itself separator-shaped.  A dashes-only row therefore terminates the table
  and plain text resumes on that line.
- Fenced code blocks are not special-cased unless skip_code_fences is set, so
  table-shaped text inside a fence is recognised as a table by default.
"""

import logging

from md_sheet.tables.grammar import (
    closes_fence,
    fence_marker,
    heading_text,
    is_heading_line,
    is_separator_line,
    is_table_line,
    parse_alignments,
    parse_row,
)
from md_sheet.tables.schema import Alignment, ParsedDocument, Table

logger = logging.getLogger(__name__)


def _fit(cells: list, width: int, filler) -> list:
    """Pad-fill or truncate a cell list to exactly *width* entries."""
    return (cells + [filler] * (width - len(cells)))[:width]


def _read_table(lines: list[str], start: int, heading: str | None) -> Table:
    """Build the Table whose header row is at *start* (separator at start + 1)."""
    headers = parse_row(lines[start])
    alignments: list[Alignment] = _fit(parse_alignments(lines[start + 1]), len(headers), "none")

    rows: list[list[str]] = []
    j = start + 2
    while j < len(lines) and is_table_line(lines[j]) and not is_separator_line(lines[j]):
        rows.append(_fit(parse_row(lines[j]), len(headers), ""))
        j += 1

    return Table(
        heading=heading,
        headers=headers,
        alignments=alignments,
        rows=rows,
        start_line=start,
        end_line=j - 1,
    )


def parse_document(text: str, skip_code_fences: bool = False) -> ParsedDocument:
    """Split *text* on newlines and extract every pipe table, in ascending line order.

    With skip_code_fences=True, lines between ``` / ~~~ fences are passed over
    (they still remain in `lines`, they just never start a table or a heading).
    """
    lines = text.split("\n")
    tables: list[Table] = []
    heading: str | None = None
    fence: str | None = None  # marker run of the open fence

    i = 0
    while i < len(lines):
        line = lines[i]

        if skip_code_fences:
            if fence is not None:
                if closes_fence(line, fence):
                    fence = None
                i += 1
                continue
            opener = fence_marker(line)
            if opener is not None:
                fence = opener
                i += 1
                continue

        # Heading lines only update the context
        if is_heading_line(line):
            heading = heading_text(line)
            i += 1
            continue

        # Header row followed directly by a separator row starts a table
        if i + 1 < len(lines) and is_table_line(line) and is_separator_line(lines[i + 1]):
            table = _read_table(lines, i, heading)
            logger.debug(
                "Table %d at lines %d-%d: %d columns, %d rows (heading=%r)",
                len(tables),
                table.start_line,
                table.end_line,
                table.column_count,
                table.row_count,
                heading,
            )
            tables.append(table)
            i = table.end_line + 1
            continue

        i += 1

    logger.info("Parsed %d lines, found %d tables", len(lines), len(tables))
    return ParsedDocument(lines=lines, tables=tables)
