"""Table serializer: render a Table back to padded, aligned pipe-table text.

Output shape (width W per column, W = max(len(header), 3, len(every cell))):

    | Name  | Qty |
    |:------| ---:|
    | apple | 3   |

Separator segments per alignment, each followed by '|':

    left    ':' + '-' * W + '-'
    right   ' ' + '-' * W + ':'
    center  ':' + '-' * W + ':'
    none    ' ' + '-' * W + '-'

Every segment is W + 2 characters wide, the same as a ' cell ' segment, so the
pipes line up.  This exact separator shape is what existing files written by
the editor contain and must be reproduced character for character.
"""

import csv
import io
import logging

from md_sheet.tables.patterns import PIPE
from md_sheet.tables.schema import Alignment, Table

logger = logging.getLogger(__name__)

MIN_COLUMN_WIDTH = 3


def column_widths(table: Table) -> list[int]:
    """Return the padded display width of every column."""
    widths = [max(len(header), MIN_COLUMN_WIDTH) for header in table.headers]
    for row in table.rows:
        for ci, cell in enumerate(row[: len(widths)]):
            widths[ci] = max(widths[ci], len(cell))
    return widths


def _separator_segment(alignment: Alignment, width: int) -> str:
    dashes = "-" * width
    if alignment == "left":
        return f":{dashes}-"
    if alignment == "right":
        return f" {dashes}:"
    if alignment == "center":
        return f":{dashes}:"
    return f" {dashes}-"


def _render_row(cells: list[str], widths: list[int]) -> str:
    out = PIPE
    for ci, width in enumerate(widths):
        cell = cells[ci] if ci < len(cells) else ""
        out += f" {cell.ljust(width)} {PIPE}"
    return out


def table_lines(table: Table) -> list[str]:
    """Render a table as a list of lines (header, separator, body rows), without newlines."""
    widths = column_widths(table)

    lines = [_render_row(table.headers, widths)]
    separator = PIPE
    for ci, width in enumerate(widths):
        alignment = table.alignments[ci] if ci < len(table.alignments) else "none"
        separator += _separator_segment(alignment, width) + PIPE
    lines.append(separator)

    for row in table.rows:
        lines.append(_render_row(row, widths))
    return lines


def serialize_table(table: Table) -> str:
    """Render a table as pipe-table text terminated by a newline after the last row."""
    return "\n".join(table_lines(table)) + "\n"


def table_to_csv(table: Table, delimiter: str = ",") -> str:
    """Render the header row and body rows as CSV (or TSV with delimiter='\\t')."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, delimiter=delimiter, lineterminator="\n")
    writer.writerow(table.headers)
    writer.writerows(table.rows)
    logger.debug("Exported table at line %d as %d delimited rows", table.start_line, table.row_count + 1)
    return buffer.getvalue()
