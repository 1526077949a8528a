"""Document rebuilder: splice serialized tables back into the original line sequence.

Lines outside table spans are copied verbatim from ParsedDocument.lines; each
table span (start_line..end_line) is replaced by the table's serialized lines.
The pieces are joined with newlines, which is equivalent to terminating every
line with a newline and then dropping the final one: a document that ended
with a newline (last line "") keeps exactly one, and a document that did not
gains none.  Rebuilding therefore never accumulates blank lines across cycles.
"""

import logging

from md_sheet.tables.schema import Table
from md_sheet.tables.serializer import table_lines

logger = logging.getLogger(__name__)


def rebuild_document(lines: list[str], tables: list[Table]) -> str:
    """Reassemble the full document text from retained *lines* and (edited) *tables*.

    Tables must be in ascending start_line order and must not overlap, which
    is how the parser emits them.
    """
    if not tables:
        return "\n".join(lines)

    output: list[str] = []
    cursor = 0
    for table in tables:
        # Text before the table is emitted unchanged
        output.extend(lines[cursor : table.start_line])
        output.extend(table_lines(table))
        cursor = table.end_line + 1

    output.extend(lines[cursor:])

    logger.info("Rebuilt document: %d lines in, %d lines out, %d tables", len(lines), len(output), len(tables))
    return "\n".join(output)
