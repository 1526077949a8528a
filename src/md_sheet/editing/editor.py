"""Structured edit operations over a document's tables, with undo/redo.

Every mutating operation follows the same contract:

  1. Bounds-check the table / row / column indices (TableIndexError on failure).
  2. Deep-clone the current table list.
  3. Mutate the clone and re-check the edited table's shape.
  4. Push the clone as the new current state.

Refused edits (deleting the last row or column, fill-down from the header,
replacements that match nothing) return the current tables unchanged and push
no history entry.  Row index -1 always addresses the header row.

start_line / end_line are never adjusted by edits: they keep describing the
span of the original document that each table replaces on rebuild.
"""

import logging
import re
from typing import Literal

from pydantic import BaseModel

from md_sheet.editing.errors import check_index
from md_sheet.editing.history import DEFAULT_HISTORY_DEPTH, UndoRedoStack
from md_sheet.tables.patterns import FORMAT_MARKERS
from md_sheet.tables.schema import ALIGNMENTS, Alignment, Table, clone_tables

logger = logging.getLogger(__name__)

HEADER_ROW = -1

RowPosition = Literal["above", "below"]
ColumnPosition = Literal["left", "right"]


class CellMatch(BaseModel):
    """A cell whose value contains a search query."""

    table_index: int
    row: int  # -1 for the header row
    col: int
    value: str


def toggle_wrap(text: str, marker: str) -> str:
    """Wrap *text* in *marker*, or unwrap it if it is already wrapped."""
    if text.startswith(marker) and text.endswith(marker) and len(text) >= len(marker) * 2:
        return text[len(marker) : -len(marker)]
    return f"{marker}{text}{marker}"


def _replace_literal(value: str, query: str, replacement: str) -> str:
    """Case-insensitive literal replacement of every occurrence of *query*."""
    return re.sub(re.escape(query), lambda _: replacement, value, flags=re.IGNORECASE)


class TableEditor:
    """Owns the editable table list of one open document and its edit history."""

    def __init__(self, tables: list[Table] | None = None, max_depth: int = DEFAULT_HISTORY_DEPTH):
        self._history: UndoRedoStack[list[Table]] = UndoRedoStack(
            tables if tables is not None else [],
            max_depth=max_depth,
            clone=clone_tables,
        )

    # ── History ──────────────────────────────────────────────────────────

    @property
    def tables(self) -> list[Table]:
        return self._history.current

    @property
    def can_undo(self) -> bool:
        return self._history.can_undo

    @property
    def can_redo(self) -> bool:
        return self._history.can_redo

    def undo(self) -> list[Table]:
        return self._history.undo()

    def redo(self) -> list[Table]:
        return self._history.redo()

    def reset(self, tables: list[Table]) -> None:
        """Replace the tables and forget all history (a new document was loaded)."""
        self._history.reset(tables)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _check_table(self, table_index: int) -> Table:
        check_index("table", table_index, 0, len(self.tables) - 1)
        return self.tables[table_index]

    def _check_cell(self, table_index: int, row: int, col: int) -> Table:
        """Validate a (row, col) address where row -1 is the header."""
        table = self._check_table(table_index)
        check_index("row", row, HEADER_ROW, table.row_count - 1)
        check_index("column", col, 0, table.column_count - 1)
        return table

    def _commit(self, tables: list[Table], table_index: int, action: str) -> list[Table]:
        tables[table_index].check_shape()
        self._history.push(tables)
        logger.debug("%s on table %d (undo depth %d)", action, table_index, self._history.undo_depth)
        return self.tables

    @staticmethod
    def _set_cell(table: Table, row: int, col: int, value: str) -> None:
        if row == HEADER_ROW:
            table.headers[col] = value
        else:
            table.rows[row][col] = value

    # ── Cell operations ──────────────────────────────────────────────────

    def get_cell(self, table_index: int, row: int, col: int) -> str:
        table = self._check_cell(table_index, row, col)
        return table.headers[col] if row == HEADER_ROW else table.rows[row][col]

    def update_cell(self, table_index: int, row: int, col: int, value: str) -> list[Table]:
        """Set one cell (row -1 is the header).  The value is stored as-is, unescaped."""
        self._check_cell(table_index, row, col)
        tables = clone_tables(self.tables)
        self._set_cell(tables[table_index], row, col, value)
        return self._commit(tables, table_index, f"update_cell({row}, {col})")

    def fill_down(self, table_index: int, row: int, col: int) -> list[Table]:
        """Copy the body cell directly above into (row, col); no-op for the header and first row."""
        self._check_cell(table_index, row, col)
        if row <= 0:
            return self.tables
        tables = clone_tables(self.tables)
        table = tables[table_index]
        table.rows[row][col] = table.rows[row - 1][col]
        return self._commit(tables, table_index, f"fill_down({row}, {col})")

    def toggle_format(self, table_index: int, row: int, col: int, marker: str) -> list[Table]:
        """Wrap or unwrap a cell in an inline marker: '**', '*', '~~' or '`'."""
        if marker not in FORMAT_MARKERS:
            raise ValueError(f"Unknown format marker {marker!r}, expected one of {FORMAT_MARKERS}")
        value = self.get_cell(table_index, row, col)
        tables = clone_tables(self.tables)
        self._set_cell(tables[table_index], row, col, toggle_wrap(value, marker))
        return self._commit(tables, table_index, f"toggle_format({marker!r})")

    def paste_block(self, table_index: int, row: int, col: int, text: str) -> list[Table]:
        """Paste clipboard text starting at (row, col) as a single undoable edit.

        Multi-line or tab-separated text fills a block of cells; cells that fall
        outside the table are dropped.  Anything else replaces the one cell.
        """
        self._check_cell(table_index, row, col)
        tables = clone_tables(self.tables)
        table = tables[table_index]

        lines = [line for line in text.split("\n") if line.strip()]
        if len(lines) > 1 or (lines and "\t" in lines[0]):
            for ri, line in enumerate(lines):
                target_row = row + ri
                if target_row >= table.row_count:
                    break
                for ci, cell in enumerate(line.split("\t")):
                    target_col = col + ci
                    if target_col < table.column_count:
                        self._set_cell(table, target_row, target_col, cell.strip())
        else:
            self._set_cell(table, row, col, text.strip())

        return self._commit(tables, table_index, f"paste_block({row}, {col}, {len(lines)} lines)")

    # ── Row / column structure ───────────────────────────────────────────

    def add_row(self, table_index: int, after_row: int, position: RowPosition) -> list[Table]:
        """Insert an empty row above or below *after_row* (-1 with 'below' inserts the first body row)."""
        if position not in ("above", "below"):
            raise ValueError(f"Row position must be 'above' or 'below', got {position!r}")
        table = self._check_table(table_index)
        check_index("row", after_row, HEADER_ROW, table.row_count - 1)

        insert_at = after_row if position == "above" else after_row + 1
        tables = clone_tables(self.tables)
        edited = tables[table_index]
        edited.rows.insert(max(insert_at, 0), [""] * edited.column_count)
        return self._commit(tables, table_index, f"add_row({after_row}, {position})")

    def delete_row(self, table_index: int, row: int) -> list[Table]:
        """Delete a body row, refusing when it is the table's only row."""
        table = self._check_table(table_index)
        check_index("row", row, 0, table.row_count - 1)
        if table.row_count <= 1:
            logger.warning("Refusing to delete the last row of table %d", table_index)
            return self.tables

        tables = clone_tables(self.tables)
        del tables[table_index].rows[row]
        return self._commit(tables, table_index, f"delete_row({row})")

    def add_column(self, table_index: int, after_col: int, position: ColumnPosition) -> list[Table]:
        """Insert an empty column (header, 'none' alignment, empty cells) left or right of *after_col*."""
        if position not in ("left", "right"):
            raise ValueError(f"Column position must be 'left' or 'right', got {position!r}")
        table = self._check_table(table_index)
        check_index("column", after_col, 0, table.column_count - 1)

        insert_at = after_col if position == "left" else after_col + 1
        tables = clone_tables(self.tables)
        edited = tables[table_index]
        edited.headers.insert(insert_at, "")
        edited.alignments.insert(insert_at, "none")
        for row in edited.rows:
            row.insert(insert_at, "")
        return self._commit(tables, table_index, f"add_column({after_col}, {position})")

    def delete_column(self, table_index: int, col: int) -> list[Table]:
        """Delete a column from the header, alignments and every row, refusing on the last column."""
        table = self._check_table(table_index)
        check_index("column", col, 0, table.column_count - 1)
        if table.column_count <= 1:
            logger.warning("Refusing to delete the last column of table %d", table_index)
            return self.tables

        tables = clone_tables(self.tables)
        edited = tables[table_index]
        del edited.headers[col]
        del edited.alignments[col]
        for row in edited.rows:
            del row[col]
        return self._commit(tables, table_index, f"delete_column({col})")

    def set_alignment(self, table_index: int, col: int, alignment: Alignment) -> list[Table]:
        if alignment not in ALIGNMENTS:
            raise ValueError(f"Unknown alignment {alignment!r}, expected one of {ALIGNMENTS}")
        table = self._check_table(table_index)
        check_index("column", col, 0, table.column_count - 1)

        tables = clone_tables(self.tables)
        tables[table_index].alignments[col] = alignment
        return self._commit(tables, table_index, f"set_alignment({col}, {alignment})")

    # ── Search / replace ─────────────────────────────────────────────────

    def find_cells(self, query: str) -> list[CellMatch]:
        """Case-insensitive substring search over every header and body cell."""
        if not query:
            return []
        needle = query.lower()
        matches: list[CellMatch] = []
        for ti, table in enumerate(self.tables):
            for ci, header in enumerate(table.headers):
                if needle in header.lower():
                    matches.append(CellMatch(table_index=ti, row=HEADER_ROW, col=ci, value=header))
            for ri, row in enumerate(table.rows):
                for ci, cell in enumerate(row):
                    if needle in cell.lower():
                        matches.append(CellMatch(table_index=ti, row=ri, col=ci, value=cell))
        return matches

    def replace_in_cells(
        self,
        query: str,
        replacement: str,
        matches: list[CellMatch] | None = None,
    ) -> list[Table]:
        """Replace *query* (case-insensitive, literal) in the matched cells as one undoable edit.

        With matches=None every current match is replaced.
        """
        if not query:
            return self.tables
        if matches is None:
            matches = self.find_cells(query)
        for match in matches:
            self._check_cell(match.table_index, match.row, match.col)

        tables = clone_tables(self.tables)
        changed_tables: set[int] = set()
        for match in matches:
            table = tables[match.table_index]
            current = table.headers[match.col] if match.row == HEADER_ROW else table.rows[match.row][match.col]
            updated = _replace_literal(current, query, replacement)
            if updated != current:
                self._set_cell(table, match.row, match.col, updated)
                changed_tables.add(match.table_index)

        if not changed_tables:
            return self.tables

        for ti in changed_tables:
            tables[ti].check_shape()
        self._history.push(tables)
        logger.debug("replace_in_cells(%r) changed %d tables", query, len(changed_tables))
        return self.tables
