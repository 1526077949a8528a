"""Markdown pipe-table parsing, editing, and byte-faithful document rebuilding."""

from md_sheet.editing.editor import CellMatch, TableEditor
from md_sheet.editing.errors import TableEditError, TableIndexError
from md_sheet.editing.history import UndoRedoStack
from md_sheet.session import TableDocument
from md_sheet.tables.grammar import is_separator_line, is_table_line, parse_alignments, parse_row
from md_sheet.tables.parser import parse_document
from md_sheet.tables.rebuild import rebuild_document
from md_sheet.tables.schema import ParsedDocument, Table
from md_sheet.tables.serializer import serialize_table, table_to_csv

__all__ = [
    # Types
    "Table",
    "ParsedDocument",
    "CellMatch",
    # Exceptions
    "TableEditError",
    "TableIndexError",
    # Grammar
    "is_table_line",
    "is_separator_line",
    "parse_row",
    "parse_alignments",
    # Core operations
    "parse_document",
    "serialize_table",
    "rebuild_document",
    "table_to_csv",
    # Editing
    "UndoRedoStack",
    "TableEditor",
    "TableDocument",
]
