"""One open Markdown document: parsed lines, editable tables, and their history.

Create one TableDocument per open document.  Loading new text resets the
edit history so undo never crosses document boundaries.
"""

import logging

from md_sheet.config import EditorSettings
from md_sheet.editing.editor import TableEditor
from md_sheet.tables.parser import parse_document
from md_sheet.tables.rebuild import rebuild_document
from md_sheet.tables.schema import ParsedDocument, Table, clone_tables

logger = logging.getLogger(__name__)


class TableDocument:
    """Binds the parser, the edit model and the rebuilder for a single document."""

    def __init__(self, text: str = "", settings: EditorSettings | None = None):
        self._settings = settings if settings is not None else EditorSettings.from_env()
        self._editor = TableEditor(max_depth=self._settings.history_depth)
        self._parsed = ParsedDocument(lines=[], tables=[])
        self.load(text)

    @property
    def editor(self) -> TableEditor:
        return self._editor

    @property
    def tables(self) -> list[Table]:
        return self._editor.tables

    @property
    def lines(self) -> list[str]:
        return self._parsed.lines

    @property
    def dirty(self) -> bool:
        """True when the current tables differ from the tables as loaded."""
        return self._editor.tables != self._parsed.tables

    def load(self, text: str) -> ParsedDocument:
        """Parse *text* and start a fresh edit history on its tables."""
        self._parsed = parse_document(text, skip_code_fences=self._settings.skip_code_fences)
        self._editor.reset(clone_tables(self._parsed.tables))
        logger.info("Loaded document with %d tables", len(self._parsed.tables))
        return self._parsed

    def text(self) -> str:
        """Rebuild the full document text with the current (possibly edited) tables."""
        return rebuild_document(self._parsed.lines, self._editor.tables)
