"""Pydantic models for parsed Markdown pipe tables.

A Table is produced by the parser, mutated (on deep-cloned copies) by the edit
model, and consumed by the serializer and rebuilder.  The model_validator
guarantees that every row has exactly len(headers) cells and that the
alignment list matches the column count, so a table that reaches the
serializer always has a rectangular shape.
"""

from typing import Literal, get_args

from pydantic import BaseModel, model_validator

Alignment = Literal["left", "right", "center", "none"]
ALIGNMENTS: tuple[Alignment, ...] = get_args(Alignment)


class Table(BaseModel):
    """One GitHub-Flavored-Markdown pipe table anchored to a span of the source document.

    start_line / end_line are zero-based inclusive indices into the original
    document's line list and always describe the span the table replaces,
    even after rows are added or removed by the editor.
    """

    heading: str | None = None
    headers: list[str]
    alignments: list[Alignment]
    rows: list[list[str]]
    start_line: int
    end_line: int

    @model_validator(mode="after")
    def validate_shape(self) -> "Table":
        """Ensure the table is rectangular and its line span is well-formed."""
        self.check_shape()
        return self

    def check_shape(self) -> None:
        """Raise ValueError if headers, alignments, rows or line span disagree."""
        n_cols = len(self.headers)
        if n_cols == 0:
            raise ValueError("Table must have at least one column")
        if len(self.alignments) != n_cols:
            raise ValueError(f"Table has {len(self.alignments)} alignments, expected {n_cols} (matching headers)")
        for i, row in enumerate(self.rows):
            if len(row) != n_cols:
                raise ValueError(f"Row {i} has {len(row)} cells, expected {n_cols} (matching headers)")
        if self.start_line < 0 or self.start_line > self.end_line:
            raise ValueError(f"Invalid line span {self.start_line}..{self.end_line}")

    @property
    def column_count(self) -> int:
        return len(self.headers)

    @property
    def row_count(self) -> int:
        return len(self.rows)


class ParsedDocument(BaseModel):
    """A document split into its raw lines plus the tables found in it.

    `lines` is never mutated by table edits; the rebuilder reads it for the
    spans between tables.
    """

    lines: list[str]
    tables: list[Table]

    @model_validator(mode="after")
    def validate_table_order(self) -> "ParsedDocument":
        """Ensure tables appear in ascending, non-overlapping line order."""
        previous_end = -1
        for i, table in enumerate(self.tables):
            if table.start_line <= previous_end:
                raise ValueError(f"Table {i} starts at line {table.start_line}, overlapping the previous table")
            previous_end = table.end_line
        return self


def clone_tables(tables: list[Table]) -> list[Table]:
    """Return a deep, independent copy of a table list."""
    return [table.model_copy(deep=True) for table in tables]
