"""Line-level predicates for GitHub-Flavored-Markdown pipe tables.

Each function takes a single raw line and either classifies it (table row,
separator row, heading, code fence) or splits it into cells.  None of them
raise on irregular input: malformed rows are split as-is and the caller
decides how to pad or truncate.
"""

from md_sheet.tables.patterns import CODE_FENCE_RE, HEADING_MARKER_RE, PIPE, SEPARATOR_CELL_RE
from md_sheet.tables.schema import Alignment


def _split_cells(line: str) -> list[str]:
    """Trim the line, drop one optional outer pipe on each side, and split on pipes."""
    inner = line.strip()
    if inner.startswith(PIPE):
        inner = inner[1:]
    if inner.endswith(PIPE):
        inner = inner[:-1]
    return inner.split(PIPE)


def is_table_line(line: str) -> bool:
    """Return True if the trimmed line is non-empty and contains at least one pipe."""
    trimmed = line.strip()
    return len(trimmed) > 0 and PIPE in trimmed


def is_separator_line(line: str) -> bool:
    """Return True if every cell of the line looks like ``---``, ``:--``, ``--:`` or ``:-:``.

    A line without any pipe, or whose cells are empty after trimming, is not a
    separator.
    """
    if PIPE not in line:
        return False
    cells = [cell.strip() for cell in _split_cells(line)]
    return all(cell and SEPARATOR_CELL_RE.match(cell) for cell in cells)


def parse_row(line: str) -> list[str]:
    """Split a pipe row into trimmed cell values (cell count is whatever the split yields)."""
    return [cell.strip() for cell in _split_cells(line)]


def alignment_of(cell: str) -> Alignment:
    """Map one separator cell to its alignment from its colon placement."""
    cell = cell.strip()
    left = cell.startswith(":")
    right = cell.endswith(":")
    if left and right:
        return "center"
    if right:
        return "right"
    if left:
        return "left"
    return "none"


def parse_alignments(line: str) -> list[Alignment]:
    """Return the alignment of every cell of a separator row."""
    return [alignment_of(cell) for cell in _split_cells(line)]


def is_heading_line(line: str) -> bool:
    """Return True for any line whose trimmed text starts with '#'."""
    return line.strip().startswith("#")


def heading_text(line: str) -> str:
    """Strip leading '#' markers and surrounding whitespace from a heading line."""
    return HEADING_MARKER_RE.sub("", line.strip()).strip()


def fence_marker(line: str) -> str | None:
    """Return the backtick or tilde run that opens a fenced code block, or None."""
    match = CODE_FENCE_RE.match(line.strip())
    return match.group(1) if match else None


def closes_fence(line: str, opener: str) -> bool:
    """Return True if the line closes the fence opened by *opener*.

    The closer must repeat the opener's character at least as many times and
    carry no info string, so a ``` line inside a ~~~ block stays code.
    """
    closer = line.strip()
    return len(closer) >= len(opener) and closer == opener[0] * len(closer)
