"""Compiled regex patterns and constant tuples for pipe-table recognition.

These patterns identify the structural elements of a Markdown document that
the table parser cares about: separator cells, headings, fenced code block
delimiters, and outline headings.  Used by grammar.py, parser.py and outline.py.
"""

import re

# ─── Table Patterns ───────────────────────────────────────────────────────────

# One separator cell: optional leading colon, one or more dashes, optional trailing colon
SEPARATOR_CELL_RE = re.compile(r"^:?-+:?$")

# Cell delimiter inside a pipe row
PIPE = "|"


# ─── Heading Patterns ─────────────────────────────────────────────────────────

# Leading heading markers, e.g. "## " in "## Results"
HEADING_MARKER_RE = re.compile(r"^#+\s*")

# Outline heading (levels 1-4 only), e.g. "### Totals"
OUTLINE_HEADING_RE = re.compile(r"^(#{1,4})\s+(.+)", re.MULTILINE)

# Characters dropped when building an anchor id (keeps ASCII word chars, spaces, '-', kana and CJK)
HEADING_ID_STRIP_RE = re.compile(r"[^\w\s\u3040-\u9fff-]", re.ASCII)

WHITESPACE_RUN_RE = re.compile(r"\s+")


# ─── Fenced Code Patterns ─────────────────────────────────────────────────────

# Opening code fence run, e.g. "```" in "```python" or "~~~"
CODE_FENCE_RE = re.compile(r"^(`{3,}|~{3,})")


# ─── String-Match Constants ───────────────────────────────────────────────────

# Inline markers accepted by the cell formatting toggle
FORMAT_MARKERS = ("**", "*", "~~", "`")

# Front-matter openers recognised by the outline
FRONT_MATTER_OPENERS = ("---\n", "---\r\n")
