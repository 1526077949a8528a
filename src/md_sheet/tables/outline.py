"""Heading outline and anchor ids for a Markdown document."""

from pydantic import BaseModel

from md_sheet.tables.patterns import (
    FRONT_MATTER_OPENERS,
    HEADING_ID_STRIP_RE,
    OUTLINE_HEADING_RE,
    WHITESPACE_RUN_RE,
)


class Heading(BaseModel):
    """One entry of the document outline."""

    depth: int
    text: str
    id: str


def heading_id(text: str) -> str:
    """Build an anchor id such as 'heading-sales-report' from heading text.

    Kana and CJK characters are kept so Japanese headings still get readable ids.
    """
    slug = HEADING_ID_STRIP_RE.sub("", text.lower())
    return "heading-" + WHITESPACE_RUN_RE.sub("-", slug)


def _strip_front_matter(text: str) -> str:
    """Drop a leading YAML front-matter block delimited by '---' lines, if present."""
    if not text.startswith(FRONT_MATTER_OPENERS):
        return text
    end = text.find("\n---", 4)
    if end == -1:
        return text
    body = text[end + 4 :]
    if body.startswith("\r\n"):
        return body[2:]
    if body.startswith("\n"):
        return body[1:]
    return body


def extract_outline(text: str) -> list[Heading]:
    """Return the level 1-4 headings of *text* in document order."""
    headings: list[Heading] = []
    for match in OUTLINE_HEADING_RE.finditer(_strip_front_matter(text)):
        title = match.group(2).strip()
        headings.append(Heading(depth=len(match.group(1)), text=title, id=heading_id(title)))
    return headings
