"""Pipe-table recognition, parsing, serialization, and document rebuilding.

Submodules:
  patterns    -- compiled regex patterns and constant tuples
  grammar     -- line-level predicates (table row, separator row, heading) and cell splitting
  schema      -- Table / ParsedDocument Pydantic models
  parser      -- parse_document(): extract tables anchored to original line spans
  serializer  -- serialize_table() and CSV/TSV export
  rebuild     -- rebuild_document(): splice serialized tables back into the original lines
  outline     -- heading outline and anchor ids
"""
