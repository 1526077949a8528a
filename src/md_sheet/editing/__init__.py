"""Structured table edits with snapshot-based undo/redo.

Submodules:
  errors   -- TableEditError / TableIndexError and index checking
  history  -- generic UndoRedoStack with bounded retention
  editor   -- TableEditor: cell, row, column, paste and search/replace operations
"""
