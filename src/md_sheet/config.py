"""Shared configuration for the table editor, read from the environment.

Values come from environment variables, with a project-root .env file loaded
on import.  EditorSettings.from_env() resolves them into a validated model.
"""

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from md_sheet.editing.history import DEFAULT_HISTORY_DEPTH

ROOT = Path(__file__).parent.parent.parent.resolve()
load_dotenv(ROOT / ".env")

HISTORY_DEPTH_VAR = "MD_SHEET_HISTORY_DEPTH"
SKIP_CODE_FENCES_VAR = "MD_SHEET_SKIP_CODE_FENCES"

_TRUTHY = ("1", "true", "yes", "on")


class EditorSettings(BaseModel):
    """Tunables for parsing and edit history."""

    history_depth: int = Field(default=DEFAULT_HISTORY_DEPTH, ge=1)
    skip_code_fences: bool = False

    @classmethod
    def from_env(cls) -> "EditorSettings":
        """Build settings from MD_SHEET_* environment variables, falling back to defaults."""
        depth = os.getenv(HISTORY_DEPTH_VAR, "").strip()
        fences = os.getenv(SKIP_CODE_FENCES_VAR, "").strip().lower()
        return cls(
            history_depth=depth if depth else DEFAULT_HISTORY_DEPTH,
            skip_code_fences=fences in _TRUTHY,
        )
