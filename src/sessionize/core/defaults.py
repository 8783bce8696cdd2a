"""Centralised default constants for sessionize.

Every project-wide magic number / string lives here.
Import these instead of hard-coding values in function signatures.
"""

from __future__ import annotations

from typing import Final

# ── Sessions ──
DEFAULT_GAP_SECONDS: Final[int] = 600

# ── Output ──
DEFAULT_JSON_INDENT: Final[int] = 2
TYPES_CSV_SEPARATOR: Final[str] = "|"
SESSION_FIELDS: Final[tuple[str, ...]] = ("user_id", "start_ts", "end_ts", "types", "meta")
