"""Session export utilities: JSON text, JSON files and flat CSV."""

from __future__ import annotations

import csv
import json
from enum import StrEnum
from pathlib import Path
from typing import Any, Sequence

from sessionize.core.defaults import DEFAULT_JSON_INDENT, SESSION_FIELDS, TYPES_CSV_SEPARATOR
from sessionize.core.types import Session


class ExportFormat(StrEnum):
    """File formats accepted by :func:`export_sessions`."""

    json = "json"
    csv = "csv"


class SessionExportError(ValueError):
    """Raised when a session holds a value that cannot be serialized."""


def _sorted_meta(value: Any) -> Any:
    """Recursively order mapping keys so metadata output is deterministic."""
    if isinstance(value, dict):
        return {k: _sorted_meta(value[k]) for k in sorted(value)}
    if isinstance(value, list):
        return [_sorted_meta(v) for v in value]
    return value


def session_to_record(session: Session) -> dict[str, Any]:
    """Flatten *session* into a plain dict with keys in output order."""
    data = session.model_dump()
    data["meta"] = _sorted_meta(data["meta"])
    return {field: data[field] for field in SESSION_FIELDS}


def _dumps(obj: Any, indent: int | None) -> str:
    try:
        return json.dumps(obj, indent=indent, allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise SessionExportError(f"Session data is not JSON-serializable: {exc}") from exc


def sessions_to_json(
    sessions: Sequence[Session],
    indent: int = DEFAULT_JSON_INDENT,
) -> str:
    """Render *sessions* as a pretty-printed JSON array.

    Fields appear as ``user_id``, ``start_ts``, ``end_ts``, ``types``,
    ``meta``.  An empty sequence renders as ``[]``.

    Raises:
        SessionExportError: If any metadata value is not representable
            in JSON (e.g. a ``set``, a ``datetime`` or ``NaN``).
    """
    return _dumps([session_to_record(s) for s in sessions], indent)


def export_sessions_json(sessions: Sequence[Session], path: Path) -> Path:
    """Write *sessions* to a JSON file.

    Args:
        sessions: Sessions to serialize.
        path: Destination JSON file path.

    Returns:
        The *path* that was written.

    Raises:
        SessionExportError: If the sessions cannot be serialized.  No
            file is created in that case.
    """
    text = sessions_to_json(sessions)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text + "\n", "utf-8")
    return path


def export_sessions_csv(sessions: Sequence[Session], path: Path) -> Path:
    """Write *sessions* as a flat CSV with one row per session.

    Columns follow the JSON field order.  ``types`` is joined with
    ``|`` and ``meta`` is stored as compact JSON.

    Args:
        sessions: Sessions to serialize.
        path: Destination CSV file path.

    Returns:
        The *path* that was written.

    Raises:
        SessionExportError: If any session's metadata cannot be serialized.
    """
    rows: list[dict[str, object]] = []
    for session in sessions:
        record = session_to_record(session)
        record["types"] = TYPES_CSV_SEPARATOR.join(record["types"])
        record["meta"] = _dumps(record["meta"], None)
        rows.append(record)

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=list(SESSION_FIELDS))
        writer.writeheader()
        writer.writerows(rows)
    return path


def export_sessions(sessions: Sequence[Session], path: Path, fmt: ExportFormat = ExportFormat.json) -> Path:
    """Write *sessions* to *path* in the requested format."""
    if fmt is ExportFormat.csv:
        return export_sessions_csv(sessions, path)
    return export_sessions_json(sessions, path)
