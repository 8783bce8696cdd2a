"""Top-level sessionizer: events in, chronologically ordered sessions out."""

from __future__ import annotations

import logging
from typing import Iterable

from sessionize.core.defaults import DEFAULT_GAP_SECONDS
from sessionize.core.types import Event, Session
from sessionize.sessions.fold import fold_run
from sessionize.sessions.runs import iter_runs, order_events

logger = logging.getLogger(__name__)


def sessionize(
    events: Iterable[Event],
    gap_seconds: int = DEFAULT_GAP_SECONDS,
) -> list[Session]:
    """Group *events* into per-user sessions and merge each into one record.

    Events are ordered by ``(user_id, ts)``, split into runs wherever the
    user changes or two consecutive events are more than *gap_seconds*
    apart, and each run is folded into a :class:`Session`.  The result is
    sorted by ``start_ts``; the sort is stable, so ties keep user order.

    Args:
        events: Unordered input events.  Not mutated.
        gap_seconds: Inactivity threshold in seconds (inclusive).

    Returns:
        Sessions from all users, interleaved by start time.  Empty if
        *events* is empty.
    """
    ordered = order_events(events)
    if not ordered:
        return []

    sessions = [fold_run(run) for run in iter_runs(ordered, gap_seconds)]
    sessions.sort(key=lambda s: s.start_ts)

    logger.debug(
        "Sessionized %d events into %d sessions (gap=%ds)",
        len(ordered), len(sessions), gap_seconds,
    )
    return sessions
