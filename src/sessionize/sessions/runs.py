"""Event ordering and session-run detection.

A *run* is the contiguous slice of one user's ordered events that will
become a single session.  A new run starts whenever the user changes or
the gap to the immediately preceding event exceeds the gap threshold.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Sequence

from sessionize.core.defaults import DEFAULT_GAP_SECONDS
from sessionize.core.types import Event


def order_events(events: Iterable[Event]) -> list[Event]:
    """Return a new list of *events* sorted by ``(user_id, ts)``.

    The sort is stable, so events sharing a user and timestamp keep
    their input order.  *events* itself is left untouched.
    """
    return sorted(events, key=lambda e: (e.user_id, e.ts))


def iter_runs(
    ordered: Sequence[Event],
    gap_seconds: int = DEFAULT_GAP_SECONDS,
) -> Iterator[list[Event]]:
    """Yield maximal runs from events already sorted by :func:`order_events`.

    The gap check is pairwise against the previous event in the run, not
    against the run's first event.  A gap of exactly *gap_seconds* stays
    in the current run; anything larger closes it.

    Args:
        ordered: Events sorted by ``(user_id, ts)``.
        gap_seconds: Largest allowed interval between consecutive events
            of one session.

    Yields:
        Non-empty lists of events, one per session, in input order.
    """
    if not ordered:
        return

    run: list[Event] = [ordered[0]]

    for prev, cur in zip(ordered, ordered[1:]):
        if cur.user_id != prev.user_id or cur.ts - prev.ts > gap_seconds:
            yield run
            run = []
        run.append(cur)

    yield run
