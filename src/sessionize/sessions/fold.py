"""Reduce a run of events into one :class:`~sessionize.core.types.Session`."""

from __future__ import annotations

import logging
from typing import Sequence

from sessionize.core.meta import fold_meta
from sessionize.core.types import Event, Session

logger = logging.getLogger(__name__)


def collapse_types(types: Sequence[str]) -> list[str]:
    """Drop consecutive duplicates: ``[a, a, b, a] -> [a, b, a]``.

    Only adjacent repeats are removed; a type may reappear later.
    """
    out: list[str] = []
    for t in types:
        if not out or out[-1] != t:
            out.append(t)
    return out


def fold_run(run: Sequence[Event]) -> Session:
    """Build the session record for one run.

    Args:
        run: Non-empty, timestamp-ordered events of a single user.

    Returns:
        A session spanning ``run[0].ts`` to ``run[-1].ts`` whose
        metadata is an earliest-wins deep merge of the events' metadata.

    Raises:
        ValueError: If *run* is empty.
    """
    if not run:
        raise ValueError("cannot fold an empty run")

    first, last = run[0], run[-1]
    session = Session(
        user_id=first.user_id,
        start_ts=first.ts,
        end_ts=last.ts,
        types=collapse_types([e.type for e in run]),
        meta=fold_meta(e.meta for e in run),
    )
    logger.debug(
        "Folded %d events for %s [%d-%d] meta=%s",
        len(run), session.user_id, session.start_ts, session.end_ts, session.meta,
    )
    return session
