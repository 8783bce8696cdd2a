"""Fixed demonstration input for ``sessionize demo``."""

from __future__ import annotations

from typing import Final

from sessionize.core.types import Event

DEMO_EVENTS: Final[tuple[Event, ...]] = (
    Event(user_id="u1", ts=1000, type="click", meta={"page": "/"}),
    Event(user_id="u1", ts=1500, type="click", meta={"page": "/home"}),
    Event(user_id="u1", ts=1600, type="scroll", meta={"depth": 100}),
    Event(user_id="u1", ts=1700, type="scroll", meta={"depth": 200}),
    Event(user_id="u1", ts=2200, type="click", meta={"page": "/about"}),
    Event(user_id="u2", ts=1200, type="view", meta={"item": "A"}),
    Event(user_id="u2", ts=1300, type="view", meta={"item": "B"}),
)
