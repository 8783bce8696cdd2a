"""Shared fixtures for the sessionize test suite."""

from __future__ import annotations

from typing import Any, Callable

import pytest

from sessionize.core.types import Event


@pytest.fixture()
def make_event() -> Callable[..., Event]:
    """Factory for events with sensible defaults."""

    def _make(
        ts: int,
        user_id: str = "u1",
        type: str = "click",
        meta: dict[str, Any] | None = None,
    ) -> Event:
        return Event(user_id=user_id, ts=ts, type=type, meta=meta)

    return _make
