"""Core data contracts: user events in, merged sessions out."""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, Field, field_validator, model_validator


class Event(BaseModel, frozen=True):
    """One timestamped user action.

    ``meta`` is an arbitrarily nested JSON-like mapping (strings, numbers,
    booleans, nulls and further mappings).  A missing ``meta``, or one that
    is not a mapping at all (``null``, a string, a list, a number), is
    normalised to an empty mapping.  Events are never mutated by the
    sessionizer.
    """

    user_id: str = Field(description="Identifier of the user who emitted the event.")
    ts: int = Field(description="Event time in whole seconds.")
    type: str = Field(description="Event type, e.g. 'click', 'scroll', 'view'.")
    meta: dict[str, Any] = Field(default_factory=dict, description="Free-form nested metadata.")

    @field_validator("meta", mode="before")
    @classmethod
    def _malformed_meta_is_empty(cls, value: Any) -> Any:
        return value if isinstance(value, Mapping) else {}


class Session(BaseModel, frozen=True):
    """A maximal run of one user's events folded into a single record.

    Field declaration order is the serialization order:
    ``user_id``, ``start_ts``, ``end_ts``, ``types``, ``meta``.

    ``meta`` is owned by this session alone; it never aliases the
    metadata of an input event or of another session.
    """

    user_id: str = Field(description="User the session belongs to.")
    start_ts: int = Field(description="Timestamp of the first event in the run.")
    end_ts: int = Field(description="Timestamp of the last event in the run.")
    types: list[str] = Field(description="Event types with consecutive duplicates collapsed.")
    meta: dict[str, Any] = Field(default_factory=dict, description="Earliest-wins deep merge of event metadata.")

    @model_validator(mode="after")
    def _check_span(self) -> Session:
        if self.end_ts < self.start_ts:
            raise ValueError(
                f"end_ts ({self.end_ts}) must not be before "
                f"start_ts ({self.start_ts})"
            )
        return self
