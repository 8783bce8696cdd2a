"""Tests for folding a run into a Session."""

from __future__ import annotations

import pytest

from sessionize.sessions.fold import collapse_types, fold_run


class TestCollapseTypes:
    def test_empty(self) -> None:
        assert collapse_types([]) == []

    def test_only_adjacent_duplicates_removed(self) -> None:
        assert collapse_types(["click", "click", "scroll", "click"]) == ["click", "scroll", "click"]

    def test_all_same(self) -> None:
        assert collapse_types(["view"] * 4) == ["view"]

    def test_no_duplicates_unchanged(self) -> None:
        assert collapse_types(["a", "b", "c"]) == ["a", "b", "c"]


class TestFoldRun:
    def test_empty_run_rejected(self) -> None:
        with pytest.raises(ValueError, match="empty run"):
            fold_run([])

    def test_single_event_session(self, make_event) -> None:
        s = fold_run([make_event(1000, type="view", meta={"item": "A"})])
        assert s.user_id == "u1"
        assert s.start_ts == s.end_ts == 1000
        assert s.types == ["view"]
        assert s.meta == {"item": "A"}

    def test_span_and_types(self, make_event) -> None:
        run = [
            make_event(1000, type="click"),
            make_event(1500, type="click"),
            make_event(1600, type="scroll"),
            make_event(1700, type="scroll"),
            make_event(2200, type="click"),
        ]
        s = fold_run(run)
        assert (s.start_ts, s.end_ts) == (1000, 2200)
        assert s.types == ["click", "scroll", "click"]
        assert s.types[0] == run[0].type

    def test_meta_earliest_wins(self, make_event) -> None:
        run = [
            make_event(1, meta={"page": "/", "ctx": {"a": 1}}),
            make_event(2, meta={"page": "/home", "ctx": {"b": 2}}),
            make_event(3, meta={"ctx": 7, "depth": 10}),
        ]
        assert fold_run(run).meta == {"page": "/", "ctx": {"a": 1, "b": 2}, "depth": 10}

    def test_meta_does_not_alias_events(self, make_event) -> None:
        first = make_event(1, meta={"ctx": {"a": 1}})
        second = make_event(2, meta={"extra": {"b": 2}})
        s = fold_run([first, second])
        assert s.meta["ctx"] is not first.meta["ctx"]
        assert s.meta["extra"] is not second.meta["extra"]
        s.meta["ctx"]["a"] = 99
        assert first.meta == {"ctx": {"a": 1}}

    def test_null_meta_everywhere(self, make_event) -> None:
        s = fold_run([make_event(1), make_event(2)])
        assert s.meta == {}
