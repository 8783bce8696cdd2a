"""Deep copy and earliest-wins deep merge for nested event metadata.

Metadata values are JSON-like: strings, numbers, booleans, ``None`` and
nested mappings.  The merge policy is *first write wins, per leaf key*:

- a key missing from the accumulator receives a deep copy of the
  incoming value;
- when both sides hold a mapping the merge recurses;
- any other collision keeps the accumulator's value and discards the
  incoming one without looking inside it.

Example::

    acc = clone_meta({"a": {"x": 1}, "b": 1})
    merge_meta(acc, {"a": {"y": 2}, "b": {"z": 3}})
    # acc == {"a": {"x": 1, "y": 2}, "b": 1}
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping


def _clone_value(value: Any) -> Any:
    if isinstance(value, Mapping):
        return clone_meta(value)
    if isinstance(value, list):
        return [_clone_value(v) for v in value]
    return value


def clone_meta(meta: Mapping[str, Any] | None) -> dict[str, Any]:
    """Return an independent deep copy of *meta*.

    Every nested mapping is copied; scalars are shared by value.
    ``None`` yields an empty dict.
    """
    if meta is None:
        return {}
    return {key: _clone_value(value) for key, value in meta.items()}


def merge_meta(acc: dict[str, Any], src: Mapping[str, Any] | None) -> dict[str, Any]:
    """Merge *src* into *acc* in place, keeping *acc*'s value on conflict.

    *acc* must be exclusively owned by the caller (typically produced by
    :func:`clone_meta`).  *src* is never modified or aliased.

    Args:
        acc: Accumulated metadata from earlier events.
        src: Metadata of the next event in timestamp order.

    Returns:
        *acc*, for use as a fold step.
    """
    if not src:
        return acc

    for key, incoming in src.items():
        if key not in acc:
            acc[key] = _clone_value(incoming)
            continue
        current = acc[key]
        # acc only holds plain dicts (clone_meta/_clone_value never emit another
        # Mapping type), so the dict check covers every mapping on this side.
        if isinstance(current, dict) and isinstance(incoming, Mapping):
            merge_meta(current, incoming)
        # scalar/scalar, scalar/mapping, mapping/scalar: earliest wins

    return acc


def fold_meta(metas: Iterable[Mapping[str, Any] | None]) -> dict[str, Any]:
    """Fold a timestamp-ordered sequence of metadata maps into one.

    The first map seeds the accumulator as a deep copy; each later map is
    merged with :func:`merge_meta`.  An empty sequence yields ``{}``.
    """
    it = iter(metas)
    acc = clone_meta(next(it, None))
    for meta in it:
        acc = merge_meta(acc, meta)
    return acc
