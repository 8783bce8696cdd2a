"""Logging setup and redaction of sensitive keys in logged metadata.

Session metadata is free-form and is logged at DEBUG by the fold step,
so it can carry emails, IP addresses or tokens.  :class:`MetaRedactingFilter`
replaces the values under such keys in any mapping passed as a log
argument, at any nesting depth, before the record is formatted.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Final, Mapping

SENSITIVE_META_KEYS: Final[frozenset[str]] = frozenset({
    "email",
    "ip",
    "ip_address",
    "password",
    "token",
    "session_token",
    "api_key",
    "phone",
})

_REDACTED: Final[str] = "[REDACTED]"

_LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _redact_value(value: Any) -> Any:
    if isinstance(value, Mapping):
        return redact_meta(value)
    if isinstance(value, list):
        return [_redact_value(v) for v in value]
    return value


def redact_meta(meta: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of *meta* with sensitive values replaced.

    Keys are matched case-insensitively against :data:`SENSITIVE_META_KEYS`.
    A sensitive key hides its whole value, nested mappings included.
    *meta* itself is left untouched.
    """
    return {
        key: _REDACTED if str(key).lower() in SENSITIVE_META_KEYS else _redact_value(value)
        for key, value in meta.items()
    }


class MetaRedactingFilter(logging.Filter):
    """Redact mapping arguments of a record; leaves other arguments alone.

    Handles both ``logger.debug("%s", meta)`` (which :class:`logging.LogRecord`
    unwraps into a mapping) and positional tuples containing mappings.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        args = record.args
        if isinstance(args, Mapping):
            record.args = redact_meta(args)
        elif args:
            record.args = tuple(_redact_value(a) for a in args)
        return True


class _StderrHandler(logging.StreamHandler):
    """Marker subclass so :func:`configure_logging` can find its own handler."""


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Route ``sessionize`` logs to stderr so stdout stays pure JSON.

    Idempotent: repeated calls adjust the level and re-point the existing
    handler at the current ``sys.stderr`` instead of adding another one.
    """
    logger = logging.getLogger("sessionize")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    for handler in logger.handlers:
        if isinstance(handler, _StderrHandler):
            handler.setStream(sys.stderr)
            return logger

    handler = _StderrHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    handler.addFilter(MetaRedactingFilter())
    logger.addHandler(handler)
    return logger
