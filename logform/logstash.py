"""Render a record in the Logstash JSON event layout."""

from __future__ import annotations

import warnings
from dataclasses import replace
from datetime import datetime, timezone
from json import dumps as _json_dumps
from typing import Any

from logform.format import Format
from logform.log_info import LogInfo

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _timestamp_from(value: Any) -> str:
    if value is None:
        return _now()
    if isinstance(value, str):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        if not _I64_MIN <= value <= _I64_MAX:
            warnings.warn(f"Non-i64 number for timestamp: {value}", stacklevel=3)
            return _now()
        try:
            return datetime.fromtimestamp(value, timezone.utc).isoformat()
        except (OverflowError, OSError, ValueError):
            warnings.warn(f"Invalid epoch_secs for timestamp: {value}", stacklevel=3)
            return _now()
    if isinstance(value, float):
        warnings.warn(f"Non-i64 number for timestamp: {value}", stacklevel=3)
        return _now()
    warnings.warn(f"Unexpected type for timestamp: {value!r}", stacklevel=3)
    return _now()


class LogstashFormat(Format):
    """Replace the message with ``@message``, ``@timestamp`` and ``@fields``.

    A ``timestamp`` in the metadata is taken out and used as ``@timestamp``:
    strings as they are, whole numbers as seconds since the epoch; without
    one the current UTC time is used.  The remaining metadata and the level
    go into ``@fields``.  A record that cannot be serialised is dropped.
    """

    def transform(self, info: LogInfo) -> LogInfo | None:
        meta = dict(info.meta)
        stamp = _timestamp_from(meta.pop("timestamp", None))
        fields: dict[str, Any] = {"level": info.level}
        fields.update(meta)
        event = {"@message": info.message, "@timestamp": stamp, "@fields": fields}
        try:
            serialized = _json_dumps(
                event, ensure_ascii=False, separators=(",", ":"), sort_keys=True
            )
        except (TypeError, ValueError) as exc:
            warnings.warn(
                f"LogstashFormat: failed to serialize logstash object: {exc}", stacklevel=2
            )
            return None
        return replace(info, message=serialized, meta=meta)


def logstash() -> LogstashFormat:
    """Create a :class:`LogstashFormat`."""
    return LogstashFormat()