"""Add the current UTC time to a record's metadata."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from logform.format import Format
from logform.log_info import LogInfo


class Timestamp(Format):
    """Set ``meta["timestamp"]`` (and ``meta[alias]``) to the current UTC time.

    With ``format`` the time is rendered with ``strftime``; otherwise as
    RFC 3339 with microseconds.
    """

    def __init__(self, *, format: str | None = None, alias: str | None = None) -> None:
        self.format = format
        self.alias = alias

    def transform(self, info: LogInfo) -> LogInfo:
        now = datetime.now(timezone.utc)
        if self.format is not None:
            stamp = now.strftime(self.format)
        else:
            stamp = now.isoformat(timespec="microseconds")
        meta = {**info.meta, "timestamp": stamp}
        if self.alias is not None:
            meta[self.alias] = stamp
        return LogInfo(info.level, info.message, meta)


def timestamp(**kwargs: Any) -> Timestamp:
    """Create a :class:`Timestamp`."""
    return Timestamp(**kwargs)