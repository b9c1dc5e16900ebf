"""Render a record as a single-line JSON object."""

from __future__ import annotations

from json import dumps as _json_dumps
from typing import Any

from logform.format import Format
from logform.log_info import LogInfo


def _to_json(value: Any) -> str:
    return _json_dumps(value, ensure_ascii=False, separators=(",", ":"), sort_keys=True)


class JsonFormat(Format):
    """Replace the message with a JSON object of level, message and metadata.

    Keys are written in sorted order; metadata keys named ``level`` or
    ``message`` take precedence over the record's own fields.  The metadata
    is cleared from the result so it is not carried twice.
    """

    def transform(self, info: LogInfo) -> LogInfo:
        log_object: dict[str, Any] = {"level": info.level, "message": info.message}
        log_object.update(info.meta)
        return LogInfo(info.level, _to_json(log_object), {})


def json() -> JsonFormat:
    """Create a :class:`JsonFormat`."""
    return JsonFormat()