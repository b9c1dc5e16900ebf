"""The ``level: message {rest}`` one-line format."""

from __future__ import annotations

from dataclasses import replace
from json import dumps as _json_dumps

from logform.format import Format
from logform.log_info import LogInfo

_RESERVED = frozenset({"level", "message", "splat", "padding"})


class SimpleFormat(Format):
    """Render ``level:<padding> message`` followed by the remaining metadata as JSON.

    The padding is taken from ``meta["padding"][level]`` when that is a
    string.  The metadata itself is left in place.
    """

    def transform(self, info: LogInfo) -> LogInfo:
        paddings = info.meta.get("padding")
        padding = paddings.get(info.level) if isinstance(paddings, dict) else None
        if not isinstance(padding, str):
            padding = ""

        message = f"{info.level}:{padding} {info.message}"
        rest = {key: value for key, value in info.meta.items() if key not in _RESERVED}
        if rest:
            message += " " + _json_dumps(rest, ensure_ascii=False, separators=(",", ":"))
        return replace(info, message=message)


def simple() -> SimpleFormat:
    """Create a :class:`SimpleFormat`."""
    return SimpleFormat()