"""Render the whole record as an indented, human-readable object."""

from __future__ import annotations

from typing import Any

from logform.format import Format
from logform.format_json import format_json
from logform.log_info import LogInfo


class PrettyPrinter(Format):
    """Replace the message with a pretty rendering of level, message and metadata.

    Metadata keys named ``level`` or ``message`` take precedence over the
    record's own fields.  The metadata is cleared from the result.
    """

    def __init__(self, *, colorize: bool = False) -> None:
        self.colorize = colorize

    def transform(self, info: LogInfo) -> LogInfo:
        output: dict[str, Any] = {"level": info.level, "message": info.message}
        output.update(info.meta)
        return LogInfo(info.level, format_json(output, self.colorize), {})


def pretty_print(**kwargs: Any) -> PrettyPrinter:
    """Create a :class:`PrettyPrinter`."""
    return PrettyPrinter(**kwargs)