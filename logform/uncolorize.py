"""Remove ANSI colour codes from the level and message."""

from __future__ import annotations

import re
from dataclasses import replace
from typing import Any

from logform.format import Format
from logform.log_info import LogInfo

_COLOR_CODE = re.compile(r"\x1b\[[0-9;]*m")


def strip_colors(text: str) -> str:
    """Return ``text`` without ANSI colour escape sequences."""
    return _COLOR_CODE.sub("", text)


class Uncolorize(Format):
    """Strip colour codes from the level and/or the message."""

    def __init__(self, *, level: bool = True, message: bool = True) -> None:
        self.level = level
        self.message = message

    def transform(self, info: LogInfo) -> LogInfo:
        level = strip_colors(info.level) if self.level else info.level
        message = strip_colors(info.message) if self.message else info.message
        return replace(info, level=level, message=message)


def uncolorize(**kwargs: Any) -> Uncolorize:
    """Create an :class:`Uncolorize`."""
    return Uncolorize(**kwargs)