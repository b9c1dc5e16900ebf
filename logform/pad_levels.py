"""Pad messages so that they line up whatever their level's length."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace
from typing import Any

from logform.config import default_levels
from logform.format import Format
from logform.log_info import LogInfo


def _padding_for_levels(levels: frozenset[str], filler: str) -> dict[str, str]:
    longest = max((len(level) for level in levels), default=0)
    paddings = {}
    for level in levels:
        width = longest + 1 - len(level)
        paddings[level] = (filler * width)[:width]
    return paddings


class Padder(Format):
    """Prefix each message with filler up to one past the longest level."""

    def __init__(self, *, levels: Iterable[Any] | None = None, filler: str = " ") -> None:
        if levels is None:
            levels = default_levels()
        self.levels = frozenset(str(level) for level in levels)
        self.filler = filler
        self.paddings = _padding_for_levels(self.levels, filler)

    def transform(self, info: LogInfo) -> LogInfo:
        padding = self.paddings.get(info.level)
        if padding is None:
            return replace(info)
        return replace(info, message=padding + info.message)


def pad_levels(**kwargs: Any) -> Padder:
    """Create a :class:`Padder`."""
    return Padder(**kwargs)