"""Padded, coloured ``level:message`` output for command-line tools."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import replace
from typing import Any

from logform.colorize import Colorizer
from logform.config import cli_levels
from logform.format import Format
from logform.log_info import LogInfo
from logform.pad_levels import Padder


class CliFormat(Format):
    """Pad the message, colour it, then prefix it with the level."""

    def __init__(
        self,
        *,
        levels: Iterable[Any] | None = None,
        filler: str = " ",
        all: bool = False,
        level: bool = True,
        message: bool = False,
        colors: Mapping[str, Any] | Iterable[tuple[str, Any]] | None = None,
    ) -> None:
        if levels is None:
            levels = cli_levels()
        self.padder = Padder(levels=levels, filler=filler)
        self.colorizer = Colorizer(all=all, level=level, message=message, colors=colors)

    def transform(self, info: LogInfo) -> LogInfo:
        result = self.colorizer.transform(self.padder.transform(info))
        return replace(result, message=f"{result.level}:{result.message}")


def cli(**kwargs: Any) -> CliFormat:
    """Create a :class:`CliFormat`."""
    return CliFormat(**kwargs)