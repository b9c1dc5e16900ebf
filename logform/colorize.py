"""Colour log levels and messages with ANSI escape sequences."""

from __future__ import annotations

import warnings
from collections.abc import Iterable, Mapping
from dataclasses import replace
from typing import Any

from logform.config import default_colors
from logform.format import Format
from logform.log_info import LogInfo

_RESET = "\x1b[0m"

_STYLES = {
    "bold": "1",
    "dimmed": "2",
    "italic": "3",
    "underline": "4",
    "blink": "5",
    "reversed": "7",
    "hidden": "8",
    "strikethrough": "9",
}

_BASE_COLORS = ("black", "red", "green", "yellow", "blue", "magenta", "cyan", "white")

_FOREGROUND = {name: str(30 + i) for i, name in enumerate(_BASE_COLORS)} | {
    f"bright_{name}": str(90 + i) for i, name in enumerate(_BASE_COLORS)
}

_BACKGROUND = {f"on_{name}": str(40 + i) for i, name in enumerate(_BASE_COLORS)} | {
    f"on_bright_{name}": str(100 + i) for i, name in enumerate(_BASE_COLORS)
}


def style(text: str, colors: str | Iterable[str]) -> str:
    """Wrap ``text`` in the escape sequence for ``colors``.

    Text attributes come first, then the background, then the foreground;
    a later colour of the same kind replaces an earlier one.  Unknown names
    are ignored, and with nothing to apply the text is returned unchanged.
    """
    if isinstance(colors, str):
        colors = (colors,)
    active_styles: set[str] = set()
    foreground: str | None = None
    background: str | None = None
    for name in colors:
        if name in _STYLES:
            active_styles.add(name)
        elif name in _FOREGROUND:
            foreground = _FOREGROUND[name]
        elif name in _BACKGROUND:
            background = _BACKGROUND[name]

    codes = [code for name, code in _STYLES.items() if name in active_styles]
    if background is not None:
        codes.append(background)
    if foreground is not None:
        codes.append(foreground)
    if not codes:
        return text

    prefix = f"\x1b[{';'.join(codes)}m"
    # Re-open the style after any reset already inside the text.
    return prefix + text.replace(_RESET, _RESET + prefix) + _RESET


def _color_entry(color: Any) -> tuple[str, ...] | None:
    if isinstance(color, str):
        return (color,)
    if isinstance(color, (list, tuple)):
        return tuple(item for item in color if isinstance(item, str))
    return None


class Colorizer(Format):
    """Colour the level and/or the message according to the level."""

    def __init__(
        self,
        *,
        all: bool = False,
        level: bool = True,
        message: bool = False,
        colors: Mapping[str, Any] | Iterable[tuple[str, Any]] | None = None,
    ) -> None:
        self.all = all
        self.level = level
        self.message = message
        self._colors: dict[str, tuple[str, ...]] = {
            name: (color,) for name, color in default_colors().items()
        }
        if colors is not None:
            self.add_colors(colors)

    def add_colors(self, colors: Mapping[str, Any] | Iterable[tuple[str, Any]]) -> None:
        """Set the colours of several levels.

        A colour is a name or a list of names; any other value is skipped
        with a warning.
        """
        items = colors.items() if isinstance(colors, Mapping) else colors
        for level, color in items:
            entry = _color_entry(color)
            if entry is None:
                warnings.warn(
                    f"Invalid color configuration for level {level!r}: {color!r}. Skipping.",
                    stacklevel=2,
                )
                continue
            self._colors[str(level)] = entry

    def add_color(self, level: str, color: Any) -> None:
        """Set the colour of one level."""
        self.add_colors({level: color})

    def colorize(self, level: str, text: str) -> str:
        """Colour ``text`` with the colours of ``level``, if it has any."""
        entry = self._colors.get(level)
        if entry is None:
            return text
        return style(text, entry)

    def transform(self, info: LogInfo) -> LogInfo:
        original_level = info.level
        level = info.level
        message = info.message
        if self.all or self.level:
            level = self.colorize(original_level, level)
        if self.all or self.message:
            message = self.colorize(original_level, message)
        return replace(info, level=level, message=message)


def colorize(**kwargs: Any) -> Colorizer:
    """Create a :class:`Colorizer`."""
    return Colorizer(**kwargs)