"""Human-readable rendering of JSON values, optionally coloured."""

from __future__ import annotations

import json
from typing import Any

_RESET = "\x1b[0m"
_GREEN = "\x1b[32m"
_BLUE = "\x1b[34m"
_YELLOW = "\x1b[33m"
_RED = "\x1b[31m"


def _paint(text: str, code: str, colorize: bool) -> str:
    return f"{code}{text}{_RESET}" if colorize else text


def format_json_consistently(value: Any, indent: int, colorize: bool) -> str:
    """Render ``value`` with object keys sorted, nested at ``indent`` spaces."""
    indent_str = " " * indent
    if isinstance(value, str):
        return f"'{_paint(value, _GREEN, colorize)}'"
    if isinstance(value, bool):
        return _paint("true" if value else "false", _YELLOW, colorize)
    if value is None:
        return _paint("null", _RED, colorize)
    if isinstance(value, (int, float)):
        return _paint(json.dumps(value), _BLUE, colorize)
    if isinstance(value, dict):
        if not value:
            return "{}"
        lines = (
            f"{indent_str}  {key}: "
            f"{format_json_consistently(item, indent + 2, colorize).strip()}"
            for key, item in sorted(value.items())
        )
        return "{\n" + ",\n".join(lines) + f"\n{indent_str}}}"
    if isinstance(value, (list, tuple)):
        if not value:
            return "[]"
        lines = (
            f"{indent_str}  {format_json_consistently(item, indent + 2, colorize).strip()}"
            for item in value
        )
        return "[\n" + ",\n".join(lines) + f"\n{indent_str}]"
    raise TypeError(f"value of type {type(value).__name__} is not JSON")


def format_json(value: Any, colorize: bool) -> str:
    """Render ``value`` from the top level."""
    return format_json_consistently(value, 0, colorize)