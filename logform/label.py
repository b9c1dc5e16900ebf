"""Attach a label to a record, in its message or its metadata."""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from logform.format import Format
from logform.log_info import LogInfo


class LabelFormat(Format):
    """Prefix the message with ``[label]`` or store the label in ``meta``."""

    def __init__(self, *, label: str = "", message: bool = False) -> None:
        self.label = label
        self.message = message

    def transform(self, info: LogInfo) -> LogInfo:
        if self.message:
            return replace(info, message=f"[{self.label}] {info.message}")
        return replace(info, meta={**info.meta, "label": self.label})


def label(**kwargs: Any) -> LabelFormat:
    """Create a :class:`LabelFormat`."""
    return LabelFormat(**kwargs)