"""Gather metadata entries under a single key."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace
from typing import Any

from logform.format import Format
from logform.log_info import LogInfo


class MetadataFormat(Format):
    """Move metadata entries into a nested object under ``key``.

    With ``fill_with`` only those keys are moved; otherwise every key is.
    Keys in ``fill_except`` are never moved.
    """

    def __init__(
        self,
        *,
        key: str = "metadata",
        fill_except: Iterable[str] = (),
        fill_with: Iterable[str] = (),
    ) -> None:
        self.key = key
        self.fill_except = frozenset(fill_except)
        self.fill_with = tuple(dict.fromkeys(fill_with))

    def transform(self, info: LogInfo) -> LogInfo:
        meta = dict(info.meta)
        candidates = self.fill_with if self.fill_with else tuple(meta)
        gathered = {
            name: meta.pop(name)
            for name in candidates
            if name not in self.fill_except and name in meta
        }
        meta[self.key] = gathered
        return replace(info, meta=meta)


def metadata(**kwargs: Any) -> MetadataFormat:
    """Create a :class:`MetadataFormat`."""
    return MetadataFormat(**kwargs)