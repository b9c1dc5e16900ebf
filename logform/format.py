"""The base class for formats and format chaining."""

from __future__ import annotations

from abc import ABC, abstractmethod
from functools import reduce
from typing import Any


class Format(ABC):
    """Transforms a value, or drops it by returning ``None``."""

    @abstractmethod
    def transform(self, info: Any) -> Any | None:
        """Return the transformed value, or ``None`` to drop it."""

    def chain(self, next_format: Format) -> ChainedFormat:
        """Return a format that applies this one, then ``next_format``."""
        return ChainedFormat(self, next_format)

    def __call__(self, info: Any) -> Any | None:
        return self.transform(info)


class ChainedFormat(Format):
    """Two formats applied in turn; stops as soon as one drops the value."""

    def __init__(self, first: Format, next_format: Format) -> None:
        self.first = first
        self.next_format = next_format

    def transform(self, info: Any) -> Any | None:
        result = self.first.transform(info)
        if result is None:
            return None
        return self.next_format.transform(result)


def chain(first: Format, *args: Format) -> Format:
    """Chain two or more formats, applied left to right."""
    if not args:
        raise TypeError("chain() needs at least two formats")
    return reduce(lambda acc, fmt: acc.chain(fmt), args, first)