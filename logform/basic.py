"""Small formats: tab alignment, pass-through and template rendering."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace

from logform.format import Format
from logform.log_info import LogInfo


class AlignFormat(Format):
    """Prefix the message with a tab character."""

    def transform(self, info: LogInfo) -> LogInfo:
        return replace(info, message=f"\t{info.message}")


def align() -> AlignFormat:
    """Create an :class:`AlignFormat`."""
    return AlignFormat()


class PassthroughFormat(Format):
    """Return the record unchanged."""

    def transform(self, info: LogInfo) -> LogInfo:
        return info


def passthrough() -> PassthroughFormat:
    """Create a :class:`PassthroughFormat`."""
    return PassthroughFormat()


class Printf(Format):
    """Replace the message with the string a template function builds."""

    def __init__(self, template: Callable[[LogInfo], str]) -> None:
        self.template = template

    def transform(self, info: LogInfo) -> LogInfo:
        return replace(info, message=self.template(info))


def printf(template: Callable[[LogInfo], str]) -> Printf:
    """Create a :class:`Printf` from ``template``."""
    return Printf(template)