"""Record the time elapsed since the previous log record."""

from __future__ import annotations

import threading
import time
from dataclasses import replace

from logform.format import Format
from logform.log_info import LogInfo


class MsFormat(Format):
    """Set ``meta["ms"]`` to ``+<n>ms``, the whole milliseconds since the last call.

    The first record gets ``+0ms``.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._prev: int | None = None

    def transform(self, info: LogInfo) -> LogInfo:
        with self._lock:
            current = time.monotonic_ns()
            elapsed = 0 if self._prev is None else current - self._prev
            self._prev = current
        return replace(info, meta={**info.meta, "ms": f"+{elapsed // 1_000_000}ms"})


def ms() -> MsFormat:
    """Create an :class:`MsFormat`."""
    return MsFormat()