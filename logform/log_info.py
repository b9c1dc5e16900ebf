"""The log record passed through every format."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, replace
from typing import Any


class LogInfoError(ValueError):
    """Raised when a log record cannot be built from its input."""


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant {name!r}")


def _loads(text: str | bytes) -> Any:
    return json.loads(text, parse_constant=_reject_constant)


def _dumps(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


@dataclass
class LogInfo:
    """A log entry: a level, a message and free-form JSON metadata."""

    level: str
    message: str
    meta: dict[str, Any] = field(default_factory=dict)

    def with_meta(self, key: str, value: Any) -> LogInfo:
        """Return a copy with ``key`` set to ``value`` in the metadata."""
        return replace(self, meta={**self.meta, str(key): value})

    def without_meta(self, key: str) -> LogInfo:
        """Return a copy with ``key`` removed from the metadata."""
        meta = dict(self.meta)
        meta.pop(str(key), None)
        return replace(self, meta=meta)

    def to_value(self) -> dict[str, Any]:
        """Return the record as a JSON-compatible dictionary."""
        return {"level": self.level, "message": self.message, "meta": dict(self.meta)}

    def to_bytes(self) -> bytes:
        """Serialise the record as UTF-8 JSON."""
        try:
            return _dumps(self.to_value()).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise LogInfoError(str(exc)) from exc

    @classmethod
    def from_bytes(cls, data: bytes) -> LogInfo:
        """Build a record from the JSON produced by :meth:`to_bytes`."""
        try:
            value = _loads(data)
        except (ValueError, UnicodeDecodeError) as exc:
            raise LogInfoError(str(exc)) from exc
        if not isinstance(value, dict):
            raise LogInfoError("Input value is not a JSON object")
        level = value.get("level")
        message = value.get("message")
        meta = value.get("meta")
        if not isinstance(level, str):
            raise LogInfoError("Missing or invalid 'level' field")
        if not isinstance(message, str):
            raise LogInfoError("Missing or invalid 'message' field")
        if not isinstance(meta, dict):
            raise LogInfoError("Missing or invalid 'meta' field")
        return cls(level, message, dict(meta))

    @classmethod
    def from_value(cls, value: Any) -> LogInfo:
        """Build a record from a decoded JSON object."""
        if not isinstance(value, dict):
            raise LogInfoError("Input value is not a JSON object")
        level = value.get("level")
        if not isinstance(level, str):
            raise LogInfoError("Missing or invalid 'level' field")
        message = value.get("message")
        if not isinstance(message, str):
            raise LogInfoError("Missing or invalid 'message' field")
        meta = value.get("meta")
        return cls(level, message, dict(meta) if isinstance(meta, dict) else {})

    @classmethod
    def parse(cls, text: str) -> LogInfo:
        """Parse JSON or the ``[LEVEL] message {key: value, ...}`` form."""
        try:
            value = _loads(text)
        except ValueError:
            pass
        else:
            return cls.from_value(value)

        stripped = text.strip()
        if not stripped.startswith("["):
            raise LogInfoError("Expected log to start with '[LEVEL]'")
        end_bracket = stripped.find("]")
        if end_bracket < 0:
            raise LogInfoError("Missing closing bracket for level")

        level = stripped[1:end_bracket]
        rest = stripped[end_bracket + 1 :].strip()

        meta_start = rest.find("{")
        if meta_start < 0:
            return cls(level, rest)

        message = rest[:meta_start].strip()
        meta_str = rest[meta_start:]
        meta: dict[str, Any] = {}
        meta_end = meta_str.rfind("}")
        if meta_end >= 0:
            for pair in meta_str[1:meta_end].split(","):
                key, sep, raw = pair.partition(":")
                if not sep:
                    continue
                raw = raw.strip()
                try:
                    parsed: Any = _loads(raw)
                except ValueError:
                    parsed = raw
                meta[key.strip()] = parsed
        return cls(level, message, meta)

    def __str__(self) -> str:
        text = f"[{self.level}] {self.message}"
        if self.meta:
            pairs = ", ".join(f"{key}: {_dumps(value)}" for key, value in self.meta.items())
            text += f" {{{pairs}}}"
        return text