from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path
from typing import Protocol, TextIO, runtime_checkable


@dataclass(frozen=True, slots=True)
class LogMessage:
    # Diagnostic record for conditions a stream stage absorbs instead of raising.
    level: str
    message: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(tz=UTC))
    fields: dict[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.level or not self.message:
            raise ValueError("LogMessage requires non-empty level/message")

    def to_json(self) -> str:
        # Field values such as paths are rendered with str().
        payload = {
            "level": self.level,
            "message": self.message,
            "timestamp": self.timestamp.isoformat().replace("+00:00", "Z"),
            "fields": self.fields,
        }
        return json.dumps(payload, separators=(",", ":"), ensure_ascii=False, default=str)


@runtime_checkable
class LogSink(Protocol):
    def emit(self, message: LogMessage) -> None:
        """Deliver one structured log record."""
        raise NotImplementedError("LogSink is a port; use a concrete sink.")


class StdoutLogSink:
    def emit(self, message: LogMessage) -> None:
        print(message.to_json())


class JsonlLogSink:
    # Appends one record per line; the file is opened on first emit so an idle sink holds no descriptor.
    def __init__(self, path: Path) -> None:
        self._path = path
        self._file: TextIO | None = None

    def emit(self, message: LogMessage) -> None:
        if self._file is None:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._file = self._path.open("a", encoding="utf-8")
        self._file.write(message.to_json() + "\n")
        self._file.flush()

    def close(self) -> None:
        # Idempotent; a later emit reopens the file in append mode.
        if self._file is None:
            return
        self._file.close()
        self._file = None

    @property
    def closed(self) -> bool:
        return self._file is None
