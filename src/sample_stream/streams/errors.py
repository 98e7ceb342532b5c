from __future__ import annotations

from pathlib import Path


class StreamError(Exception):
    # Base class for failures surfaced by ObjectStream.read()/reset().
    pass


class UnsupportedOperation(StreamError):
    # Raised by reset() on streams whose source cannot be rewound.
    pass


class IOFailure(StreamError):
    # Raised when a sample file cannot be opened, read or decoded; scoped to one read() call.
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot read {path}: {reason}")
        self.path = path
        self.reason = reason
