from __future__ import annotations

import os
from pathlib import Path
from typing import TextIO

from sample_stream.config.validator import (
    DEFAULT_CHUNK_SIZE,
    DEFAULT_ENCODING,
    validate_chunk_size,
    validate_decode_errors,
    validate_encoding,
)
from sample_stream.observability.logging import LogMessage, LogSink
from sample_stream.streams.errors import IOFailure
from sample_stream.streams.filter_stream import FilterObjectStream
from sample_stream.streams.object_stream import ObjectStream

SampleFile = str | os.PathLike[str]


class FileToStringStream(FilterObjectStream[SampleFile, str]):
    """Turn a stream of sample files into a stream of their decoded contents.

    Each read() pulls one path from the wrapped stream and returns the whole
    file decoded with the configured encoding. A file that cannot be opened,
    read or decoded raises IOFailure for that call only; the next read() moves
    on to the following path. End of stream is reported exactly when the
    wrapped stream ends and stays sticky until reset().
    """

    def __init__(
        self,
        samples: ObjectStream[SampleFile],
        encoding: str = DEFAULT_ENCODING,
        *,
        decode_errors: str = "strict",
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        log_sink: LogSink | None = None,
        owns_log_sink: bool = False,
    ) -> None:
        super().__init__(samples)
        self._encoding = validate_encoding(encoding)
        self._decode_errors = validate_decode_errors(decode_errors)
        self._chunk_size = validate_chunk_size(chunk_size)
        self._log_sink = log_sink
        self._owns_log_sink = owns_log_sink

    @property
    def encoding(self) -> str:
        return self._encoding

    @property
    def decode_errors(self) -> str:
        return self._decode_errors

    @property
    def chunk_size(self) -> int:
        return self._chunk_size

    def transform(self, sample: SampleFile) -> str:
        return read_file(
            sample,
            self._encoding,
            errors=self._decode_errors,
            chunk_size=self._chunk_size,
            log_sink=self._log_sink,
        )

    def close(self) -> None:
        # A sink built for this stream is released with it, even when the source fails to close.
        try:
            super().close()
        finally:
            if self._owns_log_sink and self._log_sink is not None:
                closer = getattr(self._log_sink, "close", None)
                if callable(closer):
                    closer()


def read_file(
    sample: SampleFile,
    encoding: str,
    *,
    errors: str = "strict",
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    log_sink: LogSink | None = None,
) -> str:
    # Whole-file read in fixed-size chunks; decode failures count as read failures.
    path = Path(sample)
    try:
        handle = _open_text(path, encoding, errors)
    except (OSError, ValueError) as exc:
        raise IOFailure(path, _describe(exc)) from exc

    try:
        chunks = list(iter(lambda: handle.read(chunk_size), ""))
    except (OSError, UnicodeError) as exc:
        raise IOFailure(path, _describe(exc)) from exc
    finally:
        _close_quietly(handle, path, log_sink)
    return "".join(chunks)


def _open_text(path: Path, encoding: str, errors: str) -> TextIO:
    # newline="" keeps line endings exactly as stored on disk.
    return path.open("r", encoding=encoding, errors=errors, newline="")


def _close_quietly(handle: TextIO, path: Path, log_sink: LogSink | None) -> None:
    # A close failure never replaces the read outcome; it is only reported at debug level.
    try:
        handle.close()
    except Exception as exc:
        if log_sink is None:
            return
        message = LogMessage(
            level="debug",
            message="sample file close failed",
            fields={"path": str(path), "error": _describe(exc)},
        )
        try:
            log_sink.emit(message)
        except Exception:
            # A broken sink is discarded the same way as the close failure it reports.
            pass


def _describe(exc: BaseException) -> str:
    return f"{type(exc).__name__}: {exc}"
