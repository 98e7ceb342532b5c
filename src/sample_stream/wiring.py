from __future__ import annotations

from pathlib import Path

from sample_stream.config.models import LogSinkConfig, StreamConfig
from sample_stream.formats.file_to_string import FileToStringStream, SampleFile
from sample_stream.observability.logging import JsonlLogSink, LogSink, StdoutLogSink
from sample_stream.streams.object_stream import ObjectStream


def build_log_sink(config: LogSinkConfig | None) -> LogSink | None:
    # No logging section means close failures stay silent.
    if config is None:
        return None
    if config.kind == "jsonl":
        assert config.path is not None
        return JsonlLogSink(Path(config.path))
    return StdoutLogSink()


def build_file_to_string_stream(
    config: StreamConfig,
    samples: ObjectStream[SampleFile],
    *,
    log_sink: LogSink | None = None,
) -> FileToStringStream:
    # A caller-supplied sink stays owned by the caller; a configured sink is closed with the stream.
    settings = config.file_to_string
    owns_log_sink = log_sink is None
    if log_sink is None:
        log_sink = build_log_sink(config.logging)
    return FileToStringStream(
        samples,
        settings.encoding,
        decode_errors=settings.decode_errors,
        chunk_size=settings.chunk_size,
        log_sink=log_sink,
        owns_log_sink=owns_log_sink,
    )
