from __future__ import annotations

import codecs


class ConfigError(ValueError):
    # Raised for invalid stream configuration (fail fast, at construction time).
    pass


SUPPORTED_DECODE_ERROR_POLICIES = {"strict", "replace"}
DEFAULT_ENCODING = "utf-8"
DEFAULT_CHUNK_SIZE = 1024


def validate_encoding(encoding: object) -> str:
    # Resolve the codec once so an unknown charset never reaches the per-file read path.
    if not isinstance(encoding, str) or not encoding:
        raise ConfigError("encoding must be a non-empty string")
    try:
        info = codecs.lookup(encoding)
    except LookupError as exc:
        raise ConfigError(f"Unknown text encoding: {encoding!r}") from exc
    if not _is_text_encoding(info):
        raise ConfigError(f"{encoding!r} is not a text encoding")
    return info.name


def validate_decode_errors(decode_errors: object) -> str:
    if decode_errors not in SUPPORTED_DECODE_ERROR_POLICIES:
        raise ConfigError(f"decode_errors must be one of: {sorted(SUPPORTED_DECODE_ERROR_POLICIES)}")
    return str(decode_errors)


def validate_chunk_size(chunk_size: object) -> int:
    # bool is an int subclass; reject it explicitly.
    if isinstance(chunk_size, bool) or not isinstance(chunk_size, int) or chunk_size <= 0:
        raise ConfigError("chunk_size must be a positive integer")
    return chunk_size


def _is_text_encoding(info: codecs.CodecInfo) -> bool:
    # Binary transforms (base64, zlib, hex) are registered as codecs but decode bytes to bytes.
    try:
        decoded = codecs.decode(b"", info.name)
    except Exception:
        # zlib and bz2 reject empty input with their own error types.
        return False
    return isinstance(decoded, str)
