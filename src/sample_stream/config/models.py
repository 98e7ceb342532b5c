from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from sample_stream.config.validator import DEFAULT_CHUNK_SIZE, DEFAULT_ENCODING, validate_encoding

# Config models map YAML sections to typed structures consumed by wiring.


class FileToStringConfig(BaseModel):
    # Settings of the file-content stage; encoding is resolved to its canonical codec name.
    model_config = ConfigDict(extra="forbid", frozen=True)
    encoding: str = DEFAULT_ENCODING
    decode_errors: Literal["strict", "replace"] = "strict"
    chunk_size: int = Field(default=DEFAULT_CHUNK_SIZE, gt=0)

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        # ConfigError is a ValueError, so pydantic reports it as a validation error.
        return validate_encoding(value)


class LogSinkConfig(BaseModel):
    # Log sink selector: stdout or an append-only JSONL file.
    model_config = ConfigDict(extra="forbid")
    kind: Literal["stdout", "jsonl"]
    path: str | None = None

    @model_validator(mode="after")
    def _require_path(self) -> LogSinkConfig:
        # For jsonl kind, a path is required to avoid silent defaults.
        if self.kind == "jsonl" and not self.path:
            raise ValueError("logging.path is required when kind is 'jsonl'")
        return self


class StreamConfig(BaseModel):
    # Top-level typed view of the stream configuration file.
    model_config = ConfigDict(extra="forbid")
    version: int
    file_to_string: FileToStringConfig = Field(default_factory=FileToStringConfig)
    logging: LogSinkConfig | None = None
