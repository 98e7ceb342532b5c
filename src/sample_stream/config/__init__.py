from .loader import load_config, parse_config
from .models import FileToStringConfig, LogSinkConfig, StreamConfig
from .validator import ConfigError

__all__ = [
    "ConfigError",
    "load_config",
    "parse_config",
    "StreamConfig",
    "FileToStringConfig",
    "LogSinkConfig",
]
