from sample_stream.formats import FileToStringStream
from sample_stream.streams import (
    END_OF_STREAM,
    CollectionObjectStream,
    EndOfStream,
    FilterObjectStream,
    IOFailure,
    IterableObjectStream,
    ObjectStream,
    StreamError,
    UnsupportedOperation,
    is_end,
    object_stream,
    object_stream_of,
)

__all__ = [
    "END_OF_STREAM",
    "EndOfStream",
    "ObjectStream",
    "FilterObjectStream",
    "CollectionObjectStream",
    "IterableObjectStream",
    "FileToStringStream",
    "StreamError",
    "UnsupportedOperation",
    "IOFailure",
    "is_end",
    "object_stream",
    "object_stream_of",
]
