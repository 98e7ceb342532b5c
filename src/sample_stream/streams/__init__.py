from .collection import CollectionObjectStream, IterableObjectStream, object_stream, object_stream_of
from .errors import IOFailure, StreamError, UnsupportedOperation
from .filter_stream import FilterObjectStream
from .object_stream import END_OF_STREAM, EndOfStream, ObjectStream, is_end

__all__ = [
    "END_OF_STREAM",
    "EndOfStream",
    "ObjectStream",
    "is_end",
    "FilterObjectStream",
    "CollectionObjectStream",
    "IterableObjectStream",
    "object_stream",
    "object_stream_of",
    "StreamError",
    "UnsupportedOperation",
    "IOFailure",
]
