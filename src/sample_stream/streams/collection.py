from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import TypeVar

from sample_stream.streams.errors import UnsupportedOperation
from sample_stream.streams.object_stream import END_OF_STREAM, EndOfStream, ObjectStream

T = TypeVar("T")


class CollectionObjectStream(ObjectStream[T]):
    # Rewindable stream over a materialized sequence; END_OF_STREAM repeats after exhaustion.

    def __init__(self, items: Iterable[T]) -> None:
        self._items: Sequence[T] = tuple(items)
        self._position = 0

    def read(self) -> T | EndOfStream:
        if self._position >= len(self._items):
            return END_OF_STREAM
        item = self._items[self._position]
        self._position += 1
        return item

    def reset(self) -> None:
        self._position = 0

    def __len__(self) -> int:
        return len(self._items)


class IterableObjectStream(ObjectStream[T]):
    # Single-pass stream over a live iterable (generator, socket feed); it cannot be rewound.

    def __init__(self, iterable: Iterable[T]) -> None:
        self._iterable = iterable
        self._iterator: Iterator[T] = iter(iterable)
        self._exhausted = False

    def read(self) -> T | EndOfStream:
        if self._exhausted:
            return END_OF_STREAM
        try:
            return next(self._iterator)
        except StopIteration:
            self._exhausted = True
            return END_OF_STREAM

    def reset(self) -> None:
        raise UnsupportedOperation(f"{type(self._iterable).__name__} source is not rewindable")

    def close(self) -> None:
        # Generators hold frames (and possibly open files); closing them runs their finally blocks.
        self._exhausted = True
        closer = getattr(self._iterator, "close", None)
        if callable(closer):
            closer()


def object_stream(*items: T) -> CollectionObjectStream[T]:
    return CollectionObjectStream(items)


def object_stream_of(iterable: Iterable[T]) -> ObjectStream[T]:
    # Sequences stay rewindable; any other iterable is treated as single-pass.
    if isinstance(iterable, (str, bytes, bytearray)):
        raise TypeError(
            f"object_stream_of expects a collection of samples, not {type(iterable).__name__}; "
            "wrap a single sample with object_stream()"
        )
    if isinstance(iterable, Sequence):
        return CollectionObjectStream(iterable)
    return IterableObjectStream(iterable)
