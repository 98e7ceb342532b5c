from __future__ import annotations

from collections.abc import Iterator
from enum import Enum
from types import TracebackType
from typing import Protocol, TypeVar, runtime_checkable

from sample_stream.streams.errors import UnsupportedOperation

T_co = TypeVar("T_co", covariant=True)


class EndOfStream(Enum):
    # Single-member enum: elements may be "" or None, so exhaustion needs its own marker.
    END = "END"

    def __repr__(self) -> str:
        return "END_OF_STREAM"


END_OF_STREAM = EndOfStream.END


def is_end(value: object) -> bool:
    return value is END_OF_STREAM


# ObjectStream is the pull-based lazy sequence port every stage of the chain implements.
@runtime_checkable
class ObjectStream(Protocol[T_co]):
    def read(self) -> T_co | EndOfStream:
        """Return the next element, or END_OF_STREAM once the sequence is exhausted.

        Implementations keep returning END_OF_STREAM on every call after
        exhaustion until reset() is called.
        """
        raise NotImplementedError("ObjectStream is a port; use a concrete stream.")

    def reset(self) -> None:
        """Rewind to the first element; non-rewindable sources raise UnsupportedOperation."""
        raise UnsupportedOperation(f"{type(self).__name__} cannot be reset")

    def close(self) -> None:
        """Release held resources. Callers invoke this on every exit path."""
        return None

    def __iter__(self) -> Iterator[T_co]:
        # Iteration is sugar over read(); it stops at the first END_OF_STREAM.
        while True:
            item = self.read()
            if item is END_OF_STREAM:
                return
            yield item  # type: ignore[misc]

    def __enter__(self) -> ObjectStream[T_co]:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
