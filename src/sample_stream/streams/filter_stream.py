from __future__ import annotations

from typing import Generic, TypeVar

from sample_stream.streams.object_stream import END_OF_STREAM, EndOfStream, ObjectStream

A = TypeVar("A")
B = TypeVar("B")


class FilterObjectStream(ObjectStream[B], Generic[A, B]):
    # Decorator over exactly one inner stream: subclasses override transform() only.
    # reset()/close() are forwarded unchanged; the decorator owns nothing but the inner reference.

    def __init__(self, samples: ObjectStream[A]) -> None:
        if samples is None:
            raise ValueError("samples must not be None")
        self._samples = samples
        self._exhausted = False

    @property
    def samples(self) -> ObjectStream[A]:
        return self._samples

    def transform(self, sample: A) -> B:
        raise NotImplementedError(f"{type(self).__name__} must implement transform()")

    def read(self) -> B | EndOfStream:
        # Terminal state: once the inner stream ended, it is not queried again until reset().
        if self._exhausted:
            return END_OF_STREAM
        sample = self._samples.read()
        if sample is END_OF_STREAM:
            self._exhausted = True
            return END_OF_STREAM
        # The inner element is already consumed here; a failing transform does not re-fetch it.
        return self.transform(sample)  # type: ignore[arg-type]

    def reset(self) -> None:
        self._samples.reset()
        self._exhausted = False

    def close(self) -> None:
        self._samples.close()
