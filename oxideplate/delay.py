"""Circular delay line."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def _check_delay(delay: int) -> int:
    if delay < 1:
        raise ValueError(f"delay must be a positive integer, got {delay}")
    return delay


class Delay:
    """A fixed-length circular buffer that is read back at a given delay."""

    def __init__(self, buffer: Iterable[Any]) -> None:
        self._buffer = list(buffer)
        if not self._buffer:
            raise ValueError("buffer is empty")
        self._head = 0

    @property
    def buffer(self) -> tuple[Any, ...]:
        """The raw contents of the buffer, in storage order."""
        return tuple(self._buffer)

    def __len__(self) -> int:
        return len(self._buffer)

    def write(self, value: Any) -> None:
        """Write a value, overwriting the oldest one."""
        self._buffer[self._head] = value
        self._head = (self._head + 1) % len(self._buffer)

    def read(self, delay: int) -> Any:
        """Read the value written ``delay`` writes ago; 1 is the latest write.

        Delays longer than the buffer wrap around.
        """
        return self._buffer[self._index(_check_delay(delay))]

    def _index(self, delay: int) -> int:
        length = len(self._buffer)
        offset = delay % length
        if offset <= self._head:
            return self._head - offset
        return length + self._head - offset

    def resize(self, buffer: Iterable[Any]) -> Delay:
        """Return a new delay line on ``buffer`` that keeps the latest values.

        The newest value ends up at the end of the new buffer; values that do
        not fit are dropped and missing history comes from ``buffer``.
        """
        new = list(buffer)
        old = list(self._buffer)
        size = len(new)
        for age in range(1, size + 1):
            new_pos = size - age
            old_pos = self._index(age)
            new[new_pos], old[old_pos] = old[old_pos], new[new_pos]
        return Delay(new)

    def clear(self) -> None:
        """Reset every slot to the zero value of its type."""
        self._buffer = [type(value)() for value in self._buffer]