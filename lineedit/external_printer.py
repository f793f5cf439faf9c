"""A bounded channel for printing lines while a line is being edited."""

from __future__ import annotations

import queue
from typing import Generic, TypeVar

T = TypeVar("T")

EXTERNAL_PRINTER_DEFAULT_CAPACITY = 20


class ExternalPrinter(Generic[T]):
    """Collects messages from other threads to be printed above the edited line.

    Each message is printed as a new line and editing continues below it.
    Copies of the printer, or of its sender, all feed the same channel.
    """

    def __init__(self, max_cap: int = EXTERNAL_PRINTER_DEFAULT_CAPACITY) -> None:
        if isinstance(max_cap, bool) or not isinstance(max_cap, int):
            raise TypeError(f"capacity must be an integer, got {max_cap!r}")
        if max_cap < 1:
            raise ValueError(f"capacity must be at least 1, got {max_cap}")
        self.max_cap = max_cap
        self._queue: queue.Queue[T] = queue.Queue(maxsize=max_cap)

    def sender(self) -> queue.Queue[T]:
        """The channel end to hand to other threads; use its ``put`` to send lines."""
        return self._queue

    def print(self, line: T) -> None:
        """Queue ``line``, blocking while the channel is full."""
        self._queue.put(line)

    def get_line(self) -> T | None:
        """Take the oldest queued line, or None if there is none; never blocks."""
        try:
            return self._queue.get_nowait()
        except queue.Empty:
            return None