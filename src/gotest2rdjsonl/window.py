"""Bounded buffer of the most recent output events."""

from __future__ import annotations

from collections import deque
from typing import Iterator

from .models import TestEvent


class OutputWindow:
    """FIFO of at most `capacity` output events; the oldest is dropped first."""

    def __init__(self, capacity: int = 3):
        if capacity < 0:
            raise ValueError(f"Window capacity must be non-negative: {capacity}")
        self.capacity = capacity
        self._events: deque[TestEvent] = deque(maxlen=capacity)

    def push(self, event: TestEvent) -> None:
        """Append an event, evicting the oldest one when full."""
        self._events.append(event)

    def drain_and_clear(self) -> list[TestEvent]:
        """Return the buffered events oldest first and empty the window."""
        events = list(self._events)
        self._events.clear()
        return events

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[TestEvent]:
        return iter(tuple(self._events))

    def __repr__(self) -> str:
        return f"OutputWindow(capacity={self.capacity}, size={len(self._events)})"
