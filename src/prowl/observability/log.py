"""Generation history — the runs of a watch session.

Keeps the most recent generation events in a bounded buffer so watch mode
can report a session summary on exit::

    log = EventLog()
    generate(config, log=log)
    log.summary()   # "1 run: 1 written, 0 unchanged, 0 skipped, 0 failed"

Thread Safety:
    Appends and reads share one ``threading.Lock``.

"""

import threading
from collections import deque
from typing import Any

from prowl.observability.events import (
    GenerationEvent,
    GenerationFailed,
    GenerationSkipped,
    RoutesGenerated,
)


class EventLog:
    """Bounded history of generation events, oldest first.

    Args:
        max_events: Events retained before the oldest are dropped.

    """

    __slots__ = ("_events", "_lock")

    def __init__(self, max_events: int = 1_000) -> None:
        self._events: deque[GenerationEvent] = deque(maxlen=max_events)
        self._lock = threading.Lock()

    def append(self, event: GenerationEvent) -> None:
        with self._lock:
            self._events.append(event)

    def query(
        self,
        *,
        event_type: type | None = None,
        since_ns: int = 0,
        limit: int = 100,
    ) -> list[GenerationEvent]:
        """Matching events, newest first."""
        with self._lock:
            events = list(self._events)
        matches = [
            event for event in reversed(events)
            if (event_type is None or isinstance(event, event_type))
            and event.timestamp_ns >= since_ns
        ]
        return matches[:limit]

    def last(self, event_type: type | None = None) -> GenerationEvent | None:
        """The newest event, optionally of *event_type*."""
        found = self.query(event_type=event_type, limit=1)
        return found[0] if found else None

    def failures(self) -> list[GenerationFailed]:
        """Failed runs, oldest first."""
        with self._lock:
            return [e for e in self._events if isinstance(e, GenerationFailed)]

    def clear(self) -> int:
        """Drop all events and return how many there were."""
        with self._lock:
            count = len(self._events)
            self._events.clear()
            return count

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)

    def stats(self) -> dict[str, Any]:
        """Run counts by outcome and the mean build time of completed runs."""
        with self._lock:
            events = list(self._events)

        generated = [e for e in events if isinstance(e, RoutesGenerated)]
        durations = [e.duration_ms for e in generated]
        return {
            "runs": len(events),
            "written": sum(1 for e in generated if e.written),
            "unchanged": sum(1 for e in generated if not e.written),
            "skipped": sum(1 for e in events if isinstance(e, GenerationSkipped)),
            "failed": sum(1 for e in events if isinstance(e, GenerationFailed)),
            "mean_duration_ms": sum(durations) / len(durations) if durations else None,
        }

    def summary(self) -> str:
        """One-line session summary."""
        stats = self.stats()
        runs = "run" if stats["runs"] == 1 else "runs"
        line = (
            f"{stats['runs']} {runs}: {stats['written']} written, "
            f"{stats['unchanged']} unchanged, {stats['skipped']} skipped, "
            f"{stats['failed']} failed"
        )
        if stats["mean_duration_ms"] is not None:
            line += f" (avg {stats['mean_duration_ms']:.1f}ms)"
        return line
