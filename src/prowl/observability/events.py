"""Generation events.

All events are frozen dataclasses with:
- ``timestamp_ns``: Monotonic nanosecond timestamp
- Descriptive fields for the specific event type

Thread Safety:
    All events are frozen (immutable) and safe to share across threads.

"""

import time
from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True, slots=True)
class RoutesGenerated:
    """A route table was built and rendered.

    Attributes:
        out_file: Generated module path.
        route_count: Number of unique route names.
        page_count: Number of page files scanned.
        written: False when the rendered output matched the file on disk.
        duration_ms: Time spent building and rendering in milliseconds.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    out_file: str
    route_count: int
    page_count: int
    written: bool
    duration_ms: float
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class GenerationSkipped:
    """Generation was skipped because nothing changed.

    Attributes:
        out_file: Generated module path.
        reason: Why the run was skipped.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    out_file: str
    reason: Literal["fingerprint_unchanged"]
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class GenerationFailed:
    """Generation aborted with an error.

    Attributes:
        out_file: Generated module path.
        error: Error message.
        source: File implicated by the error, if any.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    out_file: str
    error: str
    source: str | None
    timestamp_ns: int


type GenerationEvent = RoutesGenerated | GenerationSkipped | GenerationFailed


def now_ns() -> int:
    """Return the current monotonic clock value in nanoseconds."""
    return time.monotonic_ns()
