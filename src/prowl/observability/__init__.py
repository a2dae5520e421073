"""Generation observability — what each run did and how long it took.

Quick Start:
    >>> from prowl.observability import EventLog
    >>> log = EventLog()
    >>> # generate(config, log=log) records one event per run
    >>> log.stats()["runs"]
    0

"""

from prowl.observability.events import (
    GenerationEvent,
    GenerationFailed,
    GenerationSkipped,
    RoutesGenerated,
    now_ns,
)
from prowl.observability.log import EventLog

__all__ = [
    "EventLog",
    "GenerationEvent",
    "GenerationFailed",
    "GenerationSkipped",
    "RoutesGenerated",
    "now_ns",
]
