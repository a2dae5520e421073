"""Tests for prowl.observability — generation events and run history."""

import threading

import pytest

from prowl.observability.events import (
    GenerationFailed,
    GenerationSkipped,
    RoutesGenerated,
    now_ns,
)
from prowl.observability.log import EventLog

OUT = "/app/src/router/route.gen.ts"


def _generated(*, written: bool = True, duration_ms: float = 1.0, ts: int | None = None):
    return RoutesGenerated(
        out_file=OUT, route_count=3, page_count=4, written=written,
        duration_ms=duration_ms, timestamp_ns=now_ns() if ts is None else ts,
    )


def _skipped() -> GenerationSkipped:
    return GenerationSkipped(out_file=OUT, reason="fingerprint_unchanged", timestamp_ns=now_ns())


def _failed(error: str = "boom") -> GenerationFailed:
    return GenerationFailed(out_file=OUT, error=error, source=None, timestamp_ns=now_ns())


# ---------------------------------------------------------------------------
# EventLog
# ---------------------------------------------------------------------------


class TestEventLog:
    """History store for generation runs."""

    def test_append_and_len(self) -> None:
        log = EventLog()
        assert len(log) == 0
        log.append(_generated())
        assert len(log) == 1

    def test_max_events_enforced(self) -> None:
        log = EventLog(max_events=5)
        for _ in range(10):
            log.append(_generated())
        assert len(log) == 5

    def test_query_by_type(self) -> None:
        log = EventLog()
        log.append(_generated())
        log.append(_skipped())
        log.append(_generated())
        results = log.query(event_type=RoutesGenerated)
        assert len(results) == 2
        assert all(isinstance(r, RoutesGenerated) for r in results)

    def test_query_newest_first_with_limit(self) -> None:
        log = EventLog()
        for ts in range(1, 6):
            log.append(_generated(ts=ts))
        assert [r.timestamp_ns for r in log.query(limit=2)] == [5, 4]

    def test_query_since(self) -> None:
        log = EventLog()
        log.append(_generated(ts=100))
        log.append(_generated(ts=200))
        assert [r.timestamp_ns for r in log.query(since_ns=150)] == [200]

    def test_last(self) -> None:
        log = EventLog()
        assert log.last() is None
        log.append(_failed())
        log.append(_generated())
        assert isinstance(log.last(), RoutesGenerated)
        assert isinstance(log.last(GenerationFailed), GenerationFailed)

    def test_failures_oldest_first(self) -> None:
        log = EventLog()
        log.append(_failed("first"))
        log.append(_generated())
        log.append(_failed("second"))
        assert [f.error for f in log.failures()] == ["first", "second"]

    def test_clear(self) -> None:
        log = EventLog()
        log.append(_generated())
        log.append(_generated())
        assert log.clear() == 2
        assert len(log) == 0

    def test_concurrent_appends(self) -> None:
        log = EventLog(max_events=10_000)

        def writer() -> None:
            for _ in range(200):
                log.append(_generated())

        threads = [threading.Thread(target=writer) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(log) == 800


class TestStats:

    def test_counts_by_outcome(self) -> None:
        log = EventLog()
        log.append(_generated(written=True, duration_ms=2.0))
        log.append(_generated(written=False, duration_ms=4.0))
        log.append(_skipped())
        log.append(_failed())
        assert log.stats() == {
            "runs": 4,
            "written": 1,
            "unchanged": 1,
            "skipped": 1,
            "failed": 1,
            "mean_duration_ms": 3.0,
        }

    def test_empty(self) -> None:
        stats = EventLog().stats()
        assert stats["runs"] == 0
        assert stats["mean_duration_ms"] is None

    def test_summary(self) -> None:
        log = EventLog()
        log.append(_generated(duration_ms=2.0))
        log.append(_failed())
        assert log.summary() == (
            "2 runs: 1 written, 0 unchanged, 0 skipped, 1 failed (avg 2.0ms)"
        )

    def test_summary_single_run_without_builds(self) -> None:
        log = EventLog()
        log.append(_skipped())
        assert log.summary() == "1 run: 0 written, 0 unchanged, 1 skipped, 0 failed"


class TestEvents:

    def test_frozen(self) -> None:
        event = _generated()
        with pytest.raises(AttributeError):
            event.route_count = 0  # type: ignore[misc]

    def test_now_ns_monotonic(self) -> None:
        assert now_ns() <= now_ns()
