"""Route generation — scan, resolve, render, and write the route module.

The two public functions are the primary entry points::

    generate(config)   # One run, skipped when nothing changed
    watch(config)      # Regenerate on every page or config change
"""

import logging
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from prowl._errors import PagesNotFoundError, ProwlError, RouteConflictError
from prowl.config import ProwlConfig
from prowl.config_loader import load_config
from prowl.export.cache import FileCache, fingerprint_pages, load_cache, save_cache
from prowl.export.typescript import render_routes_module
from prowl.observability.events import (
    GenerationFailed,
    GenerationSkipped,
    RoutesGenerated,
    now_ns,
)
from prowl.observability.log import EventLog
from prowl.pages.scanner import scan_pages
from prowl.routes.builder import build_routes
from prowl.routes.differ import diff_route_tables
from prowl.routes.types import RouteData

logger = logging.getLogger("prowl.generator")


@dataclass(frozen=True, slots=True)
class GenerationResult:
    """Outcome of one generation run.

    Attributes:
        written: True when the generated module was (re)written.
        skipped: Why the run stopped early, or *None* when it completed.
        data: The resolved route table, or *None* when the run was skipped.
        page_count: Number of page files scanned.
        duration_ms: Wall time of the run in milliseconds.

    """

    written: bool
    skipped: Literal["fingerprint_unchanged"] | None
    data: RouteData | None
    page_count: int
    duration_ms: float


def generate(
    config: ProwlConfig,
    *,
    force: bool = False,
    log: EventLog | None = None,
) -> GenerationResult:
    """Generate the route module for *config*.

    Skips the run when the pages fingerprint matches the cache and the
    output exists (unless *force*).  Leaves the output untouched when the
    rendered text is identical to what is on disk.

    Raises:
        PagesNotFoundError: If the pages directory does not exist.
        RouteConflictError: If a page declares its route twice.

    """
    t0 = time.perf_counter()
    pages_dir = config.pages_path
    out_file = config.out_path

    try:
        if not pages_dir.is_dir():
            raise PagesNotFoundError(pages_dir)

        files = scan_pages(pages_dir, config.excluded_dirs, config.extension)
        fingerprint = fingerprint_pages(pages_dir, files)
        cache = load_cache(config.cache_path)

        if not force and cache.files == fingerprint and out_file.is_file():
            logger.debug("Pages unchanged, skipping %s", out_file)
            if log is not None:
                log.append(GenerationSkipped(
                    out_file=str(out_file),
                    reason="fingerprint_unchanged",
                    timestamp_ns=now_ns(),
                ))
            return GenerationResult(
                written=False,
                skipped="fingerprint_unchanged",
                data=None,
                page_count=len(files),
                duration_ms=_elapsed_ms(t0),
            )

        data = build_routes(
            pages_dir,
            out_file,
            files=files,
            extension=config.extension,
        )
        output = render_routes_module(data)
        written = _write_if_changed(out_file, output)
        save_cache(config.cache_path, FileCache(files=fingerprint, last_routes_hash=fingerprint))
    except ProwlError as exc:
        if log is not None:
            source = exc.path if isinstance(exc, (RouteConflictError, PagesNotFoundError)) else None
            log.append(GenerationFailed(
                out_file=str(out_file),
                error=str(exc),
                source=str(source) if source is not None else None,
                timestamp_ns=now_ns(),
            ))
        raise

    duration_ms = _elapsed_ms(t0)
    logger.debug(
        "Generated %d routes from %d pages in %.1fms (written=%s)",
        len(data.route_name_list), len(files), duration_ms, written,
    )
    if log is not None:
        log.append(RoutesGenerated(
            out_file=str(out_file),
            route_count=len(data.route_name_list),
            page_count=len(files),
            written=written,
            duration_ms=duration_ms,
            timestamp_ns=now_ns(),
        ))
    return GenerationResult(
        written=written,
        skipped=None,
        data=data,
        page_count=len(files),
        duration_ms=duration_ms,
    )


def _write_if_changed(out_file: Path, output: str) -> bool:
    """Write *output* unless the file already holds exactly that text."""
    if out_file.is_file() and out_file.read_text(encoding="utf-8") == output:
        return False
    out_file.parent.mkdir(parents=True, exist_ok=True)
    out_file.write_text(output, encoding="utf-8")
    return True


def _elapsed_ms(t0: float) -> float:
    return (time.perf_counter() - t0) * 1000


def watch(
    config: ProwlConfig,
    *,
    log: EventLog | None = None,
    overrides: dict[str, object] | None = None,
) -> None:
    """Generate once, then regenerate on every page or config change.

    Runs until interrupted.  Generation errors are printed and the watcher
    keeps running, so fixing the offending page recovers without a restart.
    Every run is recorded in *log* (a fresh EventLog by default), and the
    session summary is printed on exit.
    When the config file changes it is reloaded with *overrides* re-applied.

    """
    from prowl.pages.watcher import PagesWatcher

    if log is None:
        log = EventLog()
    previous = _run_and_report(config, None, force=True, log=log)

    try:
        while True:
            watcher = PagesWatcher(config)
            watcher.start()
            print(f"  Watching {config.pages_path} for changes", file=sys.stderr)
            restart = False
            try:
                for batch in watcher.changes():
                    if any(event.category == "config" for event in batch):
                        config = _reload_config(config, overrides or {})
                        restart = True
                    names = ", ".join(sorted({event.path.name for event in batch}))
                    print(f"  {names} changed", file=sys.stderr)
                    current = _run_and_report(config, previous, force=True, log=log)
                    if current is not None:
                        previous = current
                    if restart:
                        break
            finally:
                watcher.stop()
            if not restart:
                return
    except KeyboardInterrupt:
        pass
    finally:
        _print_session_summary(log)


def _print_session_summary(log: EventLog) -> None:
    """Print run counts and the failures of a watch session to stderr."""
    print(f"  Session: {log.summary()}", file=sys.stderr)
    for failure in log.failures()[-3:]:
        print(f"    failed: {failure.error}", file=sys.stderr)


def _reload_config(config: ProwlConfig, overrides: dict[str, object]) -> ProwlConfig:
    try:
        return load_config(config.root, **overrides)
    except ProwlError as exc:
        print(f"  Config error: {exc} (keeping previous config)", file=sys.stderr)
        return config


def _run_and_report(
    config: ProwlConfig,
    previous: RouteData | None,
    *,
    force: bool,
    log: EventLog | None,
) -> RouteData | None:
    """Run one generation for watch mode and print a summary to stderr."""
    try:
        result = generate(config, force=force, log=log)
    except ProwlError as exc:
        print(f"  Generation error: {exc}", file=sys.stderr)
        return None

    if result.data is None:
        return previous

    routes = "route" if len(result.data.route_name_list) == 1 else "routes"
    status = "written" if result.written else "unchanged"
    print(
        f"  {len(result.data.route_name_list)} {routes} -> {config.out_file} "
        f"({status}, {result.duration_ms:.1f}ms)",
        file=sys.stderr,
    )
    if previous is not None:
        for change in diff_route_tables(previous, result.data):
            print(f"    {change.describe()}", file=sys.stderr)
    return result.data
