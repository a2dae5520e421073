"""File watcher — triggers route regeneration on page changes.

Monitors the project root and reports changes that can affect the route
table:

- Page file created, modified, or deleted -> regenerate
- Config file changed -> reload config, regenerate

Everything else (generated output, excluded directories, other file types)
is ignored, so writing the generated module never re-triggers a run.
"""

from __future__ import annotations

import queue
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Literal

from watchfiles import Change

from prowl._types import ChangeKind

if TYPE_CHECKING:
    from collections.abc import Iterator

    from prowl.config import ProwlConfig

CONFIG_FILE_NAMES: frozenset[str] = frozenset({"prowl.yaml", "prowl.yml", "prowl.toml"})


@dataclass(frozen=True, slots=True)
class ChangeEvent:
    """A file change detected by the watcher.

    Attributes:
        path: Absolute path to the changed file.
        kind: Type of filesystem change.
        category: What kind of file changed.

    """

    path: Path
    kind: ChangeKind
    category: Literal["page", "config"]


# Mapping from watchfiles Change enum to our kind literals.
_CHANGE_KIND_MAP: dict[Change, ChangeKind] = {
    Change.added: "created",
    Change.modified: "modified",
    Change.deleted: "deleted",
}


def categorize_change(path: Path, config: ProwlConfig) -> Literal["page", "config"] | None:
    """Determine the category of a changed file based on its location.

    Returns None if the file cannot affect the route table.

    """
    try:
        rel = path.relative_to(config.root)
    except ValueError:
        return None

    if len(rel.parts) == 1 and rel.parts[0] in CONFIG_FILE_NAMES:
        return "config"

    try:
        page_rel = path.relative_to(config.pages_path)
    except ValueError:
        return None

    if not path.name.endswith(config.extension):
        return None
    for part in page_rel.parts[:-1]:
        if part in config.excluded_dirs or part.startswith("."):
            return None
    return "page"


class PagesWatcher:
    """Watches for file changes that affect the route table.

    Uses watchfiles for efficient filesystem monitoring.  The watcher runs
    watchfiles in a background thread and bridges events to a thread-safe
    queue consumed by :meth:`changes`.

    """

    def __init__(self, config: ProwlConfig) -> None:
        self._config = config
        self._queue: queue.Queue[ChangeEvent] = queue.Queue()
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def is_running(self) -> bool:
        """Whether the watcher background thread is active."""
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Start watching for file changes in a background thread."""
        if self.is_running:
            return

        self._stop_event.clear()
        self._thread = threading.Thread(
            target=self._watch_loop,
            name="prowl-watcher",
            daemon=True,
        )
        self._thread.start()

    def stop(self) -> None:
        """Signal the watcher to stop and wait for the thread to finish."""
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout=5.0)
            self._thread = None

    def changes(self, timeout: float = 0.5) -> Iterator[list[ChangeEvent]]:
        """Yield batches of ChangeEvent objects as they occur.

        Each batch holds every event queued when the first one arrived, so
        a burst of edits triggers a single regeneration.  Stops once the
        watcher is stopped and the queue is drained.

        """
        while self.is_running or not self._queue.empty():
            try:
                first = self._queue.get(timeout=timeout)
            except queue.Empty:
                continue
            batch = [first]
            while True:
                try:
                    batch.append(self._queue.get_nowait())
                except queue.Empty:
                    break
            yield batch

    def _watch_loop(self) -> None:
        """Background thread: run watchfiles and push events to the queue."""
        from watchfiles import watch

        for raw_changes in watch(
            self._config.root,
            stop_event=self._stop_event,
            debounce=300,
            step=100,
        ):
            for change_type, path_str in raw_changes:
                path = Path(path_str)
                category = categorize_change(path, self._config)
                if category is None:
                    continue

                kind = _CHANGE_KIND_MAP.get(change_type, "modified")
                self._queue.put_nowait(ChangeEvent(path=path, kind=kind, category=category))
