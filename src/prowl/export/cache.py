"""Fingerprint cache — skip regeneration when the pages tree is unchanged.

A fingerprint maps every page file (relative POSIX path) to
``"<mtime_ms>-<size>"``.  It is stored as JSON next to the generated
module's tooling cache::

    {
      "files": "{\"index.vue\": \"1718000000000.0-412\"}",
      "lastRoutesHash": "..."
    }
"""

import json
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger("prowl.cache")

EMPTY_FINGERPRINT = "{}"


@dataclass(frozen=True, slots=True)
class FileCache:
    """Persisted change-detection state.

    Attributes:
        files: Fingerprint of the pages tree at the last generation.
        last_routes_hash: Fingerprint that produced the current output.

    """

    files: str = EMPTY_FINGERPRINT
    last_routes_hash: str | None = None


def file_hash(path: Path) -> str:
    """Fingerprint one file by modification time and size."""
    stats = path.stat()
    return f"{stats.st_mtime_ns / 1_000_000}-{stats.st_size}"


def fingerprint_pages(pages_dir: Path, files: Iterable[Path]) -> str:
    """Fingerprint a set of page files as a stable JSON string."""
    hashes = {path.relative_to(pages_dir).as_posix(): file_hash(path) for path in files}
    return json.dumps(dict(sorted(hashes.items())))


def load_cache(path: Path) -> FileCache:
    """Load the cache at *path*, or an empty cache if missing or unreadable."""
    if not path.is_file():
        return FileCache()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("Ignoring unreadable cache %s: %s", path, exc)
        return FileCache()
    if not isinstance(data, dict) or not isinstance(data.get("files"), str):
        logger.warning("Ignoring malformed cache %s", path)
        return FileCache()
    last = data.get("lastRoutesHash")
    return FileCache(files=data["files"], last_routes_hash=last if isinstance(last, str) else None)


def save_cache(path: Path, cache: FileCache) -> None:
    """Write *cache* to *path*, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = {"files": cache.files, "lastRoutesHash": cache.last_routes_hash}
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
