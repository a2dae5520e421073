"""Page scanner — find page files under the pages root.

Walks the pages directory and returns every file carrying the page
extension, skipping excluded directory names at any depth and hidden
directories.  The result is sorted so that generation is reproducible.
"""

from collections.abc import Iterable
from pathlib import Path

from prowl.config import DEFAULT_EXCLUDED_DIRS


def scan_pages(
    root: Path,
    excluded_dirs: Iterable[str] = DEFAULT_EXCLUDED_DIRS,
    extension: str = ".vue",
) -> tuple[Path, ...]:
    """Return the sorted page files under *root*.

    Returns an empty tuple when *root* is not a directory; callers that
    require the directory check for it first.

    """
    if not root.is_dir():
        return ()

    excluded = frozenset(excluded_dirs)
    files: list[Path] = []
    stack: list[Path] = [root]

    while stack:
        directory = stack.pop()
        for item in directory.iterdir():
            if item.is_dir():
                if item.name in excluded or item.name.startswith("."):
                    continue
                stack.append(item)
            elif item.is_file() and item.name.endswith(extension):
                files.append(item)

    return tuple(sorted(files, key=str))
