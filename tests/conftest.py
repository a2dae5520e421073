"""Shared test fixtures for prowl."""

from __future__ import annotations

from pathlib import Path

import pytest

PAGE = "<template><div /></template>\n"


def write_pages(pages_dir: Path, files: dict[str, str] | list[str]) -> list[Path]:
    """Create page files under *pages_dir*.

    *files* maps relative paths to their source, or lists relative paths
    that get a plain template body.
    """
    items = files.items() if isinstance(files, dict) else ((name, PAGE) for name in files)
    written: list[Path] = []
    for relative, source in items:
        path = pages_dir / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(source, encoding="utf-8")
        written.append(path)
    return written


@pytest.fixture
def tmp_project(tmp_path: Path) -> Path:
    """Create a minimal project with a pages directory.

    Returns the project root.  Pages live under ``src/pages``::

        index.vue
        about.vue
        users/layout.vue
        users/index.vue
        users/$id.vue
    """
    write_pages(tmp_path / "src" / "pages", [
        "index.vue",
        "about.vue",
        "users/layout.vue",
        "users/index.vue",
        "users/$id.vue",
    ])
    return tmp_path


@pytest.fixture
def pages_dir(tmp_project: Path) -> Path:
    return tmp_project / "src" / "pages"


@pytest.fixture
def out_file(tmp_project: Path) -> Path:
    return tmp_project / "src" / "router" / "route.gen.ts"
