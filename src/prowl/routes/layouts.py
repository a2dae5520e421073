"""Layout classification and page-to-layout association.

A layout file marks a wrapping boundary for the pages beneath its owning
prefix::

    pages/users/layout.vue        -> layout for prefix ("users",)
    pages/admin/layout/index.vue  -> layout for prefix ("admin",)
    pages/layout.vue              -> layout for the empty prefix (every page)

Layouts are ordered by ascending depth and a page is governed by the first
layout whose prefix matches, which makes the *shallowest* matching layout win.
"""

import os
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from prowl._types import ImportRef, Segment
from prowl.routes.segments import layout_marker_index


@dataclass(frozen=True, slots=True)
class PageFile:
    """A scanned page file.

    Attributes:
        path: Absolute filesystem path.
        import_ref: Import specifier relative to the generated module.
        segments: Path relative to the pages root, extension stripped, split
            on the separator.

    """

    path: Path
    import_ref: ImportRef
    segments: tuple[Segment, ...]

    @property
    def key(self) -> str:
        """Sort key: segments joined with ``/``."""
        return "/".join(self.segments)


@dataclass(frozen=True, slots=True)
class LayoutInfo:
    """A layout boundary.

    Attributes:
        import_ref: Import specifier of the layout file.
        segments: The owning prefix (segments before the layout marker).
        depth: Position of the layout marker in the file's segments.

    """

    import_ref: ImportRef
    segments: tuple[Segment, ...]
    depth: int

    @property
    def key(self) -> str:
        """Grouping key: prefix segments joined with ``/``."""
        return "/".join(self.segments)


@dataclass(frozen=True, slots=True)
class PageWithLayouts:
    """A non-layout page and its candidate layouts, shallowest first."""

    page: PageFile
    layouts: tuple[LayoutInfo, ...] = ()

    @property
    def governing_layout(self) -> LayoutInfo | None:
        """The layout that wraps this page, or *None* for standalone pages."""
        return self.layouts[0] if self.layouts else None


def make_import_ref(path: Path, out_dir: Path) -> ImportRef:
    """Build a POSIX import specifier from *out_dir* to *path*.

    ``./`` is prepended unless the specifier already starts with ``.``.

    """
    relative = Path(os.path.relpath(path, out_dir)).as_posix()
    if relative.startswith("."):
        return relative
    return "./" + relative


def page_file(path: Path, pages_dir: Path, out_dir: Path, extension: str) -> PageFile:
    """Build a PageFile from an absolute path under *pages_dir*."""
    relative = path.relative_to(pages_dir).as_posix()
    if extension and relative.endswith(extension):
        relative = relative[: -len(extension)]
    return PageFile(
        path=path,
        import_ref=make_import_ref(path, out_dir),
        segments=tuple(relative.split("/")),
    )


def split_layouts(files: Iterable[PageFile]) -> tuple[list[PageFile], list[PageFile]]:
    """Partition files into ``(layout_files, page_files)``, order preserved."""
    layouts: list[PageFile] = []
    pages: list[PageFile] = []
    for file in files:
        if layout_marker_index(file.segments) is None:
            pages.append(file)
        else:
            layouts.append(file)
    return layouts, pages


def classify_layouts(files: Iterable[PageFile]) -> tuple[LayoutInfo, ...]:
    """Return a LayoutInfo for every layout file, sorted by ascending depth.

    The sort is stable: layouts at equal depth keep their scan order.

    """
    layouts: list[LayoutInfo] = []
    for file in files:
        marker = layout_marker_index(file.segments)
        if marker is None:
            continue
        layouts.append(LayoutInfo(
            import_ref=file.import_ref,
            segments=file.segments[:marker],
            depth=marker,
        ))
    layouts.sort(key=lambda layout: layout.depth)
    return tuple(layouts)


def _is_prefix(prefix: Sequence[Segment], segments: Sequence[Segment]) -> bool:
    if len(prefix) > len(segments):
        return False
    return all(a == b for a, b in zip(prefix, segments, strict=False))


def associate_pages(
    pages: Iterable[PageFile],
    layouts: Sequence[LayoutInfo],
) -> tuple[PageWithLayouts, ...]:
    """Attach candidate layouts to every page.

    A layout is a candidate when its prefix equals the first ``len(prefix)``
    segments of the page.  Candidates keep the depth order of *layouts*.

    """
    return tuple(
        PageWithLayouts(
            page=page,
            layouts=tuple(
                layout for layout in layouts if _is_prefix(layout.segments, page.segments)
            ),
        )
        for page in pages
    )
