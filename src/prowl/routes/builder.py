"""Route tree builder — page files to a nested route table.

The pipeline is one synchronous pass over the scanned file list::

    scan -> classify layouts -> associate pages -> read descriptors
         -> build standalone + layout nodes -> flatten into the registry

Every input is read before the tree is built, and every call constructs
fresh data, so two runs over the same files and descriptors produce equal
results.

Public API::

    from prowl.routes import build_routes

    data = build_routes(Path("src/pages"), Path("src/router/route.gen.ts"))
    data.path_for("users-id")   # "/users/:id"
"""

from collections import defaultdict
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import replace
from pathlib import Path
from typing import Any

from prowl._errors import ConfigError, PagesNotFoundError
from prowl.config import DEFAULT_EXCLUDED_DIRS
from prowl.pages.descriptors import extract_descriptor
from prowl.pages.scanner import scan_pages
from prowl.pages.types import EMPTY_DESCRIPTOR, PageDescriptor
from prowl.routes.layouts import (
    LayoutInfo,
    PageFile,
    PageWithLayouts,
    associate_pages,
    classify_layouts,
    page_file,
    split_layouts,
)
from prowl.routes.registry import RouteEntryInfo, build_registry
from prowl.routes.segments import (
    join_paths,
    route_name,
    segment_params,
    segments_to_path,
)
from prowl.routes.types import RouteData, RouteNode

type DescriptorLookup = Callable[[Path], PageDescriptor]

# Override fields that are always derived from the filesystem
_DERIVED_FIELDS: frozenset[str] = frozenset({
    "children",
    "component",
    "components",
    "importPath",
    "import_ref",
    "params",
})

# Override fields with dedicated handling
_HANDLED_FIELDS: frozenset[str] = frozenset({"name", "path", "meta"})


def build_routes(
    pages_dir: Path,
    out_file: Path,
    *,
    files: Sequence[Path] | None = None,
    excluded_dirs: Iterable[str] = DEFAULT_EXCLUDED_DIRS,
    extension: str = ".vue",
    descriptors: DescriptorLookup | None = None,
) -> RouteData:
    """Resolve the route table for the pages under *pages_dir*.

    Args:
        pages_dir: Pages root directory.
        out_file: Path of the generated module; import specifiers are
            relative to its directory.
        files: Pre-scanned, sorted page files.  Scanned from *pages_dir*
            when omitted.
        excluded_dirs: Directory names skipped when scanning.
        extension: Page file extension, stripped from segments.
        descriptors: Returns the route declarations of a page file.
            Defaults to reading the file itself.

    Raises:
        PagesNotFoundError: If *pages_dir* does not exist.
        RouteConflictError: If a page declares its route twice.

    """
    if not pages_dir.is_dir():
        raise PagesNotFoundError(pages_dir)

    if files is None:
        files = scan_pages(pages_dir, excluded_dirs, extension)
    lookup = descriptors if descriptors is not None else extract_descriptor

    out_dir = out_file.parent
    entries = [page_file(path, pages_dir, out_dir, extension) for path in files]

    layout_files, page_files = split_layouts(entries)
    layouts = classify_layouts(layout_files)
    page_files.sort(key=lambda page: page.key)
    pages = associate_pages(page_files, layouts)

    # Read all descriptors up front; a conflict aborts before any node exists.
    page_descriptors = {page.path: lookup(page.path) for page in page_files}

    routes, infos = build_route_tree(pages, page_descriptors)
    registry = build_registry(infos)

    return RouteData(
        routes=routes,
        route_name_list=registry.unique_names,
        route_path_list=registry.unique_paths,
        route_path_by_name=registry.path_by_name,
        route_params_by_name=registry.params_by_name,
        route_key_data=infos,
        route_keys=registry.key_by_name,
    )


def build_route_tree(
    pages: Sequence[PageWithLayouts],
    descriptors: Mapping[Path, PageDescriptor],
) -> tuple[tuple[RouteNode, ...], tuple[RouteEntryInfo, ...]]:
    """Build top-level route nodes and their flattened entries.

    Standalone pages come first in input order, then one node per layout
    group in prefix order, each followed by its children.

    """
    standalone, groups = group_pages(pages)

    routes: list[RouteNode] = []
    infos: list[RouteEntryInfo] = []

    for page in standalone:
        descriptor = descriptors.get(page.page.path, EMPTY_DESCRIPTOR)
        node, info = _build_standalone(page.page, descriptor)
        routes.append(node)
        infos.append(info)

    for layout, group in sorted(groups.items(), key=lambda item: item[0].key):
        node, group_infos = _build_layout(layout, group, descriptors)
        routes.append(node)
        infos.extend(group_infos)

    return tuple(routes), tuple(infos)


def group_pages(
    pages: Iterable[PageWithLayouts],
) -> tuple[list[PageWithLayouts], dict[LayoutInfo, list[PageWithLayouts]]]:
    """Split pages into standalone pages and groups keyed by governing layout."""
    standalone: list[PageWithLayouts] = []
    groups: dict[LayoutInfo, list[PageWithLayouts]] = defaultdict(list)
    for page in pages:
        layout = page.governing_layout
        if layout is None:
            standalone.append(page)
        else:
            groups[layout].append(page)
    return standalone, dict(groups)


def layout_name(layout: LayoutInfo) -> str:
    """``users-layout`` for prefix ``("users",)``, ``layout`` for the root."""
    base = route_name(layout.segments)
    return f"{base}-layout" if base else "layout"


def _build_standalone(
    page: PageFile,
    descriptor: PageDescriptor,
) -> tuple[RouteNode, RouteEntryInfo]:
    default_name = route_name(page.segments)
    path = segments_to_path(page.segments, leading_slash=True)
    node = apply_override(
        RouteNode(
            path=path,
            name=default_name,
            import_ref=page.import_ref,
            params=segment_params(page.segments),
        ),
        descriptor,
        source=page.path,
    )
    info = RouteEntryInfo(
        name=node.name,
        path=node.path,
        params=node.params,
        default_name=default_name,
    )
    return node, info


def _build_layout(
    layout: LayoutInfo,
    group: Sequence[PageWithLayouts],
    descriptors: Mapping[Path, PageDescriptor],
) -> tuple[RouteNode, list[RouteEntryInfo]]:
    ordered = sorted(group, key=lambda p: p.page.key)

    name = layout_name(layout)
    path = segments_to_path(layout.segments, leading_slash=True)
    params = segment_params(layout.segments)
    infos = [RouteEntryInfo(name=name, path=path, params=params, default_name=name)]

    children: list[RouteNode] = []
    for entry in ordered:
        page = entry.page
        relative = page.segments[len(layout.segments):]
        child_path = segments_to_path(relative, leading_slash=False)
        default_name = route_name(page.segments)
        descriptor = descriptors.get(page.path, EMPTY_DESCRIPTOR)

        child = apply_override(
            RouteNode(
                path=child_path,
                name=default_name,
                import_ref=page.import_ref,
                params=segment_params(relative),
            ),
            descriptor,
            source=page.path,
        )
        override_path = descriptor.override.get("path") if descriptor.override else None
        infos.append(RouteEntryInfo(
            name=child.name,
            path=override_path if override_path is not None else join_paths(path, child_path),
            params=child.params,
            default_name=default_name,
        ))
        children.append(child)

    node = RouteNode(
        path=path,
        name=name,
        import_ref=layout.import_ref,
        children=tuple(children),
        params=params,
    )
    return node, infos


def apply_override(
    node: RouteNode,
    descriptor: PageDescriptor,
    *,
    source: Path | None = None,
) -> RouteNode:
    """Merge a page's declarations into its default node.

    ``name`` and ``path`` replace the defaults, ``meta`` merges per key with
    the separately declared metadata (override wins), and every other field
    is carried in ``extra``.  ``import_ref``, ``children``, and ``params``
    are never overridden.

    Raises:
        ConfigError: If ``name``, ``path``, or ``meta`` has the wrong type.

    """
    override = descriptor.override
    override_meta = _field(override, "meta", dict, source) if override else None

    meta: dict[str, Any] | None = None
    if descriptor.meta or override_meta is not None:
        meta = {**descriptor.meta, **(override_meta or {})}

    if override is None:
        return replace(node, meta=meta)

    name = _field(override, "name", str, source)
    path = _field(override, "path", str, source)
    extra = {
        key: value
        for key, value in override.items()
        if key not in _DERIVED_FIELDS and key not in _HANDLED_FIELDS
    }
    return replace(
        node,
        name=name if name is not None else node.name,
        path=path if path is not None else node.path,
        meta=meta,
        extra=extra,
        override=dict(override),
    )


def _field(override: Mapping[str, Any], key: str, kind: type, source: Path | None) -> Any:
    value = override.get(key)
    if value is None or isinstance(value, kind):
        return value
    where = f" in {source}" if source is not None else ""
    msg = f"Route override{where}: {key!r} must be a {kind.__name__}, got {type(value).__name__}"
    raise ConfigError(msg)
