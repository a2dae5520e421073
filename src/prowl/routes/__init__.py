"""Route resolution — page files to a typed, nested route table.

Converts the scanned page files into route paths, unique names, dynamic
parameters, merged metadata, and layout nesting.

Public API::

    from prowl.routes import build_routes

    data = build_routes(Path("src/pages"), Path("src/router/route.gen.ts"))
    for node in data.routes:
        print(node.name, node.path)
"""

from prowl.pages.types import PageDescriptor
from prowl.routes.builder import apply_override, build_route_tree, build_routes
from prowl.routes.differ import RouteChange, diff_route_tables
from prowl.routes.layouts import LayoutInfo, PageFile, PageWithLayouts
from prowl.routes.registry import Registry, RouteEntryInfo, build_registry, to_const_key
from prowl.routes.segments import route_name, segment_to_path, segments_to_path
from prowl.routes.types import RouteData, RouteNode

__all__ = [
    "LayoutInfo",
    "PageDescriptor",
    "PageFile",
    "PageWithLayouts",
    "Registry",
    "RouteChange",
    "RouteData",
    "RouteEntryInfo",
    "RouteNode",
    "apply_override",
    "build_registry",
    "build_route_tree",
    "build_routes",
    "diff_route_tables",
    "route_name",
    "segment_to_path",
    "segments_to_path",
    "to_const_key",
]
