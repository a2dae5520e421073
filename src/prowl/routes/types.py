"""Data models for the resolved route table.

Immutable frozen dataclasses built fresh on every generation run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from prowl._types import ImportRef, RouteMeta, RouteName, RoutePath
from prowl.routes.registry import RouteEntryInfo


@dataclass(frozen=True, slots=True)
class RouteNode:
    """One resolved route, standalone or layout.

    Attributes:
        path: Route path.  Absolute for top-level nodes, relative to the
            layout for layout children (unless overridden).
        name: Route name (override applied).
        import_ref: Import specifier of the page or layout component.
        children: Child routes wrapped by this layout.
        params: Parameter names bound by this node's own path contribution.
        meta: Merged metadata, or *None* when the page declares none.
        extra: Remaining override fields (alias, redirect, props, guards, ...).
        override: The raw override record, kept for inspection.

    """

    path: RoutePath
    name: RouteName
    import_ref: ImportRef
    children: tuple[RouteNode, ...] = ()
    params: tuple[str, ...] = ()
    meta: RouteMeta | None = None
    extra: dict[str, Any] = field(default_factory=dict)
    override: dict[str, Any] | None = None

    @property
    def is_layout(self) -> bool:
        """Whether this node wraps child routes."""
        return bool(self.children)


@dataclass(frozen=True, slots=True)
class RouteData:
    """The complete route table handed to output rendering.

    Attributes:
        routes: Top-level nodes: standalone pages first, then layouts in
            prefix order.
        route_name_list: Unique route names, first-seen order.
        route_path_list: Unique full route paths, first-seen order.
        route_path_by_name: ``(name, path)`` pairs, first occurrence wins.
        route_params_by_name: ``(name, params)`` pairs, first occurrence wins.
        route_key_data: Every flattened entry in construction order.
        route_keys: ``(name, symbolic key)`` pairs.

    """

    routes: tuple[RouteNode, ...]
    route_name_list: tuple[RouteName, ...]
    route_path_list: tuple[RoutePath, ...]
    route_path_by_name: tuple[tuple[RouteName, RoutePath], ...]
    route_params_by_name: tuple[tuple[RouteName, tuple[str, ...]], ...]
    route_key_data: tuple[RouteEntryInfo, ...]
    route_keys: tuple[tuple[RouteName, str], ...]

    def path_for(self, name: RouteName) -> RoutePath | None:
        """Canonical full path for *name*."""
        return dict(self.route_path_by_name).get(name)

    def params_for(self, name: RouteName) -> tuple[str, ...] | None:
        """Canonical parameter names for *name*."""
        return dict(self.route_params_by_name).get(name)

    def key_for(self, name: RouteName) -> str | None:
        """Symbolic key assigned to *name*."""
        return dict(self.route_keys).get(name)

    def iter_nodes(self) -> list[RouteNode]:
        """All nodes, depth-first, in table order."""
        nodes: list[RouteNode] = []
        stack = list(reversed(self.routes))
        while stack:
            node = stack.pop()
            nodes.append(node)
            stack.extend(reversed(node.children))
        return nodes
