"""TypeScript module rendering for a resolved route table.

Serializes RouteData into a generated module exposing name and path
constants, a parameter-type map, a metadata-type map, and the route table
itself with lazily imported components.  Rendering is a pure function of
the RouteData, so an unchanged table renders to identical text.
"""

import json
import re
from typing import Any

from prowl.routes.types import RouteData, RouteNode

HEADER = (
    "// This file is auto-generated by prowl.",
    "// Do not edit this file directly.",
    "import type { RouteRecordRaw } from 'vue-router';",
)

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def _js(value: Any) -> str:
    """Serialize *value* as a JavaScript literal."""
    return json.dumps(value, ensure_ascii=False, default=str)


def _prop(key: str) -> str:
    """Object property name, quoted only when it is not an identifier."""
    return key if _IDENTIFIER_RE.match(key) else _js(key)


def value_to_literal_type(value: Any, indent: str = "  ") -> str:
    """Return the narrowest TypeScript type describing *value*.

    ``"Users"`` -> ``"Users"``, ``True`` -> ``true``,
    ``["a", "b"]`` -> ``("a" | "b")[]``, ``{"n": 1}`` -> ``{ n: 1 }``.

    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return _js(value)
    if isinstance(value, str):
        return _js(value)
    if isinstance(value, (list, tuple)):
        if not value:
            return "never[]"
        members = list(dict.fromkeys(value_to_literal_type(v, indent) for v in value))
        if len(members) == 1:
            return f"{members[0]}[]"
        return f"({' | '.join(members)})[]"
    if isinstance(value, dict):
        if not value:
            return "Record<string, never>"
        inner = indent + "  "
        fields = [
            f"{inner}{_prop(str(k))}: {value_to_literal_type(v, inner)};"
            for k, v in value.items()
        ]
        return "{\n" + "\n".join(fields) + f"\n{indent}}}"
    return "unknown"


def _params_type(params: tuple[str, ...]) -> str:
    if not params:
        return "Record<string, never>"
    return "{ " + "; ".join(f"{_prop(p)}: string" for p in params) + " }"


def _block(lines: list[str], opening: str, body: list[str], closing: str) -> None:
    lines.append(opening)
    lines.extend(body)
    lines.append(closing)
    lines.append("")


def render_route(node: RouteNode, indent: str = "  ") -> str:
    """Render one route record (and its children) as an object literal."""
    inner = indent + "  "
    lines = [
        f"{indent}{{",
        f"{inner}path: {_js(node.path)},",
        f"{inner}name: {_js(node.name)},",
        f"{inner}component: () => import({_js(node.import_ref)}),",
    ]
    if node.meta is not None:
        lines.append(f"{inner}meta: {_js(node.meta)},")
    for key, value in node.extra.items():
        lines.append(f"{inner}{_prop(key)}: {_js(value)},")

    if node.children:
        lines.append(f"{inner}children: [")
        lines.append(",\n".join(render_route(child, inner + "  ") for child in node.children))
        lines.append(f"{inner}],")
    else:
        lines.append(f"{inner}children: [],")

    lines.append(f"{indent}}}")
    return "\n".join(lines)


def render_routes_module(data: RouteData) -> str:
    """Render the complete generated module for *data*."""
    keys = dict(data.route_keys)
    path_by_name = dict(data.route_path_by_name)
    params_by_name = dict(data.route_params_by_name)

    meta_by_name: dict[str, dict[str, Any]] = {}
    for node in data.iter_nodes():
        if node.meta is not None:
            meta_by_name.setdefault(node.name, node.meta)

    lines: list[str] = [*HEADER, ""]

    _block(lines, "export const ROUTE_NAME = {", [
        f"  {keys[name]}: {_js(name)}," for name in data.route_name_list
    ], "} as const;")
    lines.append("export type RouteName = (typeof ROUTE_NAME)[keyof typeof ROUTE_NAME];")
    lines.append("")

    _block(lines, "export const ROUTE_PATH = {", [
        f"  {keys[name]}: {_js(path_by_name[name])}," for name in data.route_name_list
    ], "} as const;")
    lines.append("export type RoutePath = (typeof ROUTE_PATH)[keyof typeof ROUTE_PATH];")
    lines.append("")

    _block(lines, "export const ROUTE_PATH_BY_NAME = {", [
        f"  {_js(name)}: ROUTE_PATH.{keys[name]}," for name in data.route_name_list
    ], "} as const;")
    lines.append("export type RoutePathByName = typeof ROUTE_PATH_BY_NAME;")
    lines.append("")

    _block(lines, "export interface RouteParamsMap {", [
        f"  {_js(name)}: {_params_type(params_by_name[name])};" for name in data.route_name_list
    ], "}")
    lines.append("export type RouteParamsByName<T extends RouteName> = RouteParamsMap[T];")
    lines.append("")

    _block(lines, "export interface RouteMetaMap {", [
        f"  {_js(name)}: {value_to_literal_type(meta, '  ')};"
        for name, meta in meta_by_name.items()
    ], "}")
    lines.append(
        "export type RouteMetaByName<T extends RouteName> = "
        "T extends keyof RouteMetaMap ? RouteMetaMap[T] : Record<string, never>;"
    )
    lines.append("")

    _block(lines, "export const routeNameList = [", [
        f"  {_js(name)}," for name in data.route_name_list
    ], "] as const;")

    _block(lines, "export const routePathList = [", [
        f"  {_js(path)}," for path in data.route_path_list
    ], "] as const;")

    _block(lines, "export const routePathByName = {", [
        f"  {_js(name)}: {_js(path)}," for name, path in data.route_path_by_name
    ], "} as const;")

    lines.append("export const routes = [")
    if data.routes:
        lines.append(",\n".join(render_route(node) for node in data.routes))
    lines.append("] satisfies RouteRecordRaw[];")
    lines.append("")
    lines.append("export default routes;")

    return "\n".join(lines) + "\n"
