"""Route registry — flattened name/path tables and symbolic keys.

Built once per generation from the route entries in construction order.
Duplicate names are not an error: the first entry for a name is canonical
for lookups, while every duplicate node stays in the route tree.
"""

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from prowl._types import RouteName, RoutePath

# Fallback symbolic key when a default name normalizes to nothing
FALLBACK_KEY = "ROUTE"

_WORD_BREAK_RE = re.compile(r"([a-z0-9])([A-Z])")
_NON_ALNUM_RE = re.compile(r"[^a-zA-Z0-9]+")


@dataclass(frozen=True, slots=True)
class RouteEntryInfo:
    """One flattened route entry used for registry construction.

    Attributes:
        name: Final route name (override applied).
        path: Final full route path (override applied).
        params: Parameter names contributed by the entry's own path.
        default_name: Name derived from the file location, before overrides.

    """

    name: RouteName
    path: RoutePath
    params: tuple[str, ...]
    default_name: RouteName


@dataclass(frozen=True, slots=True)
class Registry:
    """Global lookup tables over all route entries.

    Attributes:
        unique_names: Route names in first-seen order.
        unique_paths: Route paths in first-seen order.
        path_by_name: Path of the first entry carrying each name.
        params_by_name: Params of the first entry carrying each name.
        key_by_name: Collision-free symbolic key for each unique name.

    """

    unique_names: tuple[RouteName, ...]
    unique_paths: tuple[RoutePath, ...]
    path_by_name: tuple[tuple[RouteName, RoutePath], ...]
    params_by_name: tuple[tuple[RouteName, tuple[str, ...]], ...]
    key_by_name: tuple[tuple[RouteName, str], ...]


def unique[T](values: Iterable[T]) -> tuple[T, ...]:
    """Deduplicate *values*, keeping the first occurrence of each."""
    return tuple(dict.fromkeys(values))


def to_const_key(text: str) -> str:
    """Normalize *text* into an upper-case constant identifier.

    ``user-detail`` -> ``USER_DETAIL``, ``userId`` -> ``USER_ID``.
    Returns an empty string when nothing alphanumeric remains.

    """
    with_breaks = _WORD_BREAK_RE.sub(r"\1_\2", text)
    normalized = _NON_ALNUM_RE.sub("_", with_breaks).strip("_")
    return normalized.upper()


def assign_route_keys(infos: Sequence[RouteEntryInfo]) -> dict[RouteName, str]:
    """Assign a unique symbolic key to every unique route name.

    Keys derive from the *default* name of the first entry carrying each
    name.  Colliding keys get ``_2``, ``_3``, ... in first-seen order.

    """
    default_by_name: dict[RouteName, RouteName] = {}
    for info in infos:
        default_by_name.setdefault(info.name, info.default_name)

    keys: dict[RouteName, str] = {}
    used: set[str] = set()
    for name, default_name in default_by_name.items():
        base = to_const_key(default_name) or FALLBACK_KEY
        key = base
        suffix = 1
        while key in used:
            suffix += 1
            key = f"{base}_{suffix}"
        used.add(key)
        keys[name] = key
    return keys


def build_registry(infos: Sequence[RouteEntryInfo]) -> Registry:
    """Build the registry tables from entries in construction order."""
    path_by_name: dict[RouteName, RoutePath] = {}
    params_by_name: dict[RouteName, tuple[str, ...]] = {}
    for info in infos:
        path_by_name.setdefault(info.name, info.path)
        params_by_name.setdefault(info.name, info.params)

    keys = assign_route_keys(infos)
    return Registry(
        unique_names=unique(info.name for info in infos),
        unique_paths=unique(info.path for info in infos),
        path_by_name=tuple(path_by_name.items()),
        params_by_name=tuple(params_by_name.items()),
        key_by_name=tuple(keys.items()),
    )
