"""Route differ — what changed between two generated route tables.

Compares tables by route name using each name's canonical (first
occurrence) path and params.  Used by watch mode to report what a
regeneration did.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from prowl.routes.types import RouteData


@dataclass(frozen=True, slots=True)
class RouteChange:
    """A single change between two route tables.

    Attributes:
        kind: Type of change — added, removed, or modified.
        name: Route name.
        old_path: Path before the change (None for additions).
        new_path: Path after the change (None for removals).

    """

    kind: Literal["added", "removed", "modified"]
    name: str
    old_path: str | None
    new_path: str | None

    def describe(self) -> str:
        """One-line human-readable summary."""
        if self.kind == "added":
            return f"+ {self.name} {self.new_path}"
        if self.kind == "removed":
            return f"- {self.name} {self.old_path}"
        return f"~ {self.name} {self.old_path} -> {self.new_path}"


def diff_route_tables(old: RouteData | None, new: RouteData) -> tuple[RouteChange, ...]:
    """Diff two route tables by name.

    Removals come first in old-table order, then additions and
    modifications in new-table order.  A route is modified when its
    canonical path or params differ.  With no *old* table every route
    is an addition.

    """
    old_paths = dict(old.route_path_by_name) if old is not None else {}
    old_params = dict(old.route_params_by_name) if old is not None else {}
    new_paths = dict(new.route_path_by_name)
    new_params = dict(new.route_params_by_name)

    changes: list[RouteChange] = []
    for name, path in old_paths.items():
        if name not in new_paths:
            changes.append(RouteChange(kind="removed", name=name, old_path=path, new_path=None))

    for name, path in new_paths.items():
        if name not in old_paths:
            changes.append(RouteChange(kind="added", name=name, old_path=None, new_path=path))
        elif old_paths[name] != path or old_params.get(name) != new_params.get(name):
            changes.append(
                RouteChange(kind="modified", name=name, old_path=old_paths[name], new_path=path)
            )

    return tuple(changes)
