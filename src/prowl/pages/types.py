"""Data model for route declarations read from page files."""

from dataclasses import dataclass, field
from typing import Any

from prowl._types import RouteMeta


@dataclass(frozen=True, slots=True)
class PageDescriptor:
    """Route declarations extracted from one page file.

    Attributes:
        override: Route override record (name, path, alias, redirect, props,
            meta, and any other route field), or *None* when the page
            declares none.
        meta: Plain metadata map declared separately from the override.

    """

    override: dict[str, Any] | None = None
    meta: RouteMeta = field(default_factory=dict)


EMPTY_DESCRIPTOR = PageDescriptor()
