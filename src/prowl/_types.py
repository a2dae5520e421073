"""Shared type definitions for prowl."""

from typing import Any, Literal

# One path component of a page file, relative to the pages root
type Segment = str

# Kind of a segment after translation
type SegmentKind = Literal["literal", "index", "dynamic", "composite"]

# Route name as registered in the generated table (e.g., "users-id")
type RouteName = str

# Route URL path (e.g., "/users/:id")
type RoutePath = str

# Import specifier from the generated module to a page (e.g., "../pages/index.vue")
type ImportRef = str

# Free-form route metadata
type RouteMeta = dict[str, Any]

# Kind of change detected by the watcher
type ChangeKind = Literal["created", "modified", "deleted"]
