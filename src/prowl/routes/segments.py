"""Segment translator — filesystem path components to route path components.

Each page file contributes one segment per path component (extension
stripped).  A segment translates on its own, with no filesystem lookups:

    users           -> users          (literal)
    index           -> ""             (index, collapses)
    $id / [id]      -> :id            (dynamic, binds parameter ``id``)
    blog.archive    -> blog/archive   (composite, nested literals)

Rules apply in that priority order: a segment containing a dot is always
composite, even when it also starts with ``$``.
"""

import re
from collections.abc import Sequence

from prowl._types import Segment, SegmentKind

# Sigil prefix marking a dynamic segment ($id)
PARAM_PREFIX = "$"

# File stem marking a layout boundary
LAYOUT_MARKER = "layout"

INDEX_SEGMENT = "index"

_REPEATED_SLASH_RE = re.compile(r"/+")


def extract_param_name(segment: Segment) -> str | None:
    """Return the parameter name bound by *segment*, or *None*.

    ``$id`` and ``[id]`` both bind ``id``.  A marker with nothing inside
    (``$``, ``[]``) binds nothing and is left as a literal.

    """
    if segment.startswith(PARAM_PREFIX):
        name = segment[len(PARAM_PREFIX):]
    elif segment.startswith("[") and segment.endswith("]") and len(segment) >= 2:
        name = segment[1:-1]
    else:
        return None
    return name or None


def classify_segment(segment: Segment) -> SegmentKind:
    """Classify a segment as composite, index, dynamic, or literal."""
    if "." in segment:
        return "composite"
    if segment == INDEX_SEGMENT:
        return "index"
    if extract_param_name(segment) is not None:
        return "dynamic"
    return "literal"


def segment_to_path(segment: Segment) -> str:
    """Translate one segment into a route path fragment (possibly empty)."""
    kind = classify_segment(segment)
    if kind == "composite":
        return "/".join(segment.split("."))
    if kind == "index":
        return ""
    if kind == "dynamic":
        return f":{extract_param_name(segment)}"
    return segment


def segments_to_path(segments: Sequence[Segment], leading_slash: bool) -> str:
    """Join translated segments into a route path.

    Repeated separators collapse and a trailing separator is dropped.  With
    *leading_slash* an empty result becomes the root ``/``; without it the
    cleaned fragment is returned as-is (layout-relative child paths).

    """
    raw = "/".join(segment_to_path(s) for s in segments)
    cleaned = _REPEATED_SLASH_RE.sub("/", raw)
    if cleaned.endswith("/"):
        cleaned = cleaned[:-1]

    if leading_slash:
        if not cleaned:
            return "/"
        return "/" + cleaned
    return cleaned


def join_paths(parent: str, child: str) -> str:
    """Join a layout path and a relative child path.

    ``join_paths("/users", "")``    -> ``/users``
    ``join_paths("/", ":id")``      -> ``/:id``
    ``join_paths("/users", ":id")`` -> ``/users/:id``

    """
    if not child:
        return parent or "/"
    if not parent or parent == "/":
        return _REPEATED_SLASH_RE.sub("/", "/" + child)
    return _REPEATED_SLASH_RE.sub("/", parent.rstrip("/") + "/" + child)


def segment_params(segments: Sequence[Segment]) -> tuple[str, ...]:
    """Return the parameter names bound by *segments*, in order.

    Composite segments never bind parameters.

    """
    return tuple(
        extract_param_name(s)  # type: ignore[misc]
        for s in segments
        if classify_segment(s) == "dynamic"
    )


def layout_marker_index(segments: Sequence[Segment]) -> int | None:
    """Return the position of the layout marker, or *None* for non-layouts.

    A file is a layout when its last segment is ``layout`` or its last two
    segments are ``layout``, ``index``.

    """
    if not segments:
        return None
    if segments[-1] == LAYOUT_MARKER:
        return len(segments) - 1
    if len(segments) >= 2 and segments[-1] == INDEX_SEGMENT and segments[-2] == LAYOUT_MARKER:
        return len(segments) - 2
    return None


def is_layout(segments: Sequence[Segment]) -> bool:
    """Whether *segments* name a layout boundary file."""
    return layout_marker_index(segments) is not None


def segment_name(segment: Segment) -> str:
    """Name fragment for *segment*: ``$id`` and ``[id]`` become ``id``."""
    if classify_segment(segment) == "dynamic":
        return extract_param_name(segment)  # type: ignore[return-value]
    return segment


def route_name(segments: Sequence[Segment]) -> str:
    """Default route name: name fragments joined with ``-``.

    ``("users", "$id")`` -> ``users-id``.

    """
    return "-".join(segment_name(s) for s in segments)
