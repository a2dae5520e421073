"""Descriptor extraction — route declarations inside page files.

A page is a single-file component.  It may declare its route in one of
two ways, never both::

    <route>
    { name: 'user-detail', meta: { title: 'User' } }
    </route>

    <script setup>
    defineRoute({ path: '/u/:id', alias: ['/profile/:id'] })
    </script>

and may add plain metadata in a ``<meta>`` block::

    <meta>
    { title: 'Users', requiresAuth: true }
    </meta>

Block text is data, not code: it is parsed as JSON5 (unquoted keys, single
quotes, comments, trailing commas), or as YAML when the block declares
``lang="yaml"``.  Only top-level blocks count: they open at the start of a
line, and anything inside ``<template>`` is ignored.  A block that cannot
be parsed is reported through the ``prowl.descriptors`` logger and treated
as absent.  Declaring both ``<route>`` and ``defineRoute()`` is a
configuration error.
"""

import logging
import re
from pathlib import Path
from typing import Any

import json5
import yaml

from prowl._errors import DescriptorError, RouteConflictError
from prowl.pages.types import EMPTY_DESCRIPTOR, PageDescriptor

logger = logging.getLogger("prowl.descriptors")

ROUTE_BLOCK = "<route> custom block"
DEFINE_ROUTE = "defineRoute() macro"
META_BLOCK = "<meta> custom block"

YAML_LANGS: frozenset[str] = frozenset({"yaml", "yml"})

_FLAGS = re.DOTALL | re.IGNORECASE | re.MULTILINE

_TEMPLATE_RE = re.compile(
    r"^<template\b[^\n]*?</template\s*>|^<template\b.*?^</template\s*>", _FLAGS
)
_ROUTE_BLOCK_RE = re.compile(r"^<route(\s[^>]*)?>(.*?)</route\s*>", _FLAGS)
_META_BLOCK_RE = re.compile(r"^<meta(\s[^>]*)?>(.*?)</meta\s*>", _FLAGS)
_LANG_RE = re.compile(r"""\blang\s*=\s*["']?([\w-]+)""", re.IGNORECASE)
_SCRIPT_SETUP_RE = re.compile(r"<script\b[^>]*\bsetup\b[^>]*>(.*?)</script\s*>", _FLAGS)
_DEFINE_ROUTE_RE = re.compile(r"\bdefineRoute\s*\(")


def extract_descriptor(path: Path) -> PageDescriptor:
    """Read *path* and extract its route override and metadata.

    Raises:
        RouteConflictError: If the page uses both ``<route>`` and
            ``defineRoute()``.
        OSError: If the file cannot be read.

    """
    source = path.read_text(encoding="utf-8")
    return parse_descriptor(source, path)


def parse_descriptor(source: str, path: Path) -> PageDescriptor:
    """Extract a PageDescriptor from component *source*.

    *path* is only used for error messages.

    """
    blocks = _strip_template(source)
    route_match = _ROUTE_BLOCK_RE.search(blocks)
    script = _script_setup(blocks)
    call_args = _define_route_args(script) if script is not None else None
    has_define_route = script is not None and _DEFINE_ROUTE_RE.search(script) is not None

    if route_match is not None and has_define_route:
        raise RouteConflictError(path, (ROUTE_BLOCK, DEFINE_ROUTE))

    override: dict[str, Any] | None = None
    if route_match is not None:
        override = _parse_or_warn(
            route_match.group(2), path, ROUTE_BLOCK, _block_lang(route_match.group(1))
        )
    elif call_args is not None:
        override = _parse_or_warn(call_args, path, DEFINE_ROUTE, None)
    elif has_define_route:
        logger.warning("Ignoring %s in %s: unterminated call", DEFINE_ROUTE, path)

    meta: dict[str, Any] | None = None
    meta_match = _META_BLOCK_RE.search(blocks)
    if meta_match is not None:
        meta = _parse_or_warn(
            meta_match.group(2), path, META_BLOCK, _block_lang(meta_match.group(1))
        )

    if override is None and not meta:
        return EMPTY_DESCRIPTOR
    return PageDescriptor(override=override, meta=meta or {})


def parse_block(text: str, lang: str | None = None) -> dict[str, Any] | None:
    """Parse block text into a mapping.

    The text is JSON5 unless *lang* names YAML.  Returns *None* for an
    empty block.

    Raises:
        DescriptorError: If the text is not a valid mapping.

    """
    stripped = text.strip()
    if not stripped:
        return None

    if lang is not None and lang.lower() in YAML_LANGS:
        try:
            data = yaml.safe_load(stripped)
        except yaml.YAMLError as exc:
            msg = f"not valid YAML: {exc}"
            raise DescriptorError(msg) from exc
    else:
        try:
            data = json5.loads(stripped)
        except ValueError as exc:
            msg = f"not valid JSON5: {exc}"
            raise DescriptorError(msg) from exc

    if data is None:
        return None
    if not isinstance(data, dict):
        msg = f"expected an object, got {type(data).__name__}"
        raise DescriptorError(msg)
    return {str(k): v for k, v in data.items()}


def _parse_or_warn(
    text: str, path: Path, mechanism: str, lang: str | None,
) -> dict[str, Any] | None:
    try:
        return parse_block(text, lang)
    except DescriptorError as exc:
        logger.warning("Ignoring %s in %s: %s", mechanism, path, exc)
        return None


def _strip_template(source: str) -> str:
    """Drop the top-level ``<template>`` so markup never reads as a block."""
    return _TEMPLATE_RE.sub("", source)


def _block_lang(attrs: str | None) -> str | None:
    if not attrs:
        return None
    match = _LANG_RE.search(attrs)
    return match.group(1) if match is not None else None


def _script_setup(source: str) -> str | None:
    match = _SCRIPT_SETUP_RE.search(source)
    if match is None:
        return None
    return match.group(1)


def _define_route_args(script: str) -> str | None:
    """Return the argument text of the first ``defineRoute(...)`` call.

    Scans for the matching close paren, skipping parens inside string
    literals.  Returns *None* when there is no call or it is unterminated.

    """
    match = _DEFINE_ROUTE_RE.search(script)
    if match is None:
        return None

    start = match.end()
    depth = 1
    quote: str | None = None
    i = start
    while i < len(script):
        ch = script[i]
        if quote is not None:
            if ch == "\\":
                i += 2
                continue
            if ch == quote:
                quote = None
        elif ch in "\"'`":
            quote = ch
        elif ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth == 0:
                return script[start:i]
        i += 1
    return None
